from __future__ import annotations

from rest_framework import serializers


class ClusterSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    yaml = serializers.CharField(allow_blank=True)


class NamespacedNodeSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    section = serializers.IntegerField()
    cluster = serializers.IntegerField()
    manual_completion_assignment_id = serializers.IntegerField()
    cluster_name = serializers.CharField()


class RendererClusterFlagSerializer(serializers.Serializer):
    cluster = serializers.CharField()
    yaml = serializers.CharField(allow_blank=True)


class RendererFlagsSerializer(serializers.Serializer):
    clusters = RendererClusterFlagSerializer(many=True)
    completed = serializers.ListField(child=serializers.BooleanField())
    dependencies = serializers.ListField(child=serializers.JSONField())


class RoadmapPayloadSerializer(serializers.Serializer):
    course_id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    clusters = ClusterSerializer(many=True)
    nodes = NamespacedNodeSerializer(many=True)
    completed = serializers.ListField(child=serializers.BooleanField())
    dependencies = serializers.ListField(child=serializers.JSONField())
    flags = RendererFlagsSerializer()


class HealthCheckSerializer(serializers.Serializer):
    status = serializers.CharField()
    version = serializers.CharField()
    timestamp = serializers.CharField()
    database = serializers.BooleanField()
