from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.db import connection
from django.db.utils import DatabaseError
from django.shortcuts import render
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from roadmap_block.block_roadmap.controller.serializers import HealthCheckSerializer, RoadmapPayloadSerializer
from roadmap_block.block_roadmap.domain.render_context import RenderContext
from roadmap_block.block_roadmap.models import RoadmapBlockInstance
from roadmap_block.block_roadmap.repository.orm_roadmap_store import OrmRoadmapStore
from roadmap_block.block_roadmap.service.block.roadmap_block import RoadmapBlock
from roadmap_block.block_roadmap.service.roadmap.renderer_bridge import (
    MOUNT_ELEMENT_ID,
    build_renderer_call,
    build_renderer_flags,
    serialize_clusters,
)
from roadmap_block.block_roadmap.service.roadmap.roadmap_service import RoadmapBlockService


@login_required
def course_roadmap_view(request, course_id: int):
    """
    코스 페이지에 로드맵 블록을 렌더링합니다.

    @param request Django 요청 객체.
    @param course_id 코스 ID.
    @returns 블록 HTML 응답.
    """
    instance = RoadmapBlockInstance.objects.filter(course_id=course_id).first()
    block = RoadmapBlock(instance)
    context = RenderContext(course_id=course_id, user_id=request.user.pk)
    assembly = RoadmapBlockService(OrmRoadmapStore()).build(context)

    return render(
        request,
        "block_roadmap/block.html",
        {
            "block": block,
            "content": block.get_content(),
            "region": block.default_region(),
            "mount_id": MOUNT_ELEMENT_ID,
            "renderer_call": build_renderer_call(assembly).as_dict(),
            "renderer_url": settings.ROADMAP_RENDERER_URL,
        },
    )


class RoadmapDataAPIView(APIView):
    """로그인한 사용자의 코스 로드맵 데이터."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[OpenApiParameter("course_id", OpenApiTypes.INT, OpenApiParameter.PATH, description="코스 ID")],
        responses=RoadmapPayloadSerializer,
    )
    def get(self, request, course_id: int) -> Response:
        """
        @param request DRF 요청 객체.
        @param course_id 코스 ID.
        @returns 클러스터/노드/완료 플래그 JSON.
        """
        context = RenderContext(course_id=course_id, user_id=request.user.pk)
        assembly = RoadmapBlockService(OrmRoadmapStore()).build(context)
        payload: Dict[str, object] = {
            "course_id": context.course_id,
            "user_id": context.user_id,
            "clusters": serialize_clusters(assembly.clusters),
            "nodes": [node.as_dict() for node in assembly.nodes],
            "completed": assembly.completed,
            "dependencies": assembly.dependencies,
            "flags": build_renderer_flags(assembly.clusters, assembly.completed, assembly.dependencies),
        }
        return Response(RoadmapPayloadSerializer(payload).data)


class HealthCheckAPIView(APIView):
    """
    API 헬스체크 엔드포인트.

    데이터베이스 연결 여부를 함께 확인합니다.
    """

    @extend_schema(
        summary="헬스체크",
        responses={200: HealthCheckSerializer},
    )
    def get(self, request) -> Response:
        """
        @param {Request} request - DRF 요청 객체.
        @returns {Response} 서비스 상태 응답.
        """
        try:
            connection.ensure_connection()
            database_ok = True
        except DatabaseError:
            database_ok = False

        payload = {
            "status": "ok" if database_ok else "degraded",
            "version": settings.SPECTACULAR_SETTINGS["VERSION"],
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": database_ok,
        }
        return Response(HealthCheckSerializer(payload).data)
