from django.conf import settings
from django.db import models


class Cluster(models.Model):
    """코스에 속한 노드 클러스터와 렌더러용 YAML 설정."""

    course_id = models.PositiveBigIntegerField(help_text="소속 코스 ID")
    name = models.CharField(max_length=255, help_text="클러스터 표시 이름")
    yaml = models.TextField(blank=True, default="", help_text="렌더러용 직렬화 설정 (해석하지 않음)")

    class Meta:
        db_table = "block_roadmap_clusters"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["course_id"], name="roadmap_cluster_course_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.course_id})"


class Section(models.Model):
    """코스 섹션."""

    course_id = models.PositiveBigIntegerField(help_text="소속 코스 ID")

    class Meta:
        db_table = "block_roadmap_sections"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["course_id"], name="roadmap_section_course_idx"),
        ]

    def __str__(self):
        return f"section {self.pk} ({self.course_id})"


class Node(models.Model):
    """로드맵 노드."""

    section = models.ForeignKey(Section, on_delete=models.CASCADE, related_name="nodes")
    cluster = models.ForeignKey(Cluster, on_delete=models.CASCADE, related_name="nodes")
    manual_completion_assignment_id = models.PositiveBigIntegerField(
        help_text="완료 판정에 쓰는 코스 모듈 ID"
    )

    class Meta:
        db_table = "block_roadmap_nodes"
        ordering = ["id"]

    def __str__(self):
        return f"node {self.pk} ({self.cluster_id})"


class CourseModuleCompletion(models.Model):
    """사용자별 코스 모듈 완료 상태."""

    INCOMPLETE = 0
    COMPLETE = 1
    COMPLETE_PASS = 2
    COMPLETE_FAIL = 3
    COMPLETED_STATES = (COMPLETE, COMPLETE_PASS)

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="module_completions")
    course_module_id = models.PositiveBigIntegerField(help_text="코스 모듈 ID")
    completion_state = models.PositiveSmallIntegerField(
        choices=[
            (INCOMPLETE, "Incomplete"),
            (COMPLETE, "Complete"),
            (COMPLETE_PASS, "Complete (pass)"),
            (COMPLETE_FAIL, "Complete (fail)"),
        ],
        default=INCOMPLETE,
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "block_roadmap_module_completion"
        constraints = [
            models.UniqueConstraint(fields=["user", "course_module_id"], name="uniq_user_course_module"),
        ]

    def __str__(self):
        return f"{self.user_id}:{self.course_module_id} ({self.completion_state})"


class RoadmapBlockInstance(models.Model):
    """코스 페이지에 추가된 로드맵 블록과 그 설정."""

    course_id = models.PositiveBigIntegerField(unique=True, help_text="블록이 추가된 코스 ID")
    config_title = models.CharField(max_length=255, blank=True, default="", help_text="사용자 지정 제목")
    config_text = models.TextField(blank=True, default="", help_text="블록 본문 텍스트")
    region = models.CharField(max_length=50, blank=True, default="", help_text="표시 영역 (비어 있으면 기본값)")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "block_roadmap_instances"

    def __str__(self):
        return f"roadmap block ({self.course_id})"
