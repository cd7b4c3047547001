from __future__ import annotations

from typing import Iterable, List

from roadmap_block.block_roadmap import models
from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.completion_record import CompletionRecord
from roadmap_block.block_roadmap.domain.node import Node
from roadmap_block.block_roadmap.domain.section import Section
from roadmap_block.block_roadmap.repository.roadmap_store import RoadmapStore


class OrmRoadmapStore(RoadmapStore):
    """Django ORM 기반 로드맵 저장소."""

    def list_clusters(self, course_id: int) -> List[Cluster]:
        """
        @param course_id 코스 ID.
        @returns 코스의 클러스터 리스트.
        """
        rows = models.Cluster.objects.filter(course_id=course_id).values("id", "name", "yaml", "course_id")
        return [Cluster(**row) for row in rows]

    def list_sections(self, course_id: int) -> List[Section]:
        """
        @param course_id 코스 ID.
        @returns 코스의 섹션 리스트.
        """
        rows = models.Section.objects.filter(course_id=course_id).values("id", "course_id")
        return [Section(**row) for row in rows]

    def list_nodes(self, section_ids: Iterable[int]) -> List[Node]:
        """
        @param section_ids 섹션 ID 목록.
        @returns 해당 섹션들에 속한 노드 리스트.
        """
        ids = list(section_ids)
        if not ids:
            return []
        rows = models.Node.objects.filter(section_id__in=ids).values(
            "id", "section_id", "cluster_id", "manual_completion_assignment_id"
        )
        return [Node(**row) for row in rows]

    def list_completions(self, user_id: int) -> List[CompletionRecord]:
        """
        @param user_id 사용자 ID.
        @returns 완료 상태(완료/통과)인 기록 리스트.
        """
        rows = models.CourseModuleCompletion.objects.filter(
            user_id=user_id,
            completion_state__in=models.CourseModuleCompletion.COMPLETED_STATES,
        ).values_list("course_module_id", flat=True)
        return [CompletionRecord(user_id=user_id, course_module_id=module_id) for module_id in rows]
