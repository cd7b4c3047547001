from __future__ import annotations

from typing import Iterable, List, Optional

from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.completion_record import CompletionRecord
from roadmap_block.block_roadmap.domain.node import Node
from roadmap_block.block_roadmap.domain.section import Section
from roadmap_block.block_roadmap.repository.roadmap_store import RoadmapStore


class InMemoryRoadmapStore(RoadmapStore):
    """메모리 기반 로드맵 저장소. 완료 기록은 이미 완료된 것만 담는다."""

    def __init__(
        self,
        clusters: Optional[List[Cluster]] = None,
        sections: Optional[List[Section]] = None,
        nodes: Optional[List[Node]] = None,
        completions: Optional[List[CompletionRecord]] = None,
    ) -> None:
        """
        @param clusters 클러스터 리스트.
        @param sections 섹션 리스트.
        @param nodes 노드 리스트.
        @param completions 완료 기록 리스트.
        @returns None
        """
        self._clusters = list(clusters or [])
        self._sections = list(sections or [])
        self._nodes = list(nodes or [])
        self._completions = list(completions or [])

    def list_clusters(self, course_id: int) -> List[Cluster]:
        return [cluster for cluster in self._clusters if cluster.course_id == course_id]

    def list_sections(self, course_id: int) -> List[Section]:
        return [section for section in self._sections if section.course_id == course_id]

    def list_nodes(self, section_ids: Iterable[int]) -> List[Node]:
        wanted = set(section_ids)
        return sorted((node for node in self._nodes if node.section_id in wanted), key=lambda node: node.id)

    def list_completions(self, user_id: int) -> List[CompletionRecord]:
        return [record for record in self._completions if record.user_id == user_id]
