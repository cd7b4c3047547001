from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.completion_record import CompletionRecord
from roadmap_block.block_roadmap.domain.node import Node
from roadmap_block.block_roadmap.domain.section import Section


class RoadmapStore(ABC):
    """로드맵 레코드 조회 인터페이스 (읽기 전용)."""

    @abstractmethod
    def list_clusters(self, course_id: int) -> List[Cluster]:
        """
        @param course_id 코스 ID.
        @returns 코스의 클러스터 리스트.
        """
        raise NotImplementedError

    @abstractmethod
    def list_sections(self, course_id: int) -> List[Section]:
        """
        @param course_id 코스 ID.
        @returns 코스의 섹션 리스트.
        """
        raise NotImplementedError

    @abstractmethod
    def list_nodes(self, section_ids: Iterable[int]) -> List[Node]:
        """
        @param section_ids 섹션 ID 목록.
        @returns 해당 섹션들에 속한 노드 리스트 (ID 순).
        """
        raise NotImplementedError

    @abstractmethod
    def list_completions(self, user_id: int) -> List[CompletionRecord]:
        """
        @param user_id 사용자 ID.
        @returns 완료 상태인 코스 모듈 기록만.
        """
        raise NotImplementedError
