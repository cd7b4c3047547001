from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """로드맵 노드. 하나의 섹션과 하나의 클러스터에 속한다."""

    id: int
    section_id: int
    cluster_id: int
    manual_completion_assignment_id: int
