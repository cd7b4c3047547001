from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.namespaced_node import NamespacedNode


@dataclass(frozen=True)
class RoadmapAssembly:
    """렌더러에 넘길 로드맵 데이터 묶음."""

    clusters: List[Cluster]
    nodes: List[NamespacedNode]
    completed: List[bool]
    # 선수 관계는 아직 계산하지 않는다.
    dependencies: List[Any] = field(default_factory=list)
