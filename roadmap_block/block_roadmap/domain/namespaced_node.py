from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.node import Node


@dataclass(frozen=True)
class NamespacedNode:
    """소속 클러스터 이름이 붙은 노드."""

    id: int
    section_id: int
    cluster_id: int
    manual_completion_assignment_id: int
    cluster_name: str

    @classmethod
    def from_node(cls, node: Node, cluster: Cluster) -> "NamespacedNode":
        """
        @param node 원본 노드.
        @param cluster 노드가 참조하는 클러스터.
        @returns 클러스터 이름이 추가된 새 노드.
        """
        return cls(
            id=node.id,
            section_id=node.section_id,
            cluster_id=node.cluster_id,
            manual_completion_assignment_id=node.manual_completion_assignment_id,
            cluster_name=cluster.name,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "section": self.section_id,
            "cluster": self.cluster_id,
            "manual_completion_assignment_id": self.manual_completion_assignment_id,
            "cluster_name": self.cluster_name,
        }
