from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from roadmap_block.block_roadmap.common.errors import ReferentialIntegrityError
from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.completion_record import CompletionRecord
from roadmap_block.block_roadmap.domain.namespaced_node import NamespacedNode
from roadmap_block.block_roadmap.domain.node import Node
from roadmap_block.block_roadmap.domain.section import Section


def assemble(
    clusters: Iterable[Cluster],
    sections: Iterable[Section],
    nodes: Iterable[Node],
    completions: Iterable[CompletionRecord],
) -> Tuple[List[NamespacedNode], List[bool]]:
    """
    섹션 → 노드 → 클러스터를 조인하고 노드별 완료 여부를 계산합니다.

    결과 두 리스트는 섹션으로 걸러진 노드 순서와 같은 인덱스를 가집니다.

    @param {Iterable[Cluster]} clusters - 코스의 클러스터 목록.
    @param {Iterable[Section]} sections - 코스의 섹션 목록.
    @param {Iterable[Node]} nodes - 노드 목록.
    @param {Iterable[CompletionRecord]} completions - 한 사용자의 완료 기록.
    @returns {Tuple[List[NamespacedNode], List[bool]]} (클러스터 이름이 붙은 노드, 완료 플래그).
    @raises {ReferentialIntegrityError} 노드의 클러스터가 정확히 하나로 해석되지 않을 때.
    """
    clusters_by_id = _index_clusters(clusters)
    section_ids = {section.id for section in sections}
    completed_modules: Set[int] = {record.course_module_id for record in completions}

    namespaced: List[NamespacedNode] = []
    for node in nodes:
        if node.section_id not in section_ids:
            continue
        cluster = _find_cluster(clusters_by_id, node.cluster_id)
        if cluster is None:
            raise ReferentialIntegrityError(node.id, node.cluster_id, len(clusters_by_id.get(node.cluster_id, [])))
        namespaced.append(NamespacedNode.from_node(node, cluster))

    flags = [node.manual_completion_assignment_id in completed_modules for node in namespaced]
    return namespaced, flags


def _index_clusters(clusters: Iterable[Cluster]) -> Dict[int, List[Cluster]]:
    """
    @param clusters 클러스터 목록.
    @returns 클러스터 ID → 같은 ID의 클러스터 리스트.
    """
    index: Dict[int, List[Cluster]] = {}
    for cluster in clusters:
        index.setdefault(cluster.id, []).append(cluster)
    return index


def _find_cluster(index: Dict[int, List[Cluster]], cluster_id: int) -> Optional[Cluster]:
    """
    @param index 클러스터 인덱스.
    @param cluster_id 찾을 클러스터 ID.
    @returns 정확히 하나가 있을 때만 해당 클러스터, 그 외에는 None.
    """
    matches = index.get(cluster_id, [])
    if len(matches) != 1:
        return None
    return matches[0]
