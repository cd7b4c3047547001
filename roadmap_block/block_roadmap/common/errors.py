from __future__ import annotations


class ReferentialIntegrityError(ValueError):
    """노드가 존재하지 않는 클러스터를 참조함."""

    def __init__(self, node_id: int, cluster_id: int, matches: int = 0) -> None:
        """
        @param node_id 문제가 된 노드 ID.
        @param cluster_id 노드가 참조한 클러스터 ID.
        @param matches 해당 ID로 찾은 클러스터 수 (0 또는 2 이상).
        @returns None
        """
        self.node_id = node_id
        self.cluster_id = cluster_id
        self.matches = matches
        if matches == 0:
            message = f"missing cluster reference: node {node_id} -> cluster {cluster_id}"
        else:
            message = f"ambiguous cluster reference: node {node_id} -> cluster {cluster_id} ({matches} matches)"
        super().__init__(message)
