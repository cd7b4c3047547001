from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cluster:
    """렌더러에 전달되는 노드 묶음(클러스터)."""

    id: int
    name: str
    yaml: str
    course_id: int = 0
