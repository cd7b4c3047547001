# =============================================================================
# 렌더러 브리지
# =============================================================================
# 조립된 로드맵 데이터를 클라이언트 스크립트 호출 형태로 바꿉니다.
# 페이지는 호출 정보를 JSON으로 심고, static/block_roadmap/roadmap.js 가
# 이를 읽어 #roadmap 컨테이너에 렌더러를 마운트합니다.
#
#   init(nodes, clusters, completed, dependencies)
#
# 렌더러 플래그는 clusters 만 사용하며 completed/dependencies 는
# 전달만 되고 아직 해석되지 않습니다.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.roadmap_assembly import RoadmapAssembly

RENDERER_MODULE = "block_roadmap/roadmap"
RENDERER_FUNCTION = "init"
MOUNT_ELEMENT_ID = "roadmap"


@dataclass(frozen=True)
class RendererCall:
    """클라이언트에서 실행할 렌더러 진입점 호출."""

    module: str
    function: str
    arguments: List[Any] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "module": self.module,
            "function": self.function,
            "arguments": self.arguments,
            "mount": MOUNT_ELEMENT_ID,
        }


def serialize_clusters(clusters: Sequence[Cluster]) -> List[Dict[str, Any]]:
    """
    @param clusters 클러스터 리스트.
    @returns id/name/yaml 딕셔너리 리스트.
    """
    return [{"id": cluster.id, "name": cluster.name, "yaml": cluster.yaml} for cluster in clusters]


def build_renderer_call(assembly: RoadmapAssembly) -> RendererCall:
    """
    @param assembly 조립된 로드맵 데이터.
    @returns 렌더러 init 호출 정보 (JSON 직렬화 가능).
    """
    return RendererCall(
        module=RENDERER_MODULE,
        function=RENDERER_FUNCTION,
        arguments=[
            [node.as_dict() for node in assembly.nodes],
            serialize_clusters(assembly.clusters),
            list(assembly.completed),
            list(assembly.dependencies),
        ],
    )


def build_renderer_flags(
    clusters: Sequence[Cluster],
    completed: Sequence[bool] = (),
    dependencies: Sequence[Any] = (),
) -> Dict[str, List[Any]]:
    """
    roadmap.js 가 렌더러에 넘기는 플래그와 같은 모양을 만듭니다.

    @param {Sequence[Cluster]} clusters - 클러스터 리스트.
    @param {Sequence[bool]} completed - 노드별 완료 플래그 (렌더러 미사용).
    @param {Sequence[Any]} dependencies - 선수 관계 (렌더러 미사용).
    @returns {Dict[str, List[Any]]} {"clusters": [{"cluster", "yaml"}], "completed", "dependencies"}.
    """
    return {
        "clusters": [{"cluster": cluster.name, "yaml": cluster.yaml} for cluster in clusters],
        "completed": list(completed),
        "dependencies": list(dependencies),
    }
