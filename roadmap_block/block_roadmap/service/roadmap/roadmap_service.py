from __future__ import annotations

import logging

from roadmap_block.block_roadmap.common.errors import ReferentialIntegrityError
from roadmap_block.block_roadmap.domain.render_context import RenderContext
from roadmap_block.block_roadmap.domain.roadmap_assembly import RoadmapAssembly
from roadmap_block.block_roadmap.repository.roadmap_store import RoadmapStore
from roadmap_block.block_roadmap.service.roadmap.roadmap_assembler import assemble

logger = logging.getLogger(__name__)


class RoadmapBlockService:
    """코스/사용자 범위의 로드맵 데이터를 조립하는 서비스."""

    def __init__(self, store: RoadmapStore) -> None:
        """
        @param {RoadmapStore} store - 레코드 조회 저장소.
        @returns {None}
        """
        self._store = store

    def build(self, context: RenderContext) -> RoadmapAssembly:
        """
        저장소에서 네 종류의 레코드를 읽어 렌더러용 데이터를 조립합니다.

        @param {RenderContext} context - 코스 ID와 사용자 ID.
        @returns {RoadmapAssembly} 클러스터, 노드, 완료 플래그 묶음.
        @raises {ReferentialIntegrityError} 노드가 없는 클러스터를 참조할 때.
        """
        clusters = self._store.list_clusters(context.course_id)
        sections = self._store.list_sections(context.course_id)
        nodes = self._store.list_nodes(section.id for section in sections)
        completions = self._store.list_completions(context.user_id)

        try:
            namespaced, flags = assemble(clusters, sections, nodes, completions)
        except ReferentialIntegrityError as exc:
            logger.error(
                "Roadmap assembly failed for course %s (user %s): %s",
                context.course_id,
                context.user_id,
                exc,
            )
            raise

        logger.debug(
            "Roadmap assembled for course %s (user %s): %d clusters, %d nodes, %d completed",
            context.course_id,
            context.user_id,
            len(clusters),
            len(namespaced),
            sum(flags),
        )
        return RoadmapAssembly(clusters=clusters, nodes=namespaced, completed=flags)
