from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from roadmap_block.block_roadmap.common.errors import ReferentialIntegrityError

logger = logging.getLogger(__name__)


def roadmap_exception_handler(exc, context):
    """
    DRF 기본 핸들러에 로드맵 참조 무결성 오류 처리를 더합니다.

    @param exc 발생한 예외.
    @param context DRF 뷰 컨텍스트.
    @returns {Response | None} 처리한 경우 응답, 아니면 None.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, ReferentialIntegrityError):
        logger.error("Rejecting roadmap request: %s", exc)
        return Response(
            {
                "detail": str(exc),
                "node_id": exc.node_id,
                "cluster_id": exc.cluster_id,
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return None
