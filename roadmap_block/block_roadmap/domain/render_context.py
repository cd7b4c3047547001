from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderContext:
    """블록 렌더링 한 번에 해당하는 코스/사용자 범위."""

    course_id: int
    user_id: int
