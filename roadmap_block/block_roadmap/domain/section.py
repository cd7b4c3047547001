from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    """코스 섹션."""

    id: int
    course_id: int = 0
