from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompletionRecord:
    """사용자가 완료한 코스 모듈 기록."""

    user_id: int
    course_module_id: int
