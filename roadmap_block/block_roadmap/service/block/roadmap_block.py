from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.conf import settings
from django.utils.translation import gettext as _

from roadmap_block.block_roadmap.models import RoadmapBlockInstance

DEFAULT_CONTENT_TEXT = "블록 설정에서 본문 텍스트를 지정해 주세요."


def plugin_name() -> str:
    return _("로드맵")


@dataclass
class BlockContent:
    """블록 본문."""

    text: str = ""
    items: List[str] = field(default_factory=list)
    icons: List[str] = field(default_factory=list)
    footer: str = ""


class RoadmapBlock:
    """코스 페이지에 표시되는 로드맵 블록."""

    def __init__(self, instance: Optional[RoadmapBlockInstance] = None) -> None:
        """
        @param instance 블록 인스턴스 (없으면 빈 블록).
        @returns None
        """
        self.instance = instance
        self.title = plugin_name()
        self._content: Optional[BlockContent] = None
        self.specialization()

    def specialization(self) -> None:
        """인스턴스 설정의 제목을 적용한다. 제목은 비어 있을 수 없다."""
        if self.instance is not None and self.instance.config_title.strip():
            self.title = self.instance.config_title
        else:
            self.title = plugin_name()

    def default_region(self) -> str:
        if self.instance is not None and self.instance.region:
            return self.instance.region
        return getattr(settings, "ROADMAP_DEFAULT_REGION", "content")

    def applicable_formats(self) -> Dict[str, bool]:
        return {
            "all": False,
            "course-view": True,
            "course-view-social": False,
        }

    def is_applicable(self, page_format: str) -> bool:
        """
        @param page_format 페이지 형식 (예: "course-view-topics").
        @returns 블록을 추가할 수 있는지 여부.
        """
        formats = self.applicable_formats()
        if page_format in formats:
            return formats[page_format]
        # course-view-topics → course-view → all
        parts = page_format.split("-")
        while len(parts) > 1:
            parts.pop()
            candidate = "-".join(parts)
            if candidate in formats:
                return formats[candidate]
        return formats.get("all", False)

    def get_content(self) -> BlockContent:
        """
        @returns 블록 본문 (처음 계산한 값을 재사용).
        """
        if self._content is not None:
            return self._content

        if self.instance is None:
            self._content = BlockContent()
            return self._content

        text = self.instance.config_text if self.instance.config_text.strip() else DEFAULT_CONTENT_TEXT
        self._content = BlockContent(text=text)
        return self._content
