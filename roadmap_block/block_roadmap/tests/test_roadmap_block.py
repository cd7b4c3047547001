from django.test import SimpleTestCase, override_settings

from roadmap_block.block_roadmap.models import RoadmapBlockInstance
from roadmap_block.block_roadmap.service.block.roadmap_block import DEFAULT_CONTENT_TEXT, RoadmapBlock, plugin_name


class RoadmapBlockTests(SimpleTestCase):
    def test_title_defaults_to_plugin_name(self) -> None:
        """
        설정 제목이 비어 있으면 플러그인 이름을 제목으로 쓰는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        self.assertEqual(RoadmapBlock().title, plugin_name())
        self.assertEqual(RoadmapBlock(RoadmapBlockInstance(course_id=2, config_title="  ")).title, plugin_name())

    def test_configured_title(self) -> None:
        block = RoadmapBlock(RoadmapBlockInstance(course_id=2, config_title="학습 지도"))
        self.assertEqual(block.title, "학습 지도")

    def test_content_without_instance_is_empty(self) -> None:
        content = RoadmapBlock().get_content()
        self.assertEqual(content.text, "")
        self.assertEqual(content.items, [])
        self.assertEqual(content.footer, "")

    def test_content_text(self) -> None:
        """
        본문 텍스트가 설정값 또는 기본 안내 문구로 채워지는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        configured = RoadmapBlock(RoadmapBlockInstance(course_id=2, config_text="이번 학기 로드맵"))
        self.assertEqual(configured.get_content().text, "이번 학기 로드맵")
        unconfigured = RoadmapBlock(RoadmapBlockInstance(course_id=2))
        self.assertEqual(unconfigured.get_content().text, DEFAULT_CONTENT_TEXT)

    def test_content_is_cached(self) -> None:
        instance = RoadmapBlockInstance(course_id=2, config_text="first")
        block = RoadmapBlock(instance)
        first = block.get_content()
        instance.config_text = "second"
        self.assertIs(block.get_content(), first)

    def test_default_region(self) -> None:
        self.assertEqual(RoadmapBlock().default_region(), "content")
        self.assertEqual(RoadmapBlock(RoadmapBlockInstance(course_id=2, region="side-pre")).default_region(), "side-pre")

    @override_settings(ROADMAP_DEFAULT_REGION="header")
    def test_default_region_from_settings(self) -> None:
        self.assertEqual(RoadmapBlock().default_region(), "header")

    def test_applicable_formats(self) -> None:
        """
        코스 보기 페이지에서만 블록을 쓸 수 있는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        block = RoadmapBlock()
        self.assertEqual(block.applicable_formats(), {"all": False, "course-view": True, "course-view-social": False})
        self.assertTrue(block.is_applicable("course-view"))
        self.assertTrue(block.is_applicable("course-view-topics"))
        self.assertFalse(block.is_applicable("course-view-social"))
        self.assertFalse(block.is_applicable("site-index"))
        self.assertFalse(block.is_applicable("my"))
