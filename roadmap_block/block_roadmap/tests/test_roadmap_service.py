import unittest

from roadmap_block.block_roadmap.common.errors import ReferentialIntegrityError
from roadmap_block.block_roadmap.domain import Cluster, Node, RenderContext, Section
from roadmap_block.block_roadmap.repository import InMemoryRoadmapStore
from roadmap_block.block_roadmap.repository.mock_data import (
    CLUSTERS,
    COMPLETIONS,
    COURSE_ID,
    NODES,
    SECTIONS,
    USER_ID,
)
from roadmap_block.block_roadmap.service.roadmap.roadmap_service import RoadmapBlockService


class RoadmapBlockServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        store = InMemoryRoadmapStore(CLUSTERS, SECTIONS, NODES, COMPLETIONS)
        self.service = RoadmapBlockService(store)

    def test_build_scopes_to_course_and_user(self) -> None:
        """
        코스 섹션의 노드와 해당 사용자의 완료 기록만 반영되는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        assembly = self.service.build(RenderContext(course_id=COURSE_ID, user_id=USER_ID))
        self.assertEqual([node.id for node in assembly.nodes], [100, 101, 102, 103, 104])
        self.assertEqual(assembly.completed, [True, False, True, False, False])
        self.assertEqual([cluster.name for cluster in assembly.clusters], ["Intro", "JavaScript"])
        self.assertEqual(assembly.dependencies, [])

    def test_other_user_sees_own_completions(self) -> None:
        assembly = self.service.build(RenderContext(course_id=COURSE_ID, user_id=8))
        self.assertEqual(assembly.completed, [False, True, False, False, False])

    def test_unknown_course_is_empty(self) -> None:
        assembly = self.service.build(RenderContext(course_id=12345, user_id=USER_ID))
        self.assertEqual(assembly.nodes, [])
        self.assertEqual(assembly.completed, [])

    def test_cluster_from_other_course_is_a_fault(self) -> None:
        """
        다른 코스의 클러스터를 참조하는 노드가 오류로 드러나는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        store = InMemoryRoadmapStore(
            clusters=[Cluster(id=1, name="Intro", yaml="", course_id=1), Cluster(id=9, name="Other", yaml="", course_id=2)],
            sections=[Section(id=10, course_id=1)],
            nodes=[Node(id=100, section_id=10, cluster_id=9, manual_completion_assignment_id=5)],
        )
        with self.assertLogs("roadmap_block.block_roadmap.service.roadmap.roadmap_service", level="ERROR"):
            with self.assertRaises(ReferentialIntegrityError):
                RoadmapBlockService(store).build(RenderContext(course_id=1, user_id=USER_ID))


if __name__ == "__main__":
    unittest.main()
