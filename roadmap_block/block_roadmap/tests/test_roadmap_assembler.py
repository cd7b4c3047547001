import unittest

from roadmap_block.block_roadmap.common.errors import ReferentialIntegrityError
from roadmap_block.block_roadmap.domain import Cluster, CompletionRecord, Node, Section
from roadmap_block.block_roadmap.repository.mock_data import CLUSTERS, COMPLETIONS, NODES, SECTIONS, USER_ID
from roadmap_block.block_roadmap.service.roadmap.roadmap_assembler import assemble


class RoadmapAssemblerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clusters = [Cluster(id=1, name="Intro", yaml="...")]
        self.sections = [Section(id=10)]
        self.nodes = [Node(id=100, section_id=10, cluster_id=1, manual_completion_assignment_id=5)]

    def test_completed_node_is_flagged(self) -> None:
        """
        완료 기록이 있는 노드가 클러스터 이름과 함께 완료로 표시되는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        nodes, flags = assemble(self.clusters, self.sections, self.nodes, [CompletionRecord(user_id=1, course_module_id=5)])
        self.assertEqual(len(nodes), 1)
        self.assertEqual(nodes[0].id, 100)
        self.assertEqual(nodes[0].cluster_name, "Intro")
        self.assertEqual(nodes[0].manual_completion_assignment_id, 5)
        self.assertEqual(flags, [True])

    def test_no_completions(self) -> None:
        _, flags = assemble(self.clusters, self.sections, self.nodes, [])
        self.assertEqual(flags, [False])

    def test_missing_cluster_raises(self) -> None:
        """
        존재하지 않는 클러스터를 참조하면 참조 무결성 오류가 나는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        nodes = [Node(id=100, section_id=10, cluster_id=2, manual_completion_assignment_id=5)]
        with self.assertRaises(ReferentialIntegrityError) as ctx:
            assemble(self.clusters, self.sections, nodes, [])
        self.assertEqual(ctx.exception.node_id, 100)
        self.assertEqual(ctx.exception.cluster_id, 2)
        self.assertIn("missing cluster reference", str(ctx.exception))

    def test_duplicate_cluster_id_raises(self) -> None:
        clusters = self.clusters + [Cluster(id=1, name="Intro copy", yaml="")]
        with self.assertRaises(ReferentialIntegrityError) as ctx:
            assemble(clusters, self.sections, self.nodes, [])
        self.assertEqual(ctx.exception.matches, 2)

    def test_nodes_outside_sections_are_dropped(self) -> None:
        """
        섹션 목록에 없는 노드는 결과에서 빠지고 순서가 유지되는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        course_sections = [section for section in SECTIONS if section.course_id == 2]
        nodes, flags = assemble(CLUSTERS, course_sections, NODES, COMPLETIONS)
        self.assertEqual([node.id for node in nodes], [100, 101, 102, 103, 104])
        self.assertEqual(len(flags), len(nodes))

    def test_flags_follow_completion_set(self) -> None:
        course_sections = [section for section in SECTIONS if section.course_id == 2]
        user_completions = [record for record in COMPLETIONS if record.user_id == USER_ID]
        nodes, flags = assemble(CLUSTERS, course_sections, NODES, user_completions)
        completed_modules = {record.course_module_id for record in user_completions}
        for node, flag in zip(nodes, flags):
            self.assertEqual(flag, node.manual_completion_assignment_id in completed_modules)
        self.assertEqual(flags, [True, False, True, False, False])

    def test_cluster_names_match_referenced_cluster(self) -> None:
        names = {cluster.id: cluster.name for cluster in CLUSTERS}
        nodes, _ = assemble(CLUSTERS, SECTIONS, NODES, [])
        for node in nodes:
            self.assertEqual(node.cluster_name, names[node.cluster_id])

    def test_same_inputs_same_outputs(self) -> None:
        first = assemble(CLUSTERS, SECTIONS, NODES, COMPLETIONS)
        second = assemble(CLUSTERS, SECTIONS, NODES, COMPLETIONS)
        self.assertEqual(first, second)

    def test_inputs_are_not_mutated(self) -> None:
        clusters = list(CLUSTERS)
        nodes = list(NODES)
        assemble(clusters, SECTIONS, nodes, COMPLETIONS)
        self.assertEqual(clusters, CLUSTERS)
        self.assertEqual(nodes, NODES)

    def test_empty_inputs(self) -> None:
        self.assertEqual(assemble([], [], [], []), ([], []))


if __name__ == "__main__":
    unittest.main()
