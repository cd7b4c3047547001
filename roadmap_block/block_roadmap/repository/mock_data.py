from __future__ import annotations

from roadmap_block.block_roadmap.domain import Cluster, CompletionRecord, Node, Section

COURSE_ID = 2
USER_ID = 7

CLUSTERS = [
    Cluster(
        id=1,
        name="Intro",
        yaml="nodes:\n  - title: HTML 기초\n  - title: CSS 기초\n",
        course_id=COURSE_ID,
    ),
    Cluster(
        id=2,
        name="JavaScript",
        yaml="nodes:\n  - title: 문법\n  - title: DOM\n  - title: 비동기\n",
        course_id=COURSE_ID,
    ),
]

SECTIONS = [
    Section(id=10, course_id=COURSE_ID),
    Section(id=11, course_id=COURSE_ID),
    Section(id=12, course_id=99),
]

NODES = [
    Node(id=100, section_id=10, cluster_id=1, manual_completion_assignment_id=5),
    Node(id=101, section_id=10, cluster_id=1, manual_completion_assignment_id=6),
    Node(id=102, section_id=11, cluster_id=2, manual_completion_assignment_id=7),
    Node(id=103, section_id=11, cluster_id=2, manual_completion_assignment_id=8),
    Node(id=104, section_id=11, cluster_id=2, manual_completion_assignment_id=9),
    # 다른 코스 섹션의 노드
    Node(id=200, section_id=12, cluster_id=1, manual_completion_assignment_id=5),
]

COMPLETIONS = [
    CompletionRecord(user_id=USER_ID, course_module_id=5),
    CompletionRecord(user_id=USER_ID, course_module_id=7),
    CompletionRecord(user_id=8, course_module_id=6),
]
