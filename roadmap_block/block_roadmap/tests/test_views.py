import json

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse

from roadmap_block.block_roadmap import models


class RoadmapViewTests(TestCase):
    @classmethod
    def setUpTestData(cls) -> None:
        cls.user = get_user_model().objects.create_user(username="student", password="pw")
        cls.cluster = models.Cluster.objects.create(course_id=2, name="Intro", yaml="nodes: []")
        cls.section = models.Section.objects.create(course_id=2)
        cls.node = models.Node.objects.create(section=cls.section, cluster=cls.cluster, manual_completion_assignment_id=5)
        models.CourseModuleCompletion.objects.create(
            user=cls.user,
            course_module_id=5,
            completion_state=models.CourseModuleCompletion.COMPLETE,
        )
        models.RoadmapBlockInstance.objects.create(course_id=2, config_title="코스 로드맵", config_text="안내")

    def test_api_requires_login(self) -> None:
        response = self.client.get(reverse("roadmap-data", args=[2]))
        self.assertIn(response.status_code, (401, 403))

    def test_api_payload(self) -> None:
        """
        로드맵 API가 클러스터, 노드, 완료 플래그, 렌더러 플래그를 반환하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        self.client.force_login(self.user)
        response = self.client.get(reverse("roadmap-data", args=[2]))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["course_id"], 2)
        self.assertEqual(body["user_id"], self.user.pk)
        self.assertEqual(body["nodes"][0]["cluster_name"], "Intro")
        self.assertEqual(body["completed"], [True])
        self.assertEqual(body["dependencies"], [])
        self.assertEqual(body["flags"]["clusters"], [{"cluster": "Intro", "yaml": "nodes: []"}])

    def test_api_reports_referential_fault(self) -> None:
        self.client.force_login(self.user)
        # 다른 코스 클러스터를 참조하는 노드
        foreign = models.Cluster.objects.create(course_id=3, name="Elsewhere", yaml="")
        broken = models.Node.objects.create(section=self.section, cluster=foreign, manual_completion_assignment_id=9)
        with self.assertLogs("roadmap_block.block_roadmap", level="ERROR"):
            response = self.client.get(reverse("roadmap-data", args=[2]))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["node_id"], broken.pk)
        self.assertEqual(response.json()["cluster_id"], foreign.pk)

    @override_settings(ROADMAP_RENDERER_URL="/static/renderer/elm.js")
    def test_course_page_renders_block(self) -> None:
        """
        코스 페이지에 마운트 컨테이너와 렌더러 호출 JSON이 들어가는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        self.client.force_login(self.user)
        response = self.client.get(reverse("course-roadmap", args=[2]))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'id="roadmap"')
        self.assertContains(response, "코스 로드맵")
        self.assertContains(response, "/static/renderer/elm.js")
        self.assertContains(response, 'id="block-roadmap-call"')
        call = json.loads(json.dumps(response.context["renderer_call"]))
        self.assertEqual(call["function"], "init")
        self.assertEqual(call["arguments"][2], [True])

    def test_course_page_requires_login(self) -> None:
        response = self.client.get(reverse("course-roadmap", args=[2]))
        self.assertEqual(response.status_code, 302)

    def test_health_check(self) -> None:
        response = self.client.get(reverse("health-check"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")
        self.assertTrue(response.json()["database"])
