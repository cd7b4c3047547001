from django.urls import path

from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from roadmap_block.block_roadmap.controller.roadmap_views import (
    HealthCheckAPIView,
    RoadmapDataAPIView,
    course_roadmap_view,
)

urlpatterns = [
    # OpenAPI 스키마 및 문서
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    # 헬스체크 API
    path("api/health/", HealthCheckAPIView.as_view(), name="health-check"),

    # 로드맵 데이터 API
    path("api/roadmap/<int:course_id>", RoadmapDataAPIView.as_view(), name="roadmap-data"),

    # 코스 페이지 블록
    path("course/<int:course_id>/roadmap/", course_roadmap_view, name="course-roadmap"),
]
