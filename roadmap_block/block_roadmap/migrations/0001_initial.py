from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Cluster",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("course_id", models.PositiveBigIntegerField(help_text="소속 코스 ID")),
                ("name", models.CharField(help_text="클러스터 표시 이름", max_length=255)),
                ("yaml", models.TextField(blank=True, default="", help_text="렌더러용 직렬화 설정 (해석하지 않음)")),
            ],
            options={
                "db_table": "block_roadmap_clusters",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["course_id"], name="roadmap_cluster_course_idx")],
            },
        ),
        migrations.CreateModel(
            name="Section",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("course_id", models.PositiveBigIntegerField(help_text="소속 코스 ID")),
            ],
            options={
                "db_table": "block_roadmap_sections",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["course_id"], name="roadmap_section_course_idx")],
            },
        ),
        migrations.CreateModel(
            name="RoadmapBlockInstance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("course_id", models.PositiveBigIntegerField(help_text="블록이 추가된 코스 ID", unique=True)),
                ("config_title", models.CharField(blank=True, default="", help_text="사용자 지정 제목", max_length=255)),
                ("config_text", models.TextField(blank=True, default="", help_text="블록 본문 텍스트")),
                ("region", models.CharField(blank=True, default="", help_text="표시 영역 (비어 있으면 기본값)", max_length=50)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "block_roadmap_instances",
            },
        ),
        migrations.CreateModel(
            name="Node",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("manual_completion_assignment_id", models.PositiveBigIntegerField(help_text="완료 판정에 쓰는 코스 모듈 ID")),
                (
                    "cluster",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="nodes",
                        to="block_roadmap.cluster",
                    ),
                ),
                (
                    "section",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="nodes",
                        to="block_roadmap.section",
                    ),
                ),
            ],
            options={
                "db_table": "block_roadmap_nodes",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="CourseModuleCompletion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("course_module_id", models.PositiveBigIntegerField(help_text="코스 모듈 ID")),
                (
                    "completion_state",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (0, "Incomplete"),
                            (1, "Complete"),
                            (2, "Complete (pass)"),
                            (3, "Complete (fail)"),
                        ],
                        default=0,
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="module_completions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "block_roadmap_module_completion",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "course_module_id"), name="uniq_user_course_module")
                ],
            },
        ),
    ]
