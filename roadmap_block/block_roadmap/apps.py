from django.apps import AppConfig


class BlockRoadmapConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "roadmap_block.block_roadmap"
    label = "block_roadmap"
    verbose_name = "Roadmap block"
