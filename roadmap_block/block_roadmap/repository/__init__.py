from roadmap_block.block_roadmap.repository.in_memory_roadmap_store import InMemoryRoadmapStore
from roadmap_block.block_roadmap.repository.roadmap_store import RoadmapStore

__all__ = [
    "InMemoryRoadmapStore",
    "RoadmapStore",
]
