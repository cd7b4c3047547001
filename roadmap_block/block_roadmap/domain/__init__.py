from roadmap_block.block_roadmap.domain.cluster import Cluster
from roadmap_block.block_roadmap.domain.completion_record import CompletionRecord
from roadmap_block.block_roadmap.domain.namespaced_node import NamespacedNode
from roadmap_block.block_roadmap.domain.node import Node
from roadmap_block.block_roadmap.domain.render_context import RenderContext
from roadmap_block.block_roadmap.domain.roadmap_assembly import RoadmapAssembly
from roadmap_block.block_roadmap.domain.section import Section

__all__ = [
    "Cluster",
    "CompletionRecord",
    "NamespacedNode",
    "Node",
    "RenderContext",
    "RoadmapAssembly",
    "Section",
]
