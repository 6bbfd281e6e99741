"""
Read-only structural queries over a validated architecture.

Nothing here mutates the graph or caches results. Node ids are not
guaranteed unique, so lookups return the first match in document order
(parent before children, children in sequence order).
"""

from collections import Counter
from typing import AbstractSet, Dict, Iterator, List, Optional, Tuple

from soar.schema.kinds import DetailLevel, depth_ceiling
from soar.schema.models import Architecture, Edge, Node


def iter_nodes_with_depth(nodes: List[Node], depth: int = 1) -> Iterator[Tuple[Node, int]]:
    for node in nodes:
        yield node, depth
        if node.children:
            yield from iter_nodes_with_depth(node.children, depth + 1)


def iter_nodes(architecture: Architecture) -> Iterator[Node]:
    for node, _ in iter_nodes_with_depth(architecture.nodes):
        yield node


def find_node(architecture: Architecture, node_id: str) -> Optional[Node]:
    """Return the first node with this id, or None."""
    for node in iter_nodes(architecture):
        if node.id == node_id:
            return node
    return None


def edges_touching(architecture: Architecture, node_id: str) -> List[Edge]:
    """Connections with node_id at either end, in original order."""
    return [
        edge for edge in architecture.connections
        if edge.source_id == node_id or edge.target_id == node_id
    ]


def visible_nodes_with_depth(
    architecture: Architecture,
    detail_level,
    expanded_ids: AbstractSet[str] = frozenset(),
) -> List[Tuple[Node, int]]:
    """
    Progressive disclosure.

    Top-level nodes sit at depth 1 and are always shown. A node's children
    are walked when its depth is below the detail level's ceiling, or when
    its id is in expanded_ids.
    """
    ceiling = depth_ceiling(detail_level)
    result: List[Tuple[Node, int]] = []

    def collect(nodes: List[Node], depth: int) -> None:
        for node in nodes:
            result.append((node, depth))
            if node.children and (depth < ceiling or node.id in expanded_ids):
                collect(node.children, depth + 1)

    collect(architecture.nodes, 1)
    return result


def visible_nodes(
    architecture: Architecture,
    detail_level,
    expanded_ids: AbstractSet[str] = frozenset(),
) -> List[Node]:
    return [node for node, _ in visible_nodes_with_depth(architecture, detail_level, expanded_ids)]


def node_depth_map(architecture: Architecture) -> Dict[str, int]:
    depths: Dict[str, int] = {}
    for node, depth in iter_nodes_with_depth(architecture.nodes):
        depths.setdefault(node.id, depth)
    return depths


def count_node_kinds(architecture: Architecture) -> Dict[str, int]:
    counts = Counter(node.kind.value for node in iter_nodes(architecture))
    return dict(counts)


def count_edge_kinds(architecture: Architecture) -> Dict[str, int]:
    counts = Counter(edge.kind.value for edge in architecture.connections)
    return dict(counts)


def default_detail_level(architecture: Architecture) -> DetailLevel:
    if architecture.default_view:
        return architecture.default_view.detail_level
    return DetailLevel.SERVICE
