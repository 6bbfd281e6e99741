from typing import Any, Dict, List

from soar.schema.kinds import DetailLevel, EdgeKind, NodeKind, depth_ceiling, edge_style, node_style
from soar.schema.models import Edge, Node, SchemaModel


def serialize_model(obj: SchemaModel) -> Dict[str, Any]:
    """Wire form: camelCase keys, unset optionals omitted."""
    return obj.to_wire()


def serialize_node_flat(node: Node) -> Dict[str, Any]:
    """Node without its subtree, plus a child count for expand affordances."""
    data = node.to_wire()
    data.pop("children", None)
    data["childCount"] = len(node.children or [])
    return data


def serialize_nodes_flat(nodes: List[Node]) -> List[Dict[str, Any]]:
    return [serialize_node_flat(n) for n in nodes]


def serialize_edges(edges: List[Edge]) -> List[Dict[str, Any]]:
    return [e.to_wire() for e in edges]


def serialize_kind_styles() -> Dict[str, Any]:
    """Style tables keyed by wire value, for the viewer's legend and materials."""
    return {
        "nodeKinds": {kind.value: node_style(kind) for kind in NodeKind},
        "edgeKinds": {kind.value: edge_style(kind) for kind in EdgeKind},
        "detailLevels": {level.value: depth_ceiling(level) for level in DetailLevel},
    }
