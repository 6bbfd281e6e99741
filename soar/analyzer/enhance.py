"""
Repairs applied to raw model output before validation.

The model frequently omits ids and positions. Missing ids are generated
from index and name; missing positions are laid out on a ring whose
height follows the node kind. Anything that is not a dict is left
untouched for the validator to report.
"""

import math
import re

from soar.schema.kinds import DEFAULT_LAYER, NODE_KIND_STYLE, NodeKind


def slugify(text: str) -> str:
    return re.sub(r"\s+", "-", text.strip().lower())


def _kind_layer(raw_kind) -> float:
    try:
        return NODE_KIND_STYLE[NodeKind(raw_kind)]["layer"]
    except ValueError:
        return DEFAULT_LAYER


def ensure_node_ids(nodes: list) -> None:
    for index, node in enumerate(nodes):
        if not isinstance(node, dict):
            continue
        if not node.get("id"):
            name = node.get("name") if isinstance(node.get("name"), str) else ""
            node["id"] = f"node-{index}-{slugify(name)}" if name else f"node-{index}"
        if isinstance(node.get("children"), list):
            ensure_node_ids(node["children"])


def ensure_connection_ids(connections: list) -> None:
    for index, conn in enumerate(connections):
        if isinstance(conn, dict) and not conn.get("id"):
            conn["id"] = f"conn-{index}"


def assign_positions(nodes: list) -> None:
    count = len(nodes)
    for index, node in enumerate(nodes):
        if not isinstance(node, dict) or node.get("position"):
            continue

        angle = (index / count) * math.pi * 2
        radius = 15 + (index // 6) * 5
        node["position"] = {
            "x": math.cos(angle) * radius,
            "y": _kind_layer(node.get("kind", node.get("type"))),
            "z": math.sin(angle) * radius,
        }
        if isinstance(node.get("children"), list):
            assign_positions(node["children"])


def enhance_analysis(data):
    """Fill ids and positions in place; returns data for chaining."""
    if not isinstance(data, dict):
        return data
    architecture = data.get("architecture")
    if not isinstance(architecture, dict):
        return data

    nodes = architecture.get("nodes")
    if isinstance(nodes, list):
        ensure_node_ids(nodes)
        assign_positions(nodes)

    connections = architecture.get("connections")
    if isinstance(connections, list):
        ensure_connection_ids(connections)

    return data
