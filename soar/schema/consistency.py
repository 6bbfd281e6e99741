"""
Reference consistency checks for an already validated architecture.

Schema validation deliberately tolerates these problems so that imperfect
model output still renders. This pass reports them as warnings:
- Duplicate node ids across the forest
- Connections whose source or target id does not resolve
- parentId values that disagree with the actual owning node
- Inverted source line ranges
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .models import Architecture, Node


class IssueSeverity(Enum):
    WARNING = "warning"  # renders, but something is probably wrong
    INFO = "info"


@dataclass
class ReferenceIssue:
    severity: IssueSeverity
    code: str
    message: str
    node_id: Optional[str] = None
    edge_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "node_id": self.node_id,
            "edge_id": self.edge_id,
        }


@dataclass
class ConsistencyReport:
    issues: List[ReferenceIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def is_consistent(self) -> bool:
        return not self.issues

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.INFO)

    def messages(self) -> List[str]:
        return [f"[{i.code}] {i.message}" for i in self.issues]

    def to_dict(self) -> dict:
        return {
            "is_consistent": self.is_consistent,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }


def _walk(nodes: List[Node], parent: Optional[Node], out: list) -> None:
    for node in nodes:
        out.append((node, parent))
        if node.children:
            _walk(node.children, node, out)


def check_references(architecture: Architecture) -> ConsistencyReport:
    pairs = []
    _walk(architecture.nodes, None, pairs)

    issues: List[ReferenceIssue] = []
    issues.extend(_check_duplicate_ids(pairs))
    issues.extend(_check_edge_endpoints(architecture, pairs))
    issues.extend(_check_parent_ids(pairs))
    issues.extend(_check_line_ranges(pairs))

    return ConsistencyReport(
        issues=issues,
        stats={
            "nodes": len(pairs),
            "edges": len(architecture.connections),
            "unique_ids": len({node.id for node, _ in pairs}),
        },
    )


def _check_duplicate_ids(pairs) -> List[ReferenceIssue]:
    issues = []
    seen: Dict[str, int] = defaultdict(int)
    for node, _ in pairs:
        seen[node.id] += 1
    for node_id, count in seen.items():
        if count > 1:
            issues.append(ReferenceIssue(
                severity=IssueSeverity.WARNING,
                code="DUPLICATE_NODE_ID",
                message=f"Node id '{node_id}' appears {count} times",
                node_id=node_id,
            ))
    return issues


def _check_edge_endpoints(architecture: Architecture, pairs) -> List[ReferenceIssue]:
    issues = []
    node_ids = {node.id for node, _ in pairs}
    for edge in architecture.connections:
        if edge.source_id not in node_ids:
            issues.append(ReferenceIssue(
                severity=IssueSeverity.WARNING,
                code="UNKNOWN_SOURCE",
                message=f"Connection '{edge.id}' source '{edge.source_id}' does not exist",
                node_id=edge.source_id,
                edge_id=edge.id,
            ))
        if edge.target_id not in node_ids:
            issues.append(ReferenceIssue(
                severity=IssueSeverity.WARNING,
                code="UNKNOWN_TARGET",
                message=f"Connection '{edge.id}' target '{edge.target_id}' does not exist",
                node_id=edge.target_id,
                edge_id=edge.id,
            ))
    return issues


def _check_parent_ids(pairs) -> List[ReferenceIssue]:
    issues = []
    for node, parent in pairs:
        if node.parent_id is None:
            continue
        actual = parent.id if parent else None
        if node.parent_id != actual:
            where = f"'{actual}'" if actual else "the top level"
            issues.append(ReferenceIssue(
                severity=IssueSeverity.INFO,
                code="PARENT_ID_MISMATCH",
                message=f"Node '{node.id}' declares parent '{node.parent_id}' but is nested under {where}",
                node_id=node.id,
            ))
    return issues


def _check_line_ranges(pairs) -> List[ReferenceIssue]:
    issues = []
    for node, _ in pairs:
        if node.line_start and node.line_end and node.line_end < node.line_start:
            issues.append(ReferenceIssue(
                severity=IssueSeverity.WARNING,
                code="LINE_RANGE_INVERTED",
                message=f"Node '{node.id}' ends at line {node.line_end} before it starts at {node.line_start}",
                node_id=node.id,
            ))
    return issues
