from dataclasses import dataclass, field
from typing import List, Optional, Set

from soar.query.graph import edges_touching, find_node, visible_nodes
from soar.schema.kinds import DetailLevel
from soar.schema.models import Architecture, Edge, Node, Position3D


@dataclass
class ViewSession:
    """
    Mutable presentation state for one viewer session.

    Owns the loaded architecture plus selection, hover, expansion, detail
    level, display toggles and camera pose. The architecture itself is
    never modified; queries receive detail level and expanded ids as
    plain arguments.
    """
    architecture: Optional[Architecture] = None
    is_loading: bool = False
    error: Optional[str] = None

    selected_node_id: Optional[str] = None
    hovered_node_id: Optional[str] = None
    expanded_node_ids: Set[str] = field(default_factory=set)

    detail_level: DetailLevel = DetailLevel.SERVICE
    show_connections: bool = True
    show_labels: bool = True
    animate_connections: bool = True

    camera_position: Position3D = field(
        default_factory=lambda: Position3D(x=0.0, y=10.0, z=20.0)
    )

    # ---- Actions ----

    def set_architecture(self, architecture: Architecture) -> None:
        self.architecture = architecture
        self.error = None

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
        self.is_loading = False

    def select_node(self, node_id: Optional[str]) -> None:
        self.selected_node_id = node_id

    def hover_node(self, node_id: Optional[str]) -> None:
        self.hovered_node_id = node_id

    def toggle_node_expanded(self, node_id: str) -> bool:
        """Flip expansion for node_id; returns the new state."""
        if node_id in self.expanded_node_ids:
            self.expanded_node_ids.discard(node_id)
            return False
        self.expanded_node_ids.add(node_id)
        return True

    def set_detail_level(self, level) -> None:
        self.detail_level = DetailLevel(level)

    def set_show_connections(self, show: bool) -> None:
        self.show_connections = show

    def set_show_labels(self, show: bool) -> None:
        self.show_labels = show

    def set_animate_connections(self, animate: bool) -> None:
        self.animate_connections = animate

    def set_camera_position(self, position: Position3D) -> None:
        self.camera_position = position

    # ---- Queries ----

    def get_node(self, node_id: str) -> Optional[Node]:
        if self.architecture is None:
            return None
        return find_node(self.architecture, node_id)

    def get_node_connections(self, node_id: str) -> List[Edge]:
        if self.architecture is None:
            return []
        return edges_touching(self.architecture, node_id)

    def get_visible_nodes(self) -> List[Node]:
        if self.architecture is None:
            return []
        return visible_nodes(
            self.architecture,
            self.detail_level,
            frozenset(self.expanded_node_ids),
        )

    def to_dict(self) -> dict:
        return {
            "loaded": self.architecture is not None,
            "isLoading": self.is_loading,
            "error": self.error,
            "selectedNodeId": self.selected_node_id,
            "hoveredNodeId": self.hovered_node_id,
            "expandedNodeIds": sorted(self.expanded_node_ids),
            "detailLevel": self.detail_level.value,
            "showConnections": self.show_connections,
            "showLabels": self.show_labels,
            "animateConnections": self.animate_connections,
            "cameraPosition": self.camera_position.to_wire(),
        }
