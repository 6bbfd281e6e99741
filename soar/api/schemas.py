from typing import Optional

from soar.schema.kinds import DetailLevel
from soar.schema.models import Position3D, SchemaModel


class ViewUpdate(SchemaModel):
    """Partial update of the viewer session; omitted fields are left alone."""
    detail_level: Optional[DetailLevel] = None
    selected_node_id: Optional[str] = None
    hovered_node_id: Optional[str] = None
    show_connections: Optional[bool] = None
    show_labels: Optional[bool] = None
    animate_connections: Optional[bool] = None
    camera_position: Optional[Position3D] = None
