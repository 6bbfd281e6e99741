from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field, Strict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .kinds import DetailLevel, EdgeKind, NodeKind


# ---- Field helpers ----

def _required(message: str):
    def check(value: str) -> str:
        if not value:
            raise PydanticCustomError("too_small", message)
        return value
    return check


def _at_least_one_node(nodes: list) -> list:
    if not nodes:
        raise PydanticCustomError("too_small", "Architecture must have at least one node")
    return nodes


Number = Annotated[float, Strict()]
PositiveNumber = Annotated[float, Strict(), Field(gt=0)]
PositiveInt = Annotated[int, Strict(), Field(gt=0)]
Flag = Annotated[bool, Strict()]

HealthStatus = Literal["healthy", "degraded", "unhealthy", "unknown"]
DataFlow = Literal["request", "response", "stream", "event"]
LayoutType = Literal["force", "hierarchical", "radial", "manual"]


class SchemaModel(BaseModel):
    """
    Base for every wire-level model.

    Wire keys are camelCase, attributes snake_case. Unknown keys are
    dropped. Instances are frozen once validated. NaN and infinities are
    rejected so every dump stays valid JSON.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ---- Shared shapes ----

class Position3D(SchemaModel):
    x: Number
    y: Number
    z: Number


class NodeMetrics(SchemaModel):
    requests_per_second: Optional[Number] = None
    latency_ms: Optional[Number] = None
    error_rate: Optional[Number] = None
    cpu_percent: Optional[Number] = None
    memory_percent: Optional[Number] = None
    connections: Optional[Number] = None


# ---- Graph ----

class Node(SchemaModel):
    id: Annotated[str, AfterValidator(_required("Node id is required"))]
    name: Annotated[str, AfterValidator(_required("Node name is required"))]
    kind: NodeKind = Field(validation_alias=AliasChoices("kind", "type"))
    description: Optional[str] = None

    # visual hints
    position: Optional[Position3D] = None
    color: Optional[str] = None
    size: Optional[PositiveNumber] = None

    # informational only, ownership is expressed by nesting
    parent_id: Optional[str] = None

    # source location
    file_path: Optional[str] = None
    line_start: Optional[PositiveInt] = None
    line_end: Optional[PositiveInt] = None

    # tech stack
    technology: Optional[str] = None
    language: Optional[str] = None
    framework: Optional[str] = None

    # live data
    health: Optional[HealthStatus] = None
    metrics: Optional[NodeMetrics] = None

    # deployment
    region: Optional[str] = None
    instances: Optional[PositiveInt] = None

    metadata: Optional[Dict[str, Any]] = None

    children: Optional[List["Node"]] = None


Node.model_rebuild()


class Edge(SchemaModel):
    id: Annotated[str, AfterValidator(_required("Connection id is required"))]
    source_id: Annotated[str, AfterValidator(_required("Connection sourceId is required"))]
    target_id: Annotated[str, AfterValidator(_required("Connection targetId is required"))]
    kind: EdgeKind = Field(validation_alias=AliasChoices("kind", "type"))
    label: Optional[str] = None

    color: Optional[str] = None
    thickness: Optional[PositiveNumber] = None
    animated: Optional[Flag] = None

    bidirectional: Optional[Flag] = None
    data_flow: Optional[DataFlow] = None

    requests_per_second: Optional[Number] = None
    latency_ms: Optional[Number] = None
    error_rate: Optional[Number] = None

    metadata: Optional[Dict[str, Any]] = None


class Layout(SchemaModel):
    type: LayoutType
    spacing: Optional[PositiveNumber] = None
    layers: Optional[List[List[str]]] = None


class DefaultView(SchemaModel):
    position: Position3D
    target: Position3D
    detail_level: DetailLevel


class Architecture(SchemaModel):
    name: Annotated[str, AfterValidator(_required("Architecture name is required"))]
    version: Annotated[str, AfterValidator(_required("Architecture version is required"))]
    description: Optional[str] = None
    generated_at: Optional[str] = None
    source_repository: Optional[str] = None

    nodes: Annotated[List[Node], AfterValidator(_at_least_one_node)]
    connections: List[Edge]

    layout: Optional[Layout] = None
    default_view: Optional[DefaultView] = None


# ---- Envelope ----

class AnalysisResult(SchemaModel):
    architecture: Architecture
    summary: str
    insights: List[str]
    warnings: List[str]
