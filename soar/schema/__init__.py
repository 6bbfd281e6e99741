"""
Architecture graph schema: models, kind tables, validation.
"""

from soar.schema.kinds import (
    DETAIL_DEPTH,
    EDGE_KIND_STYLE,
    NODE_KIND_STYLE,
    DetailLevel,
    EdgeKind,
    NodeKind,
)
from soar.schema.models import (
    AnalysisResult,
    Architecture,
    DefaultView,
    Edge,
    Layout,
    Node,
    NodeMetrics,
    Position3D,
)
from soar.schema.errors import (
    AnalysisError,
    ConfigurationError,
    ParseError,
    ValidationError,
)
from soar.schema.validation import (
    ValidationResult,
    format_validation_errors,
    parse_analysis,
    validate_analysis,
    validate_architecture,
)
from soar.schema.consistency import (
    ConsistencyReport,
    IssueSeverity,
    ReferenceIssue,
    check_references,
)
