"""
Schema validation for analysis envelopes.

Untrusted input (model output or a hand-written file) goes in, either a
typed AnalysisResult or the complete list of violations comes out.
Structural problems are returned as data, never raised. The only
exception is ParseError, raised by parse_analysis when the text is not
JSON at all.

Usage:
    result = validate_analysis(payload)
    if not result.success:
        print(format_validation_errors(result.errors))
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from .errors import ParseError, ValidationError
from .models import AnalysisResult


# pydantic-core aborts validation past this many nested models
MAX_NESTING_DEPTH = 250

# pydantic error type -> violation code
CODE_MAP = {
    "missing": "missing",
    "string_too_short": "too_small",
    "too_short": "too_small",
    "greater_than": "too_small",
    "enum": "invalid_enum_value",
    "literal_error": "invalid_enum_value",
    "string_type": "invalid_type",
    "int_type": "invalid_type",
    "float_type": "invalid_type",
    "bool_type": "invalid_type",
    "list_type": "invalid_type",
    "dict_type": "invalid_type",
    "model_type": "invalid_type",
    "model_attributes_type": "invalid_type",
    "finite_number": "invalid_type",
    "recursion_loop": "too_deep",
}

# replaces the engine message where it would mislead
MESSAGE_MAP = {
    "finite_number": "Number must be finite",
    "recursion_loop": f"Nesting exceeds the supported depth of about {MAX_NESTING_DEPTH} levels",
}


@dataclass
class ValidationResult:
    success: bool
    data: Optional[AnalysisResult] = None
    errors: List[ValidationError] = field(default_factory=list)

    @classmethod
    def succeeded(cls, data: AnalysisResult):
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, errors: List[ValidationError]):
        return cls(success=False, errors=errors)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data.to_wire()}
        return {"success": False, "errors": [e.to_dict() for e in self.errors]}


def format_path(loc) -> str:
    return ".".join(str(part) for part in loc) or "root"


def translate_errors(exc: PydanticValidationError) -> List[ValidationError]:
    """Flatten pydantic errors into path/message/code records, in report order."""
    return [
        ValidationError(
            path=format_path(err["loc"]),
            message=MESSAGE_MAP.get(err["type"], err["msg"]),
            code=CODE_MAP.get(err["type"], err["type"]),
        )
        for err in exc.errors(include_url=False)
    ]


def validate_analysis(data: Any) -> ValidationResult:
    """Validate a full envelope: architecture, summary, insights, warnings."""
    try:
        result = AnalysisResult.model_validate(data)
    except PydanticValidationError as exc:
        return ValidationResult.failed(translate_errors(exc))
    return ValidationResult.succeeded(result)


def validate_architecture(data: Any) -> ValidationResult:
    """Validate a bare architecture by wrapping it in an empty envelope."""
    wrapped = {"architecture": data, "summary": "", "insights": [], "warnings": []}
    return validate_analysis(wrapped)


def _reject_constant(name: str):
    raise ParseError(f"Invalid JSON: {name} is not a JSON number")


def parse_analysis(text: str, architecture_only: bool = False) -> ValidationResult:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, json.JSONDecodeError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: nesting is too deep to parse") from e

    if architecture_only:
        return validate_architecture(data)
    return validate_analysis(data)


def format_validation_errors(errors: List[ValidationError]) -> str:
    lines = ["Validation errors:"]
    for err in errors:
        lines.append(f"  - {err.path}: {err.message}")
    return "\n".join(lines)
