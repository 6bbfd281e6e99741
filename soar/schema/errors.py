from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ValidationError:
    path: str      # dotted location, e.g. architecture.nodes.0.id
    message: str
    code: str      # missing | too_small | invalid_enum_value | invalid_type | ...

    def to_dict(self) -> dict:
        return {"path": self.path, "message": self.message, "code": self.code}


class ParseError(ValueError):
    """Input text is not well-formed JSON."""


class AnalysisError(RuntimeError):
    """Model output could not be turned into a valid analysis envelope."""

    def __init__(self, message: str, errors: Optional[List[ValidationError]] = None):
        super().__init__(message)
        self.errors = errors or []


class ConfigurationError(RuntimeError):
    """A required setting is missing from the environment."""

    def __init__(self, setting: str, hint: str = ""):
        self.setting = setting
        self.hint = hint
        text = f"{setting} environment variable is required"
        if hint:
            text = f"{text} ({hint})"
        super().__init__(text)
