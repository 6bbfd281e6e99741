from dataclasses import dataclass, field
from typing import List, Literal, Optional

import structlog

from soar.analyzer.base import LLMClient
from soar.analyzer.codebase import CodebaseInfo, gather_codebase_info
from soar.analyzer.config import get_llm_client
from soar.analyzer.enhance import enhance_analysis
from soar.analyzer.prompt import SYSTEM_PROMPT, build_analysis_prompt
from soar.schema.consistency import check_references
from soar.schema.errors import AnalysisError
from soar.schema.models import AnalysisResult
from soar.schema.validation import validate_analysis
from soar.utils.json_extract import extract_json

logger = structlog.get_logger()

AnalysisType = Literal["full", "services", "dependencies", "classes"]
ANALYSIS_TYPES = ("full", "services", "dependencies", "classes")


@dataclass
class AnalysisRequest:
    repository_path: str
    analysis_type: AnalysisType = "full"
    max_depth: int = 3
    include_patterns: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=list)


class ArchitectureAnalyzer:
    """
    Asks a hosted model for an architecture model of a repository.

    Usage:
        analyzer = ArchitectureAnalyzer()
        result = analyzer.analyze(AnalysisRequest("./my-project"))
    """

    def __init__(self, client: Optional[LLMClient] = None, provider: Optional[str] = None):
        self.client = client or get_llm_client(provider)

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        info = self.describe(request)
        raw = self.client.generate(
            [{"role": "user", "content": build_analysis_prompt(info, request.analysis_type)}],
            system=SYSTEM_PROMPT,
        )
        return self.interpret(raw)

    def interpret(self, raw: str) -> AnalysisResult:
        """Model reply text -> validated envelope."""
        data = enhance_analysis(extract_json(raw))

        validation = validate_analysis(data)
        if not validation.success:
            logger.error("analysis_invalid", errors=len(validation.errors))
            raise AnalysisError(
                f"Model output failed validation with {len(validation.errors)} error(s)",
                validation.errors,
            )

        report = check_references(validation.data.architecture)
        for message in report.messages():
            logger.warning("analysis_reference_issue", issue=message)

        logger.info(
            "analysis_complete",
            nodes=report.stats["nodes"],
            edges=report.stats["edges"],
        )
        return validation.data

    def describe(self, request: AnalysisRequest) -> CodebaseInfo:
        return gather_codebase_info(
            request.repository_path,
            max_depth=request.max_depth,
            include_patterns=request.include_patterns,
            exclude_patterns=request.exclude_patterns,
        )


def analyze_repository(repository_path: str, provider: Optional[str] = None, **options) -> AnalysisResult:
    analyzer = ArchitectureAnalyzer(provider=provider)
    return analyzer.analyze(AnalysisRequest(repository_path=repository_path, **options))
