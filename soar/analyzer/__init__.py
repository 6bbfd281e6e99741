"""
Repository analyzer: walks a codebase, prompts a hosted model, and
validates what comes back.
"""

from soar.analyzer.analyzer import (
    ANALYSIS_TYPES,
    AnalysisRequest,
    ArchitectureAnalyzer,
    analyze_repository,
)
from soar.analyzer.codebase import CodebaseInfo, gather_codebase_info
