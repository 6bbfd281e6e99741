"""
Repository walk that collects what the model needs to see: a file
listing, package manifests, config files and likely entry points.
"""

import fnmatch
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

import structlog

from soar import config

logger = structlog.get_logger()


MANIFEST_FILES = {
    "package.json", "go.mod", "go.sum", "Cargo.toml",
    "requirements.txt", "pyproject.toml", "setup.py",
    "pom.xml", "build.gradle", "build.gradle.kts",
    "Gemfile", "composer.json", "mix.exs",
}

# matched as case-insensitive substrings of the file name
CONFIG_PATTERNS = [
    "docker-compose.yml", "docker-compose.yaml", "dockerfile",
    "kubernetes.yml", "kubernetes.yaml", "k8s.yml", "k8s.yaml",
    ".env.example", "config.yml", "config.yaml", "config.json",
    "tsconfig.json", "vite.config.ts", "webpack.config.js",
    "nginx.conf", "makefile", "cmakelists.txt",
]

ENTRY_POINT_FILES = {
    "main.go", "main.py", "main.ts", "main.js", "index.ts", "index.js",
    "app.py", "app.ts", "app.js", "server.ts", "server.js",
    "Main.java", "Application.java", "main.rs", "lib.rs",
}

EXTENSION_LANGUAGE = {
    ".ts": "typescript", ".tsx": "typescript",
    ".js": "javascript", ".jsx": "javascript",
    ".py": "python",
    ".go": "go",
    ".java": "java",
    ".rs": "rust",
    ".rb": "ruby",
    ".cs": "csharp",
    ".cpp": "cpp", ".c": "c", ".h": "c",
    ".scala": "scala",
    ".kt": "kotlin",
    ".swift": "swift",
    ".proto": "protobuf",
    ".yaml": "yaml", ".yml": "yaml",
    ".json": "json",
    ".md": "markdown",
    ".sql": "sql",
}

SKIP_DIRS = {
    "node_modules", "vendor", ".git", "dist", "build", "target",
    "__pycache__", ".venv", "venv", ".idea", ".vscode", "coverage",
    ".next", ".nuxt", "out", "bin", "obj", ".gradle",
}


@dataclass
class SourceFile:
    path: str
    language: str


@dataclass
class FileContent:
    path: str
    content: str


@dataclass
class CodebaseInfo:
    repository_path: str
    files: List[SourceFile] = field(default_factory=list)
    package_manifests: List[FileContent] = field(default_factory=list)
    entry_points: List[str] = field(default_factory=list)
    config_files: List[FileContent] = field(default_factory=list)


def _matches(path: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(path, p) for p in patterns)


def _is_config(name: str) -> bool:
    lowered = name.lower()
    return any(p in lowered for p in CONFIG_PATTERNS)


def _read_small(path: Path, max_size: int) -> Optional[str]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("codebase_read_skipped", path=str(path), error=str(e))
        return None
    if len(content) > max_size:
        return None
    return content


def gather_codebase_info(
    repository_path,
    max_depth: int = 5,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
    max_files: int = None,
    max_file_size: int = None,
) -> CodebaseInfo:
    root = Path(repository_path)
    max_files = max_files or config.ANALYSIS_MAX_FILES
    max_file_size = max_file_size or config.ANALYSIS_MAX_FILE_SIZE

    info = CodebaseInfo(repository_path=str(root))
    if not root.exists():
        logger.warning("repository_not_found", path=str(root))
        return info

    def walk(directory: Path, depth: int) -> None:
        if depth > max_depth or len(info.files) >= max_files:
            return

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.debug("codebase_dir_skipped", path=str(directory), error=str(e))
            return

        for entry in entries:
            if len(info.files) >= max_files:
                break
            name = entry.name
            if name.startswith(".") and name != ".env.example":
                continue
            if name in SKIP_DIRS:
                continue

            relative = entry.relative_to(root).as_posix()
            if exclude_patterns and _matches(relative, exclude_patterns):
                continue

            if entry.is_dir():
                walk(entry, depth + 1)
                continue
            if not entry.is_file():
                continue

            language = EXTENSION_LANGUAGE.get(entry.suffix.lower())
            included = not include_patterns or _matches(relative, include_patterns)
            if language and included:
                info.files.append(SourceFile(path=relative, language=language))

            if name in MANIFEST_FILES:
                content = _read_small(entry, max_file_size)
                if content is not None:
                    info.package_manifests.append(FileContent(relative, content))

            if _is_config(name):
                content = _read_small(entry, max_file_size)
                if content is not None:
                    info.config_files.append(FileContent(relative, content))

            if name in ENTRY_POINT_FILES:
                info.entry_points.append(relative)

    walk(root, 0)

    logger.info(
        "codebase_gathered",
        path=str(root),
        files=len(info.files),
        manifests=len(info.package_manifests),
        configs=len(info.config_files),
        entry_points=len(info.entry_points),
    )
    return info
