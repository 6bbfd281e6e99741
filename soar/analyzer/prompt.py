SYSTEM_PROMPT = """
You are an expert software architect. You read a codebase listing and
produce an ARCHITECTURE MODEL as strict JSON.

Rules:
- Output ONLY valid JSON
- No markdown, no explanations
- Every node and connection needs a unique, non-empty id
- Nest modules, classes and functions as "children" of their owner
- Connections reference nodes by id via "sourceId" and "targetId"

Consider:
1. Services and application boundaries
2. Modules grouped inside services
3. Dependencies and how components communicate
4. Databases, caches, queues and storage
5. Third-party APIs and services
6. Languages, frameworks and key libraries

JSON schema:
{
  "architecture": {
    "name": "string",
    "version": "string",
    "description": "string",
    "nodes": [
      {
        "id": "string",
        "name": "string",
        "kind": "service|module|class|function|database|cache|queue|gateway|external|container|region|cluster",
        "description": "string",
        "technology": "string",
        "language": "string",
        "framework": "string",
        "filePath": "string",
        "children": []
      }
    ],
    "connections": [
      {
        "id": "string",
        "sourceId": "node id",
        "targetId": "node id",
        "kind": "http|grpc|websocket|database|queue|import|inheritance|composition|event",
        "label": "string"
      }
    ]
  },
  "summary": "2-3 sentence summary of the architecture",
  "insights": ["key architectural insight"],
  "warnings": ["potential issue"]
}

Be thorough but concise. Focus on the most important components.
"""

ANALYSIS_FOCUS = {
    "full": "Cover services, modules, data stores and external integrations.",
    "services": "Focus on deployable services, gateways, data stores and how they talk.",
    "dependencies": "Focus on module and package dependencies (import connections).",
    "classes": "Focus on major classes, inheritance and composition inside each module.",
}


def _section(items, empty: str) -> str:
    return "\n".join(items) if items else empty


def build_analysis_prompt(info, analysis_type: str = "full") -> str:
    files = _section(
        [f"- {f.path} ({f.language})" for f in info.files],
        "No files provided",
    )
    manifests = _section(
        [f"### {m.path}\n{m.content}" for m in info.package_manifests],
        "No package manifests found",
    )
    entry_points = _section(info.entry_points, "No entry points identified")
    configs = _section(
        [f"### {c.path}\n{c.content}" for c in info.config_files],
        "No config files found",
    )
    focus = ANALYSIS_FOCUS.get(analysis_type, ANALYSIS_FOCUS["full"])

    return f"""Please analyze the following codebase and generate an architecture model.

Repository: {info.repository_path}
Analysis focus: {focus}

## File Structure
{files}

## Package Manifests
{manifests}

## Entry Points
{entry_points}

## Configuration Files
{configs}

Please analyze this codebase and provide a comprehensive architecture model."""
