import pytest

from soar.sample_data import sample_analysis, sample_payload
from soar.schema.models import Architecture


def make_node(id: str, name: str = "", kind: str = "service", children=None) -> dict:
    node = {"id": id, "name": name or id.title(), "kind": kind}
    if children is not None:
        node["children"] = children
    return node


def make_edge(id: str, source: str, target: str, kind: str = "http") -> dict:
    return {"id": id, "sourceId": source, "targetId": target, "kind": kind}


def make_envelope(nodes=None, connections=None, **architecture) -> dict:
    arch = {
        "name": "Test Architecture",
        "version": "1.0.0",
        "nodes": nodes if nodes is not None else [make_node("n1", "Svc")],
        "connections": connections if connections is not None else [],
    }
    arch.update(architecture)
    return {"architecture": arch, "summary": "", "insights": [], "warnings": []}


def build_architecture(nodes, connections=None) -> Architecture:
    return Architecture.model_validate(make_envelope(nodes, connections)["architecture"])


@pytest.fixture
def sample():
    return sample_analysis()


@pytest.fixture
def sample_dict():
    return sample_payload()


@pytest.fixture
def deep_forest() -> Architecture:
    """Two roots; the first is four levels deep."""
    return build_architecture([
        make_node("root", kind="service", children=[
            make_node("mod", kind="module", children=[
                make_node("cls", kind="class", children=[
                    make_node("fn", kind="function"),
                ]),
            ]),
            make_node("mod2", kind="module"),
        ]),
        make_node("db", kind="database"),
    ], [
        make_edge("e1", "root", "db", "database"),
        make_edge("e2", "mod", "mod2", "import"),
        make_edge("e3", "fn", "ghost", "composition"),
    ])
