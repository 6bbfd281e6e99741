import pytest

from conftest import build_architecture, make_edge, make_node
from soar.query import (
    count_edge_kinds,
    count_node_kinds,
    default_detail_level,
    edges_touching,
    find_node,
    iter_nodes,
    node_depth_map,
    visible_nodes,
    visible_nodes_with_depth,
)
from soar.schema import DetailLevel


def ids(nodes):
    return [n.id for n in nodes]


# ---- find_node ----

def test_find_node_at_every_depth(deep_forest):
    for node_id in ["root", "mod", "cls", "fn", "mod2", "db"]:
        assert find_node(deep_forest, node_id).id == node_id


def test_find_node_missing_returns_none(deep_forest):
    assert find_node(deep_forest, "ghost") is None
    assert find_node(deep_forest, "") is None


def test_find_node_returns_first_match_in_document_order():
    arch = build_architecture([
        make_node("a", children=[make_node("dup", name="Nested", kind="module")]),
        make_node("dup", name="TopLevel"),
    ])

    assert find_node(arch, "dup").name == "Nested"


def test_find_node_parent_wins_over_descendant():
    arch = build_architecture([
        make_node("x", name="Outer", children=[make_node("x", name="Inner", kind="module")]),
    ])

    assert find_node(arch, "x").name == "Outer"


def test_iter_nodes_is_pre_order(deep_forest):
    assert ids(iter_nodes(deep_forest)) == ["root", "mod", "cls", "fn", "mod2", "db"]


# ---- edges_touching ----

def test_edges_touching_either_end(deep_forest):
    assert ids(edges_touching(deep_forest, "root")) == ["e1"]
    assert ids(edges_touching(deep_forest, "db")) == ["e1"]
    assert ids(edges_touching(deep_forest, "mod")) == ["e2"]


def test_edges_touching_dangling_target(deep_forest):
    assert ids(edges_touching(deep_forest, "ghost")) == ["e3"]


def test_edges_touching_self_loop_appears_once():
    arch = build_architecture(
        [make_node("a"), make_node("b")],
        [make_edge("loop", "a", "a"), make_edge("ab", "a", "b"), make_edge("bb", "b", "b")],
    )

    assert ids(edges_touching(arch, "a")) == ["loop", "ab"]


def test_edges_touching_unknown_node(deep_forest):
    assert edges_touching(deep_forest, "nope") == []


# ---- visible_nodes ----

@pytest.mark.parametrize("level, expected", [
    ("overview", ["root", "db"]),
    ("service", ["root", "mod", "mod2", "db"]),
    ("module", ["root", "mod", "cls", "mod2", "db"]),
    ("code", ["root", "mod", "cls", "fn", "mod2", "db"]),
])
def test_visible_nodes_per_detail_level(deep_forest, level, expected):
    assert ids(visible_nodes(deep_forest, level)) == expected


def test_visible_nodes_accepts_enum(deep_forest):
    assert ids(visible_nodes(deep_forest, DetailLevel.OVERVIEW)) == ["root", "db"]


def test_expansion_reveals_children_past_ceiling(deep_forest):
    visible = visible_nodes(deep_forest, "overview", {"root"})
    assert ids(visible) == ["root", "mod", "mod2", "db"]


def test_expansion_of_hidden_node_has_no_effect(deep_forest):
    assert ids(visible_nodes(deep_forest, "overview", {"mod"})) == ["root", "db"]


def test_expansion_chain(deep_forest):
    visible = visible_nodes(deep_forest, "overview", {"root", "mod", "cls"})
    assert ids(visible) == ["root", "mod", "cls", "fn", "mod2", "db"]


def test_expanding_a_leaf_is_harmless(deep_forest):
    assert ids(visible_nodes(deep_forest, "code", {"fn", "db"})) == ids(iter_nodes(deep_forest))


def test_visible_nodes_with_depth(deep_forest):
    pairs = visible_nodes_with_depth(deep_forest, "module")
    assert [(n.id, d) for n, d in pairs] == [
        ("root", 1), ("mod", 2), ("cls", 3), ("mod2", 2), ("db", 1),
    ]


def test_visible_nodes_unknown_level(deep_forest):
    with pytest.raises(ValueError):
        visible_nodes(deep_forest, "galaxy")


def test_visible_nodes_on_sample(sample):
    arch = sample.architecture
    assert len(visible_nodes(arch, "overview")) == 10
    assert len(visible_nodes(arch, "service")) == 17
    assert len(visible_nodes(arch, "module")) == 21
    assert len(visible_nodes(arch, "code")) == 21


def test_visible_is_subset_of_all(sample):
    every = ids(iter_nodes(sample.architecture))
    for level in DetailLevel:
        shown = ids(visible_nodes(sample.architecture, level))
        assert set(shown) <= set(every)


# ---- Counts and depths ----

def test_node_depth_map(deep_forest):
    assert node_depth_map(deep_forest) == {
        "root": 1, "mod": 2, "cls": 3, "fn": 4, "mod2": 2, "db": 1,
    }


def test_count_kinds(deep_forest):
    assert count_node_kinds(deep_forest) == {
        "service": 1, "module": 2, "class": 1, "function": 1, "database": 1,
    }
    assert count_edge_kinds(deep_forest) == {"database": 1, "import": 1, "composition": 1}


def test_sample_covers_every_kind(sample):
    assert len(count_node_kinds(sample.architecture)) == 12
    assert len(count_edge_kinds(sample.architecture)) == 9


def test_default_detail_level(sample, deep_forest):
    assert default_detail_level(sample.architecture) is DetailLevel.SERVICE
    assert default_detail_level(deep_forest) is DetailLevel.SERVICE
