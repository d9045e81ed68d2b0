"""Tests for encoding nodes to records and parsing them back."""

import pytest

from nodetreelib import (
    Node,
    RecordFields,
    RecordShapeError,
    ConfigurationError,
    record_builder,
    record_destructurer,
)
from nodetreelib.core.codec import RecordParts


EXAMPLE_RECORD = {
    "id": 0,
    "content": "zero",
    "children": [
        {"id": 1, "content": "one", "children": []},
        {
            "id": 2,
            "content": "two",
            "children": [
                {"id": 3, "content": "three", "children": []},
                {"id": 4, "content": "four", "children": []},
            ],
        },
    ],
}


def shape(node):
    """Reduce a tree to nested (id, content, children) tuples for comparison."""
    return (node.id, node.content, [shape(child) for child in node.children])


def test_default_encode(example_tree):
    assert example_tree.node0.encode() == EXAMPLE_RECORD


def test_encode_leaf():
    assert Node("x").encode() == {"id": "x", "content": None, "children": []}


def test_default_round_trip(example_tree):
    parsed = Node.parse(example_tree.node0.encode())

    assert shape(parsed) == shape(example_tree.node0)
    assert all(a is not b for a, b in zip(parsed, example_tree.node0))


def test_parse_links_parents():
    root = Node.parse(EXAMPLE_RECORD)
    four = root.child(2).child(4)

    assert four.lineage() == [four, root.child(2), root]
    assert root.is_root()


def test_parse_missing_content_defaults_to_none():
    root = Node.parse({"id": "a", "children": [{"id": "b", "children": []}]})
    assert root.content is None
    assert root.child("b").content is None


def test_custom_hook_pair_round_trip(example_tree):
    def build(node, encode_children):
        return {"key": node.id, "value": node.content, "kids": encode_children()}

    def destructure(record):
        return record["key"], record["value"], record["kids"]

    encoded = example_tree.node0.encode(build)
    assert encoded["kids"][1]["kids"][0] == {"key": 3, "value": "three", "kids": []}

    parsed = Node.parse(encoded, destructure)
    assert shape(parsed) == shape(example_tree.node0)


def test_custom_builder_decides_whether_to_encode_children(example_tree):
    calls = []

    def build(node, encode_children):
        calls.append(node.id)
        if node.id == 2:
            return {"id": node.id}
        return {"id": node.id, "children": encode_children()}

    encoded = example_tree.node0.encode(build)

    assert encoded == {"id": 0, "children": [{"id": 1, "children": []}, {"id": 2}]}
    assert calls == [0, 1, 2]


def test_tuple_records():
    def build(node, encode_children):
        return (node.id, node.content, encode_children())

    root = Node("r", 1).push(Node("a", 2), Node("b", 3))
    encoded = root.encode(build)
    assert encoded == ("r", 1, [("a", 2, []), ("b", 3, [])])

    parsed = Node.parse(encoded, lambda record: record)
    assert shape(parsed) == shape(root)


def test_destructure_may_return_mapping():
    def destructure(record):
        return {"id": record["n"], "content": None, "children": record["c"]}

    root = Node.parse({"n": 1, "c": [{"n": 2, "c": []}]}, destructure)
    assert [node.id for node in root] == [1, 2]


def test_destructure_may_return_record_parts():
    root = Node.parse(
        {"n": 1, "c": []},
        lambda record: RecordParts(record["n"], "x", record["c"]),
    )
    assert (root.id, root.content) == (1, "x")


def test_fields_shortcut_round_trip(example_tree):
    fields = RecordFields(id="key", content="data", children="items")
    encoded = example_tree.node0.encode(fields=fields)

    assert set(encoded) == {"key", "data", "items"}
    assert shape(Node.parse(encoded, fields=fields)) == shape(example_tree.node0)


def test_legacy_layout_uses_nodes_key(example_tree):
    encoded = example_tree.node0.encode(fields=RecordFields.legacy())

    assert encoded["nodes"][0] == {"id": 1, "content": "one", "nodes": []}
    parsed = Node.parse(encoded, fields=RecordFields.legacy())
    assert shape(parsed) == shape(example_tree.node0)


def test_builder_and_destructurer_factories_are_inverse(example_tree):
    fields = RecordFields(children="sub")
    encoded = example_tree.node0.encode(record_builder(fields))
    parsed = Node.parse(encoded, record_destructurer(fields))
    assert shape(parsed) == shape(example_tree.node0)


def test_hook_and_fields_together_rejected(example_tree):
    with pytest.raises(ValueError):
        example_tree.node0.encode(record_builder(), fields=RecordFields())
    with pytest.raises(ValueError):
        Node.parse(EXAMPLE_RECORD, record_destructurer(), fields=RecordFields())


def test_invalid_fields_rejected():
    with pytest.raises(ConfigurationError):
        record_builder(RecordFields(id="x", content="x"))
    with pytest.raises(ConfigurationError):
        record_destructurer(RecordFields(children=""))


@pytest.mark.parametrize("record", [
    {"content": "no id", "children": []},
    {"id": 1, "content": "no children"},
    {"id": 1, "children": "not a list"},
    {"id": 1, "children": None},
    ["not", "a", "mapping"],
    None,
])
def test_malformed_records_raise(record):
    with pytest.raises(RecordShapeError):
        Node.parse(record)


def test_malformed_child_record_raises():
    record = {"id": 1, "children": [{"id": 2, "children": []}, {"id": 3}]}
    with pytest.raises(RecordShapeError):
        Node.parse(record)


def test_malformed_destructure_result_raises():
    with pytest.raises(RecordShapeError):
        Node.parse({"id": 1}, lambda record: (record["id"], None))


def test_record_shape_error_is_type_error():
    with pytest.raises(TypeError):
        Node.parse({"id": 1, "children": 5})


def test_parse_on_subclass_builds_subclass():
    class Tagged(Node):
        pass

    root = Tagged.parse(EXAMPLE_RECORD)
    assert all(isinstance(node, Tagged) for node in root)


def test_codec_module_loads_on_its_own():
    import importlib
    import nodetreelib.core.codec as codec_module

    reloaded = importlib.reload(codec_module)
    assert reloaded.default_destructure({"id": 1, "children": []}) == (1, None, [])


def test_mapping_destructure_result_requires_id():
    with pytest.raises(RecordShapeError, match="'id'"):
        Node.parse({"c": []}, lambda record: {"children": record["c"]})


def test_mapping_destructure_result_requires_children():
    # Mapping in the older {id, content, nodes} layout, passed through unchanged
    with pytest.raises(RecordShapeError, match="'children'"):
        Node.parse({"id": 1, "content": None, "nodes": []}, lambda record: record)
