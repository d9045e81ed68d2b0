"""Conversion between nodes and plain nested records.

A record is whatever a hook makes of a node; by default a dict of the form::

    {"id": <identifier>, "content": <any>, "children": [<record>, ...]}

Two hook types make up the contract:

- ``BuildRecord(node, encode_children) -> record`` builds one record.
  ``encode_children`` is a zero-argument callable returning the encoded
  children (built with the same hook), so the hook decides when, or whether,
  children are encoded and under which key.
- ``Destructure(record) -> (id, content, children)`` is the inverse: it
  pulls the identifier, content and child records out of one record.

``record_builder`` and ``record_destructurer`` produce a matching pair for
any ``RecordFields`` layout.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, List, NamedTuple, Optional, Tuple

from ..config import RecordFields
from ..errors import ConfigurationError, RecordShapeError

logger = logging.getLogger(__name__)


class RecordParts(NamedTuple):
    """The canonical triple a Destructure hook returns."""
    id: Any
    content: Any
    children: Sequence


EncodeChildren = Callable[[], List[Any]]
BuildRecord = Callable[[Any, EncodeChildren], Any]
Destructure = Callable[[Any], Tuple[Any, Any, Sequence]]
NodeFactory = Callable[[Any, Any], Any]


def _check_fields(fields: RecordFields) -> None:
    errors = fields.validate()
    if errors:
        raise ConfigurationError(f"Invalid record fields: {'; '.join(errors)}")


def record_builder(fields: RecordFields = RecordFields()) -> BuildRecord:
    """Create a BuildRecord hook writing dicts keyed by ``fields``.

    Raises:
        ConfigurationError: If the field names are invalid
    """
    _check_fields(fields)

    def build_record(node: Any, encode_children: EncodeChildren) -> dict:
        return {
            fields.id: node.id,
            fields.content: node.content,
            fields.children: encode_children(),
        }

    return build_record


def record_destructurer(fields: RecordFields = RecordFields()) -> Destructure:
    """Create a Destructure hook reading mappings keyed by ``fields``.

    The id and children keys are required; a missing content key reads
    as None.

    Raises:
        ConfigurationError: If the field names are invalid
    """
    _check_fields(fields)

    def destructure(record: Any) -> RecordParts:
        if not isinstance(record, Mapping):
            raise RecordShapeError(
                f"Expected a mapping record, got {type(record).__name__}"
            )
        try:
            return RecordParts(
                record[fields.id],
                record.get(fields.content),
                record[fields.children],
            )
        except KeyError as exc:
            raise RecordShapeError(f"Record is missing field {exc.args[0]!r}") from exc

    return destructure


default_build_record = record_builder()
default_destructure = record_destructurer()


def resolve_build_record(build_record: Optional[BuildRecord],
                         fields: Optional[RecordFields]) -> BuildRecord:
    """Pick the BuildRecord hook from an explicit hook or a field layout."""
    if build_record is not None and fields is not None:
        raise ValueError("Pass either build_record or fields, not both")
    if fields is not None:
        return record_builder(fields)
    return build_record or default_build_record


def resolve_destructure(destructure: Optional[Destructure],
                        fields: Optional[RecordFields]) -> Destructure:
    """Pick the Destructure hook from an explicit hook or a field layout."""
    if destructure is not None and fields is not None:
        raise ValueError("Pass either destructure or fields, not both")
    if fields is not None:
        return record_destructurer(fields)
    return destructure or default_destructure


def encode(node: Any, build_record: BuildRecord = default_build_record) -> Any:
    """Encode ``node`` and its subtree with ``build_record``.

    This recurses once per level, so it is bounded by the interpreter's
    recursion limit.
    """
    def encode_children() -> List[Any]:
        return [encode(child, build_record) for child in node.children]

    return build_record(node, encode_children)


def parse(record: Any,
          node_factory: NodeFactory,
          destructure: Destructure = default_destructure) -> Any:
    """Build a tree from ``record``.

    Args:
        record: Root record
        node_factory: Called as ``node_factory(id, content)`` for each record
        destructure: Hook extracting (id, content, children) from a record

    Returns:
        The root node of the new tree

    Raises:
        RecordShapeError: If a record, or what destructure makes of it, is
            malformed. Nodes built before the error are left unreferenced.
    """
    root = None
    count = 0
    stack: List[Tuple[Any, Any]] = [(record, None)]

    while stack:
        current, parent = stack.pop()
        node_id, content, children = _unpack(destructure(current))

        node = node_factory(node_id, content)
        count += 1
        if parent is None:
            root = node
        else:
            parent.add(node)

        # Reversed so siblings are attached in record order
        for child in reversed(children):
            stack.append((child, node))

    logger.debug("Parsed %d node(s) rooted at id=%r", count, root.id)
    return root


def _unpack(parts: Any) -> Tuple[Any, Any, Sequence]:
    # Destructure hooks may also hand back a mapping with canonical keys
    if isinstance(parts, Mapping):
        try:
            parts = (parts["id"], parts.get("content"), parts["children"])
        except KeyError as exc:
            raise RecordShapeError(
                f"Destructure result is missing field {exc.args[0]!r}"
            ) from exc

    try:
        node_id, content, children = parts
    except (TypeError, ValueError) as exc:
        raise RecordShapeError(
            f"Destructure must return (id, content, children), got {parts!r}"
        ) from exc

    if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
        raise RecordShapeError(
            f"Record children must be a sequence, got {type(children).__name__}"
        )
    return node_id, content, children
