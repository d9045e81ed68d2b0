"""Internal helpers shared by the core modules.

This package holds pure functions with no knowledge of Node itself. It
should NOT be imported directly by users.
"""

import copy
from collections.abc import MutableMapping, MutableSequence
from typing import Any, List


def duplicate_content(content: Any) -> Any:
    """Return a one-level copy of mapping or sequence content.

    Mutable mappings and mutable sequences are copied with copy.copy, so
    the container is new but its items are shared. Anything else (scalars,
    strings, tuples, arbitrary objects) is returned as-is.

    Args:
        content: Node content to duplicate

    Returns:
        A shallow duplicate, or the same object
    """
    if isinstance(content, (MutableMapping, MutableSequence)):
        return copy.copy(content)
    return content


def remove_by_identity(items: List[Any], *elements: Any) -> None:
    """Remove every occurrence of ``elements`` from ``items`` in place.

    Matching uses ``is`` rather than ``==``.
    """
    for index in range(len(items) - 1, -1, -1):
        if any(items[index] is element for element in elements):
            del items[index]


__all__ = [
    'duplicate_content',
    'remove_by_identity',
]
