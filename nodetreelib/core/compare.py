"""Comparison helpers for sorting collections of nodes.

``compare`` builds an old-style two-argument comparison function, to be used
with ``functools.cmp_to_key``::

    sorted(root, key=cmp_to_key(compare()))
"""

from typing import Any, Callable, Optional


CompareFunction = Callable[[Any, Any], int]
NodeComparator = Callable[[Any, Any], int]
MapNode = Callable[[Any], Any]


def default_compare(value: Any, other_value: Any) -> int:
    """Ascending order by ``<``.

    Never returns 0: equal values report 1, so ties order the first
    argument after the second.
    """
    return -1 if value < other_value else 1


def content_of(node: Any) -> Any:
    """Default key extractor: the node's content."""
    return node.content


def compare(compare_function: Optional[CompareFunction] = None,
            map_node: Optional[MapNode] = None) -> NodeComparator:
    """Return a function comparing two nodes by a derived key.

    Args:
        compare_function: Compares two keys, returning a negative, zero or
            positive number (default: default_compare)
        map_node: Extracts the key from a node (default: its content)

    Returns:
        A function ``(node, other_node) -> int``
    """
    compare_function = compare_function or default_compare
    map_node = map_node or content_of

    def compare_nodes(node: Any, other_node: Any) -> int:
        return compare_function(map_node(node), map_node(other_node))

    return compare_nodes
