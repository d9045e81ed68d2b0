"""High-level API for nodetreelib.

This module provides simple, functional interfaces for common whole-tree
operations. These functions wrap the Node methods, the traversers and the
configuration objects for ease of use in simple cases.
"""

import logging
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from .config import DepthConfig, FilterConfig, TraversalConfig, TraversalStrategy
from .core.compare import CompareFunction, MapNode, compare
from .core.node import Node
from .core.traverser import create_traverser, parse_strategy
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def traverse_tree(
    root: Node,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    prune_on_exclude: bool = True,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    This is the primary high-level function for traversing trees. It
    handles the common case of wanting to iterate over nodes without
    building a TraversalConfig by hand.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (dfs_pre, dfs_post, bfs, level)
        max_depth: Maximum depth to traverse, relative to root
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        prune_on_exclude: Skip the subtrees of excluded nodes

    Yields:
        Nodes that match the criteria

    Raises:
        ConfigurationError: If the depth window is invalid
        ValueError: If the strategy name is unknown

    Example:
        >>> for node in traverse_tree(root, strategy="bfs", max_depth=1):
        ...     print(node.id)
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
            prune_on_exclude=prune_on_exclude,
        ),
    )
    yield from traverse_with_config(root, config)


def traverse_with_config(root: Node, config: TraversalConfig) -> Iterator[Node]:
    """Traverse a tree as described by a TraversalConfig.

    Raises:
        ConfigurationError: If config.validate() reports problems
    """
    errors = config.validate()
    if errors:
        logger.debug("Rejected traversal config %r: %s", config, errors)
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

    traverser = create_traverser(config.strategy)
    for node, _ in traverser.traverse(
        root,
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
        should_explore=config.filter.should_explore_children,
    ):
        if config.filter.should_include(node):
            yield node


def count_nodes(root: Node, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: Node, predicate: Callable[[Node], bool], **kwargs) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Nodes that do not match still have their children searched.

    Example:
        >>> for node in find_nodes(root, lambda n: n.content == "four"):
        ...     print(node.id)
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_leaf_nodes(root: Node, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree.

    With the default pre-order strategy this matches root.leaves().
    """
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_paths(root: Node, **kwargs) -> Iterator[List[Any]]:
    """Get the id path from root down to each node.

    Args:
        root: Starting node for traversal; paths begin with its id
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Lists of node ids, root first
    """
    for node in traverse_tree(root, **kwargs):
        path = []
        for ancestor in node.lineage():
            path.append(ancestor.id)
            if ancestor is root:
                break
        path.reverse()
        yield path


def get_tree_stats(root: Node, **kwargs) -> Dict[str, Any]:
    """Get statistics about the part of a tree a traversal visits.

    Only visited nodes and the edges between them are counted, so with
    ``max_depth`` or filters a node whose children were all left out counts
    as a leaf.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        depths (count of nodes per depth, relative to root) and
        average_branching (visited edges per internal node)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }
    base_depth = root.depth()
    visited = list(traverse_tree(root, **kwargs))
    visited_ids = {id(node) for node in visited}

    # Parents reached through a visited edge
    expanded = set()
    edges = 0
    for node in visited:
        if node is not root and id(node.parent) in visited_ids:
            expanded.add(id(node.parent))
            edges += 1

    for node in visited:
        depth = node.depth() - base_depth
        stats['total_nodes'] += 1

        if id(node) not in expanded:
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        edges / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def sort_nodes(
    nodes: Iterable[Node],
    compare_function: Optional[CompareFunction] = None,
    map_node: Optional[MapNode] = None,
    reverse: bool = False,
) -> List[Node]:
    """Return the nodes sorted with a Node.compare() comparator.

    Args:
        nodes: Nodes to sort, e.g. a whole traversal ``list(root)``
        compare_function: Compares two keys (default: ascending by ``<``)
        map_node: Extracts the key from a node (default: its content)
        reverse: Sort descending

    Returns:
        A new sorted list
    """
    key = cmp_to_key(compare(compare_function, map_node))
    return sorted(nodes, key=key, reverse=reverse)
