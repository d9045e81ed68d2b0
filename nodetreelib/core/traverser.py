"""Tree traversal strategies for nodetreelib.

Traversers implement different algorithms for walking through a subtree.
All of them work on anything exposing an ordered ``children`` sequence, use
an explicit stack or queue instead of recursion, and yield ``(node, depth)``
tuples where depth is relative to the start node.

None of them guard against cycles: a tree whose parent links form a loop
makes every traverser run forever.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy


ExplorePredicate = Callable[[Any], bool]


def _detached_from(node: Any, parent: Any) -> bool:
    """True if ``node`` was queued under ``parent`` but has since moved."""
    if parent is None:
        return False
    return getattr(node, "parent", parent) is not parent


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders (depth-first, breadth-first, ...). They hold no state
    between calls, so a single instance can be reused and every call to
    ``traverse`` starts a fresh walk over the structure as it is then.
    """

    @abstractmethod
    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 should_explore: Optional[ExplorePredicate] = None) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes
            should_explore: Optional predicate; children of a node are
                skipped when it returns False for that node

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self,
                        node: Any,
                        depth: int,
                        max_depth: Optional[int],
                        should_explore: Optional[ExplorePredicate]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is not None and depth >= max_depth:
            return False
        if should_explore is not None and not should_explore(node):
            return False
        return True


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in sequence order. This is the
    order ``iter(node)`` uses.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 should_explore: Optional[ExplorePredicate] = None) -> Iterator[Tuple[Any, int]]:
        stack: List[Tuple[Any, int, Any]] = [(root, 0, None)]

        while stack:
            node, depth, parent = stack.pop()

            # Skip nodes moved away from the parent that queued them
            if _detached_from(node, parent):
                continue

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            # Reversed so the first child is popped next
            if self._should_explore(node, depth, max_depth, should_explore):
                for child in reversed(node.children):
                    stack.append((child, depth + 1, node))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for computing aggregate values
    bottom-up or for tearing a tree down leaf first.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 should_explore: Optional[ExplorePredicate] = None) -> Iterator[Tuple[Any, int]]:
        # Each entry carries whether its children have already been pushed
        stack: List[Tuple[Any, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(node, depth, max_depth, should_explore):
                for child in reversed(node.children):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 should_explore: Optional[ExplorePredicate] = None) -> Iterator[Tuple[Any, int]]:
        queue: Deque[Tuple[Any, int, Any]] = deque([(root, 0, None)])

        while queue:
            node, depth, parent = queue.popleft()

            if _detached_from(node, parent):
                continue

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(node, depth, max_depth, should_explore):
                for child in node.children:
                    queue.append((child, depth + 1, node))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Yields the same order as breadth-first, but materializes one complete
    level before moving to the next, so a level is read from the tree in a
    single pass.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0,
                 should_explore: Optional[ExplorePredicate] = None) -> Iterator[Tuple[Any, int]]:
        current_level: List[Any] = [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[Any] = []

            for node in current_level:
                if self._should_explore(node, current_depth, max_depth, should_explore):
                    next_level.extend(node.children)

            if self._should_yield(current_depth, min_depth, max_depth):
                for node in current_level:
                    yield (node, current_depth)

            current_level = next_level
            current_depth += 1


_STRATEGY_ALIASES = {
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    'post_order': TraversalStrategy.DEPTH_FIRST_POST,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
}

_TRAVERSERS = {
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or one of its string aliases

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (dfs_pre, dfs_post, bfs, level, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()
