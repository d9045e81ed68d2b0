"""Configuration system for nodetreelib.

This module defines how users specify their traversal requirements (order,
depth window, filters) and how nodes map onto plain records when encoding
and parsing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List


class TraversalStrategy(Enum):
    """How to traverse the tree.

    Different strategies are optimal for different use cases.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children (default)
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    # Custom filter functions
    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    # Pruning behavior
    prune_on_exclude: bool = True  # Don't traverse excluded branches

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True

    def should_explore_children(self, node) -> bool:
        """Check if children of a node should be explored.

        Only the exclude filter prunes; a node that merely fails the
        include filter still has its subtree searched.

        Args:
            node: Node to check

        Returns:
            True if children should be explored
        """
        if not self.prune_on_exclude:
            return True

        return not (self.exclude_filter and self.exclude_filter(node))


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depths are relative to the node the traversal starts from.
    """

    min_depth: int = 0                 # Minimum depth to yield
    max_depth: Optional[int] = None    # Maximum depth to traverse


@dataclass
class TraversalConfig:
    """Complete configuration for tree traversal.

    This is the primary way users specify what they want from a traversal
    through the functional API in nodetreelib.api.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for visiting a node and its first levels only.

        Args:
            max_depth: How deep to scan (default 1 = immediate children only)

        Returns:
            TraversalConfig for shallow scanning
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors


@dataclass(frozen=True)
class RecordFields:
    """Field names used when a node is encoded to, or parsed from, a record.

    The default layout is ``{"id": ..., "content": ..., "children": [...]}``.
    """

    id: str = "id"
    content: str = "content"
    children: str = "children"

    @classmethod
    def legacy(cls) -> 'RecordFields':
        """Layout used by older dumps, which stored children under ``nodes``."""
        return cls(children="nodes")

    def validate(self) -> List[str]:
        """Validate field names.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        names = (self.id, self.content, self.children)

        for name in names:
            if not isinstance(name, str) or not name:
                errors.append(f"field names must be non-empty strings, got {name!r}")

        if len(set(names)) != len(names):
            errors.append(f"field names must be distinct, got {names!r}")

        return errors
