"""Node abstraction for nodetreelib.

A Node is both the data container and the whole behavioral surface of a
tree: it holds an identifier, a content payload, a back reference to its
parent and an ordered list of children, and every navigation, mutation,
traversal, metric and serialization operation is a method on it.

The parent/children links are only ever changed through ``set_parent``
(``add``, ``push`` and ``set_root`` all go through it), which keeps both
sides of the link consistent:

- if ``node.parent is p`` then ``p.children`` holds ``node`` exactly once;
- if ``p.children`` holds ``node`` then ``node.parent is p``.

Example:
    >>> root = Node(0, "zero")
    >>> root.push(Node(1, "one"), Node(2, "two"))
    Node(id=0, content='zero')
    >>> [node.id for node in root]
    [0, 1, 2]
"""

import logging
from typing import Any, Iterator, List, Optional, Union

from .._common import duplicate_content, remove_by_identity
from ..config import DepthConfig, RecordFields, TraversalConfig, TraversalStrategy
from ..errors import ConfigurationError, SiblingIndexError
from . import codec
from .compare import CompareFunction, MapNode, NodeComparator, compare as _compare
from .traverser import DepthFirstPreOrderTraverser, create_traverser, parse_strategy

logger = logging.getLogger(__name__)

_PRE_ORDER = DepthFirstPreOrderTraverser()


class Node:
    """A node in an ordered m-ary tree.

    Args:
        id: Identifier, compared with ``==`` by ``child()``. Uniqueness
            among siblings is up to the caller.
        content: Arbitrary payload (default None)
    """

    def __init__(self, id: Any, content: Any = None):
        self._id = id
        self._content = content
        self._parent: Optional['Node'] = None
        self._children: List['Node'] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r}, content={self._content!r})"

    # Properties

    @property
    def id(self) -> Any:
        """Identifier given at construction (read-only)."""
        return self._id

    @property
    def content(self) -> Any:
        return self._content

    @content.setter
    def content(self, content: Any) -> None:
        self._content = content

    @property
    def parent(self) -> Optional['Node']:
        """Parent node, or None for a root. Change it with set_parent()."""
        return self._parent

    @property
    def children(self) -> List['Node']:
        """Immediate children in order.

        Returns a new list on every access; mutating it does not change
        the tree. Use add(), push() or set_parent() for that.
        """
        return list(self._children)

    @property
    def nodes(self) -> List['Node']:
        """Alias of children."""
        return self.children

    # Duplicating

    def detach(self) -> 'Node':
        """Return a standalone copy of this node without parent or children.

        Mapping and list content is copied one level deep; any other content
        is shared with the original.
        """
        return self.__class__(self._id, duplicate_content(self._content))

    def clone(self) -> 'Node':
        """Return an independent copy of this node and all its descendants.

        Content follows the same copy rule as detach().
        """
        copy = self.detach()
        stack = [(self, copy)]

        while stack:
            source, target = stack.pop()
            for child in source._children:
                child_copy = target.add(child.detach())
                stack.append((child, child_copy))

        return copy

    # Parent

    def get_parent(self, count: int = 1) -> Optional['Node']:
        """Return the ancestor ``count`` levels up.

        ``count < 1`` returns the node itself; walking past the root
        returns None.
        """
        node = self
        while count >= 1:
            if node._parent is None:
                return None
            node = node._parent
            count -= 1
        return node

    def set_parent(self, parent: Optional['Node']) -> None:
        """Move this node, with its subtree, under ``parent``.

        The node is removed from its current parent's children (matched by
        identity) and appended to the end of ``parent``'s children. Passing
        None makes the node a root.

        No cycle check is made. Attaching a node below one of its own
        descendants leaves a loop in the parent links, after which depth(),
        root(), ancestors() and traversal never terminate.
        """
        if self._parent is not None:
            remove_by_identity(self._parent._children, self)
        if parent is not None:
            parent._children.append(self)

        logger.debug(
            "Moved node id=%r from parent id=%r to parent id=%r",
            self._id,
            self._parent._id if self._parent is not None else None,
            parent._id if parent is not None else None,
        )
        self._parent = parent

    def parents(self) -> List['Node']:
        """Alias of ancestors()."""
        return self.ancestors()

    # Lineage

    def lineage(self) -> List['Node']:
        """Return this node followed by its ancestors, nearest first."""
        return [self] + self.ancestors()

    def ancestors(self) -> List['Node']:
        """Return parent, grandparent, ... up to the root. Empty for a root."""
        ancestors = []
        node = self._parent
        while node is not None:
            ancestors.append(node)
            node = node._parent
        return ancestors

    # Children

    def child(self, key: Any) -> Optional['Node']:
        """Return the first immediate child whose id equals ``key``, or None."""
        for child in self._children:
            if child._id == key:
                return child
        return None

    def node(self, key: Any) -> Optional['Node']:
        """Alias of child()."""
        return self.child(key)

    def has_children(self) -> bool:
        return len(self._children) > 0

    def has_nodes(self) -> bool:
        """Alias of has_children()."""
        return self.has_children()

    # Root

    def root(self) -> 'Node':
        """Return the root of the tree this node belongs to."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def set_root(self) -> None:
        """Detach this node from its parent. Its own children stay attached."""
        self.set_parent(None)

    def is_root(self) -> bool:
        return self._parent is None

    # Leaves

    def is_leaf(self) -> bool:
        return not self.has_children()

    def leaves(self) -> List['Node']:
        """Return the leaves of this subtree in pre-order."""
        return [node for node in self if node.is_leaf()]

    # Siblings

    def siblings(self) -> List['Node']:
        """Return the parent's other children in order. Empty for a root."""
        if self._parent is None:
            return []
        return [node for node in self._parent._children if node is not self]

    def index(self) -> Optional[int]:
        """Return the position among the parent's children, or None for a root."""
        if self._parent is None:
            return None
        for position, node in enumerate(self._parent._children):
            if node is self:
                return position
        # Unreachable while the parent/children invariant holds
        raise ValueError(f"{self!r} is missing from its parent's children")

    def next(self, count: int = 1) -> 'Node':
        """Return the sibling ``count`` positions after this one.

        Raises:
            SiblingIndexError: If the node is a root, or the target position
                is outside the parent's children (negative positions do not
                wrap around)
        """
        if self._parent is None:
            raise SiblingIndexError(f"{self!r} is a root and has no siblings")

        siblings = self._parent._children
        target = self.index() + count
        if not 0 <= target < len(siblings):
            raise SiblingIndexError(
                f"Sibling index {target} out of range for {len(siblings)} sibling(s) "
                f"of {self!r}"
            )
        return siblings[target]

    def previous(self, count: int = 1) -> 'Node':
        """Return the sibling ``count`` positions before this one.

        Raises:
            SiblingIndexError: Same conditions as next()
        """
        return self.next(-count)

    # Adding

    def push(self, *nodes: 'Node') -> 'Node':
        """Append the given nodes as children, in order.

        Returns:
            This node, for chaining on the parent side
        """
        for node in nodes:
            self.add(node)
        return self

    def add(self, node: 'Node') -> 'Node':
        """Append ``node`` as the last child, moving it from any old parent.

        Returns:
            The attached child
        """
        node.set_parent(self)
        return node

    # Iterating

    def __iter__(self) -> Iterator['Node']:
        """Iterate over this node and its descendants in pre-order.

        Children are read when their parent is reached, and a node moved
        away from its parent before it is reached is skipped along with its
        subtree.
        """
        for node, _ in _PRE_ORDER.traverse(self):
            yield node

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator['Node']:
        """Iterate over this subtree in the given order.

        Args:
            strategy: TraversalStrategy or alias (dfs_pre, dfs_post, bfs, level)
            max_depth: Deepest level to visit, relative to this node
            min_depth: Shallowest level to yield, relative to this node

        Returns:
            Iterator over nodes of the subtree

        Raises:
            ConfigurationError: If the depth window is invalid
            ValueError: If the strategy name is unknown
        """
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        )
        errors = config.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

        traverser = create_traverser(config.strategy)
        return (node for node, _ in traverser.traverse(self, max_depth=max_depth, min_depth=min_depth))

    # Comparison

    @staticmethod
    def compare(compare_function: Optional[CompareFunction] = None,
                map_node: Optional[MapNode] = None) -> NodeComparator:
        """Return a comparison function for sorting nodes.

        See nodetreelib.core.compare.compare. By default nodes compare by
        content, ascending, and equal contents never compare as 0.

        Example:
            >>> from functools import cmp_to_key
            >>> ordered = sorted(root, key=cmp_to_key(Node.compare()))
        """
        return _compare(compare_function, map_node)

    # Metrics

    def depth(self) -> int:
        """Return the number of ancestors. A root has depth 0."""
        depth = 0
        node = self._parent
        while node is not None:
            depth += 1
            node = node._parent
        return depth

    def height(self) -> int:
        """Return the longest downward path to a leaf, in edges. A leaf has height 0."""
        return max(depth for _, depth in _PRE_ORDER.traverse(self))

    def breadth(self) -> int:
        """Return the size of this node's sibling group. A root has breadth 1."""
        if self._parent is None:
            return 1
        return len(self._parent._children)

    # Encoder and parser

    def encode(self,
               build_record: Optional[codec.BuildRecord] = None,
               fields: Optional[RecordFields] = None) -> Any:
        """Convert this subtree to a nested record.

        Args:
            build_record: Hook ``(node, encode_children) -> record``; see
                nodetreelib.core.codec
            fields: Shortcut for the default dict layout with other key
                names. Cannot be combined with build_record.

        Returns:
            The record for this node, by default
            ``{"id": ..., "content": ..., "children": [...]}``
        """
        return codec.encode(self, codec.resolve_build_record(build_record, fields))

    @classmethod
    def parse(cls,
              record: Any,
              destructure: Optional[codec.Destructure] = None,
              fields: Optional[RecordFields] = None) -> 'Node':
        """Build a new tree from a nested record.

        Args:
            record: Root record
            destructure: Hook ``record -> (id, content, children)``
            fields: Shortcut for the default dict layout with other key
                names. Cannot be combined with destructure.

        Returns:
            Root of the new tree

        Raises:
            RecordShapeError: If a record is malformed
        """
        return codec.parse(record, cls, codec.resolve_destructure(destructure, fields))
