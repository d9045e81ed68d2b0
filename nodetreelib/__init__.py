"""nodetreelib - Ordered m-ary tree nodes.

nodetreelib provides a single Node type holding an id, a content payload, a
parent link and an ordered list of children, with navigation, mutation,
traversal, metrics, sorting helpers and conversion to and from plain nested
records.

Quick start:
━━━━━━━━━━━━
    from nodetreelib import Node

    root = Node(0, "zero")
    root.push(Node(1, "one"), Node(2, "two"))
    record = root.encode()
    copy = Node.parse(record)
━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.node import Node
from .core.traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.codec import (
    RecordParts,
    record_builder,
    record_destructurer,
)
from .core.compare import compare, default_compare
from .config import (
    RecordFields,
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    FilterConfig,
)
from .errors import (
    NodeTreeError,
    SiblingIndexError,
    RecordShapeError,
    ConfigurationError,
)
from .api import (
    traverse_tree,
    traverse_with_config,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    sort_nodes,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'RecordParts',
    'record_builder',
    'record_destructurer',
    'compare',
    'default_compare',
    # Config
    'RecordFields',
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
    'FilterConfig',
    # Errors
    'NodeTreeError',
    'SiblingIndexError',
    'RecordShapeError',
    'ConfigurationError',
    # API
    'traverse_tree',
    'traverse_with_config',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_paths',
    'get_tree_stats',
    'sort_nodes',
]
