"""Core components: the Node itself and the pieces it is built from."""

from .node import Node
from .traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_strategy,
)
from .codec import (
    RecordParts,
    record_builder,
    record_destructurer,
    default_build_record,
    default_destructure,
)
from .compare import compare, default_compare

__all__ = [
    'Node',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'parse_strategy',
    'RecordParts',
    'record_builder',
    'record_destructurer',
    'default_build_record',
    'default_destructure',
    'compare',
    'default_compare',
]
