"""Exception hierarchy for nodetreelib.

Every error raised on purpose by the library derives from NodeTreeError, and
each concrete error also derives from the builtin it specializes so callers
can catch either one.
"""


class NodeTreeError(Exception):
    """Base class for all nodetreelib errors."""
    pass


class SiblingIndexError(NodeTreeError, IndexError):
    """Raised when sibling navigation leaves the parent's children list.

    Also raised when sibling navigation is attempted on a root node, which
    has no parent to index into.
    """
    pass


class RecordShapeError(NodeTreeError, TypeError):
    """Raised when a record handed to Node.parse has the wrong shape."""
    pass


class ConfigurationError(NodeTreeError, ValueError):
    """Raised when a traversal or record configuration is invalid."""
    pass
