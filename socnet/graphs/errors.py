"""
Exception types raised by the social graph engine.

Input-parsing failures and graph-structure misuse are kept apart so that
callers can tell a bad edge file from a programming error.
"""


class SocialGraphError(Exception):
    """Base class for all social graph errors."""


class MalformedEdgeError(SocialGraphError, ValueError):
    """An edge line did not parse into two unsigned integer identifiers."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed edge on line {line_number}: {reason} ({line!r})")


class GraphFrozenError(SocialGraphError, RuntimeError):
    """The graph store was modified after it was frozen."""


class NodeIndexError(SocialGraphError, IndexError):
    """An internal node index does not exist in the graph store."""
