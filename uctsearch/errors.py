"""Error kinds raised by the search core.

All of these signal a broken contract inside the search (or between the search
and a game model), not bad user input, so they are never caught by the core.
"""


class MCTSError(Exception):
    """Base class for search errors."""


class InvariantViolation(MCTSError):
    """Expansion on a terminal/fully expanded node, or a broken parent chain."""


class NoMovesAvailable(MCTSError):
    """Move selection found no children at the root."""


class NoLegalActions(MCTSError):
    """Expansion found no untried move although the node is not fully expanded."""
