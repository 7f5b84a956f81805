"""
Errors raised by the decision core.
"""


class AgentError(Exception):
    """Base class for decision core errors."""


class MalformedState(AgentError):
    """The request payload cannot be turned into a valid board."""


class NoLegalMove(AgentError):
    """Every candidate move is immediately fatal."""


class DeadlineExceeded(AgentError):
    """The per-turn time budget ran out before all candidates were scored."""
