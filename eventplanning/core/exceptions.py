"""
Exceptions raised by the vote and date option planners.

Attribute resolution and vote tallies never raise; only the batch planners
reject input, and they do so with the offending values in ``context``.
"""

from typing import Any


class PlanningError(Exception):
    """Base class for planner errors. ``context`` is appended to ``str()``."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.context = context or {}
        super().__init__(message)

    def __str__(self):
        base_msg = super().__str__()
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base_msg} (context: {context_str})"
        return base_msg


class InvalidVoteTypeError(PlanningError, ValueError):
    """A bulk vote request contained a vote type outside yes/if_need_be/no"""

    def __init__(self, invalid_votes: list[dict[str, object]]):
        self.invalid_votes = invalid_votes
        super().__init__(
            f"{len(invalid_votes)} vote(s) with invalid vote type",
            context={"invalid_votes": invalid_votes},
        )


class InvalidDateOptionError(PlanningError, ValueError):
    """A date option could not be read as an ISO date"""

    def __init__(self, value: object):
        self.value = value
        super().__init__("Invalid date option", context={"value": repr(value)})
