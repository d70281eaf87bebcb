from .event import EventAttributeRequest, ResolvedEventAttributes
from .poll import (
    BulkVotePlan,
    DateOptionChanges,
    DateOptionTally,
    DateVoteRead,
    VoteRequest,
    VoteTally,
)

__all__ = [
    # Event
    "EventAttributeRequest",
    "ResolvedEventAttributes",
    # Poll
    "DateVoteRead",
    "VoteTally",
    "DateOptionTally",
    "VoteRequest",
    "BulkVotePlan",
    "DateOptionChanges",
]
