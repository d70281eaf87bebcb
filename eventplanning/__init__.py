from .services.attribute_resolver import resolve, resolve_event_attributes
from .services.voting_service import VotingService, tally
from .services.date_poll_service import plan_date_option_changes

__all__ = [
    "resolve",
    "resolve_event_attributes",
    "tally",
    "VotingService",
    "plan_date_option_changes",
]
