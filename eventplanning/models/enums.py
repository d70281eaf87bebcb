from enum import Enum
from typing import Self


class FormChoice(str, Enum):
    """Closed set of form values with a fallback for anything unrecognized."""

    @classmethod
    def default(cls) -> Self:
        raise NotImplementedError

    @classmethod
    def lookup(cls, value: object) -> Self | None:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return cls._value2member_map_.get(value.strip().lower())  # type: ignore[return-value]

    @classmethod
    def parse(cls, value: object) -> Self:
        return cls.lookup(value) or cls.default()


class DateCertainty(FormChoice):
    CONFIRMED = "confirmed"
    POLLING = "polling"  # Attendees vote on candidate dates
    PLANNING = "planning"

    @classmethod
    def default(cls):
        return cls.CONFIRMED


class VenueCertainty(FormChoice):
    CONFIRMED = "confirmed"
    VIRTUAL = "virtual"
    POLLING = "polling"
    TBD = "tbd"

    @classmethod
    def default(cls):
        return cls.CONFIRMED


class ParticipationType(FormChoice):
    FREE = "free"
    TICKETED = "ticketed"
    CONTRIBUTION = "contribution"
    CROWDFUNDING = "crowdfunding"  # Goes ahead once a revenue target is met
    INTEREST = "interest"  # Goes ahead once enough people sign up

    @classmethod
    def default(cls):
        return cls.FREE


class TaxationType(FormChoice):
    TICKETLESS = "ticketless"
    TICKETED_EVENT = "ticketed_event"
    CONTRIBUTION_COLLECTION = "contribution_collection"

    @classmethod
    def default(cls):
        return cls.TICKETLESS


class EventStatus(str, Enum):
    CONFIRMED = "confirmed"
    POLLING = "polling"
    DRAFT = "draft"
    THRESHOLD = "threshold"


class ThresholdType(str, Enum):
    REVENUE = "revenue"
    ATTENDEE_COUNT = "attendee_count"


class VoteType(str, Enum):
    YES = "yes"
    IF_NEED_BE = "if_need_be"
    NO = "no"
