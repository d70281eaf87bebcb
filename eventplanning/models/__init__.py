from .enums import (
    DateCertainty,
    EventStatus,
    FormChoice,
    ParticipationType,
    TaxationType,
    ThresholdType,
    VenueCertainty,
    VoteType,
)

__all__ = [
    "FormChoice",
    "DateCertainty",
    "VenueCertainty",
    "ParticipationType",
    "TaxationType",
    "EventStatus",
    "ThresholdType",
    "VoteType",
]
