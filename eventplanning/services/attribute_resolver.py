"""
Maps the three event form selections onto stored event attributes.

Each selection is looked up in its own table; the tables contribute status
candidates that are merged by ``STATUS_PRIORITY``. Unknown selections fall
back to their defaults, so resolution never fails.
"""

from collections.abc import Mapping
from typing import TypedDict

from ..core.logging import PlanningLogger
from ..models.enums import (
    DateCertainty,
    VenueCertainty,
    ParticipationType,
    TaxationType,
    EventStatus,
    ThresholdType,
    FormChoice,
)
from ..schemas.event import EventAttributeRequest, ResolvedEventAttributes


class VenueFields(TypedDict, total=False):
    is_virtual: bool
    clears_venue: bool
    status: EventStatus


class ParticipationFields(TypedDict, total=False):
    is_ticketed: bool
    taxation_type: TaxationType
    status: EventStatus
    threshold_type: ThresholdType


STATUS_PRIORITY: list[EventStatus] = [
    EventStatus.THRESHOLD,
    EventStatus.POLLING,
    EventStatus.DRAFT,
    EventStatus.CONFIRMED,
]

DATE_STATUS: dict[DateCertainty, EventStatus] = {
    DateCertainty.CONFIRMED: EventStatus.CONFIRMED,
    DateCertainty.POLLING: EventStatus.POLLING,
    DateCertainty.PLANNING: EventStatus.DRAFT,
}

VENUE_FIELDS: dict[VenueCertainty, VenueFields] = {
    VenueCertainty.CONFIRMED: {},
    VenueCertainty.VIRTUAL: {"is_virtual": True, "clears_venue": True},
    VenueCertainty.TBD: {"is_virtual": False, "clears_venue": True},
    VenueCertainty.POLLING: {"status": EventStatus.POLLING},
}

PARTICIPATION_FIELDS: dict[ParticipationType, ParticipationFields] = {
    ParticipationType.FREE: {
        "is_ticketed": False,
        "taxation_type": TaxationType.TICKETLESS,
    },
    ParticipationType.TICKETED: {
        "is_ticketed": True,
        "taxation_type": TaxationType.TICKETED_EVENT,
    },
    ParticipationType.CONTRIBUTION: {
        "is_ticketed": False,
        "taxation_type": TaxationType.CONTRIBUTION_COLLECTION,
    },
    ParticipationType.CROWDFUNDING: {
        "is_ticketed": True,
        "taxation_type": TaxationType.TICKETED_EVENT,
        "status": EventStatus.THRESHOLD,
        "threshold_type": ThresholdType.REVENUE,
    },
    ParticipationType.INTEREST: {
        "is_ticketed": False,
        "taxation_type": TaxationType.TICKETLESS,
        "status": EventStatus.THRESHOLD,
        "threshold_type": ThresholdType.ATTENDEE_COUNT,
    },
}

FORM_FIELDS: dict[str, type[FormChoice]] = {
    "date_certainty": DateCertainty,
    "venue_certainty": VenueCertainty,
    "participation_type": ParticipationType,
}


def merge_status(candidates: list[EventStatus]) -> EventStatus:
    for status in STATUS_PRIORITY:
        if status in candidates:
            return status
    return EventStatus.CONFIRMED


def _participation_fields(request: EventAttributeRequest) -> ParticipationFields:
    fields = ParticipationFields(**PARTICIPATION_FIELDS[request.participation_type])

    if (
        request.participation_type == ParticipationType.INTEREST
        and request.taxation_type is not None
    ):
        fields["taxation_type"] = request.taxation_type
        fields["is_ticketed"] = request.taxation_type == TaxationType.TICKETED_EVENT

    return fields


def _log_fallbacks(params: Mapping[str, object]) -> None:
    for field, choice in FORM_FIELDS.items():
        raw_value = params.get(field)
        if raw_value is not None and choice.lookup(raw_value) is None:
            PlanningLogger.log_attribute_fallback(field, raw_value, choice.default().value)


def build_request(
    params: EventAttributeRequest | Mapping[str, object] | None,
) -> EventAttributeRequest:
    if isinstance(params, EventAttributeRequest):
        return params

    params = params or {}
    _log_fallbacks(params)

    return EventAttributeRequest.model_validate(
        {key: params[key] for key in (*FORM_FIELDS, "taxation_type") if key in params}
    )


def resolve(
    params: EventAttributeRequest | Mapping[str, object] | None,
) -> ResolvedEventAttributes:
    request = build_request(params)

    venue = VENUE_FIELDS[request.venue_certainty]
    participation = _participation_fields(request)

    candidates = [DATE_STATUS[request.date_certainty]]
    for fields in (venue, participation):
        if "status" in fields:
            candidates.append(fields["status"])

    status = merge_status(candidates)
    taxation_type = participation["taxation_type"]
    is_ticketed = participation["is_ticketed"]

    if taxation_type == TaxationType.CONTRIBUTION_COLLECTION:
        is_ticketed = False

    resolved = ResolvedEventAttributes(
        status=status,
        is_ticketed=is_ticketed,
        taxation_type=taxation_type,
        is_virtual=venue.get("is_virtual", False),
        clears_venue=venue.get("clears_venue", False),
        threshold_type=(
            participation.get("threshold_type")
            if status == EventStatus.THRESHOLD
            else None
        ),
    )

    PlanningLogger.log_attribute_resolution(
        {
            "date_certainty": request.date_certainty.value,
            "venue_certainty": request.venue_certainty.value,
            "participation_type": request.participation_type.value,
        },
        resolved.as_attrs(),
    )

    return resolved


def resolve_event_attributes(
    params: EventAttributeRequest | Mapping[str, object] | None,
) -> dict[str, object]:
    return resolve(params).as_attrs()
