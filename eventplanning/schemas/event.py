from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Self
from ..models.enums import (
    DateCertainty,
    VenueCertainty,
    ParticipationType,
    TaxationType,
    EventStatus,
    ThresholdType,
)


class EventAttributeRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    date_certainty: DateCertainty = DateCertainty.CONFIRMED
    venue_certainty: VenueCertainty = VenueCertainty.CONFIRMED
    participation_type: ParticipationType = ParticipationType.FREE
    taxation_type: TaxationType | None = Field(
        None, description="Explicit taxation override, only honoured for interest events"
    )

    @field_validator("date_certainty", mode="before")
    @classmethod
    def parse_date_certainty(cls, v: object) -> DateCertainty:
        return DateCertainty.parse(v)

    @field_validator("venue_certainty", mode="before")
    @classmethod
    def parse_venue_certainty(cls, v: object) -> VenueCertainty:
        return VenueCertainty.parse(v)

    @field_validator("participation_type", mode="before")
    @classmethod
    def parse_participation_type(cls, v: object) -> ParticipationType:
        return ParticipationType.parse(v)

    @field_validator("taxation_type", mode="before")
    @classmethod
    def parse_taxation_type(cls, v: object) -> TaxationType | None:
        return TaxationType.lookup(v)


class ResolvedEventAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: EventStatus
    is_ticketed: bool
    taxation_type: TaxationType
    is_virtual: bool = False
    clears_venue: bool = False
    threshold_type: ThresholdType | None = None

    @model_validator(mode="after")
    def validate_consistency(self) -> Self:
        if self.is_virtual and not self.clears_venue:
            raise ValueError("Virtual events cannot keep a venue")

        if (self.status == EventStatus.THRESHOLD) != (self.threshold_type is not None):
            raise ValueError("threshold_type is required exactly for threshold events")

        if self.taxation_type == TaxationType.CONTRIBUTION_COLLECTION and self.is_ticketed:
            raise ValueError("Contribution events cannot be ticketed")

        return self

    def as_attrs(self) -> dict[str, object]:
        """Attribute map ready to merge into an event insert/update.

        ``venue_id`` is only present (as ``None``) when the venue must be
        cleared, and ``threshold_type`` only for threshold events, so that
        merging never overwrites values the caller chose elsewhere.
        """
        attrs: dict[str, object] = {
            "status": self.status.value,
            "is_ticketed": self.is_ticketed,
            "taxation_type": self.taxation_type.value,
            "is_virtual": self.is_virtual,
        }

        if self.clears_venue:
            attrs["venue_id"] = None

        if self.threshold_type is not None:
            attrs["threshold_type"] = self.threshold_type.value

        return attrs
