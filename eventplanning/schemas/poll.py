from pydantic import BaseModel, ConfigDict, Field, computed_field
import datetime
from ..models.enums import VoteType


class DateVoteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    vote_type: VoteType
    option_id: int | None = None
    user_id: int | None = None


class VoteTally(BaseModel):
    model_config = ConfigDict(frozen=True)

    yes: int = Field(0, ge=0)
    if_need_be: int = Field(0, ge=0)
    no: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    percentage: int = Field(0, ge=0, le=100)
    score: float = 0.0


class DateOptionTally(BaseModel):
    model_config = ConfigDict(frozen=True)

    option_id: int
    date: datetime.date | None = None
    tally: VoteTally


class VoteRequest(BaseModel):
    option_id: int
    vote_type: str


class BulkVotePlan(BaseModel):
    inserts: list[VoteRequest] = []
    updates: list[VoteRequest] = []
    unchanged: list[VoteRequest] = []

    @computed_field
    @property
    def inserted(self) -> int:
        return len(self.inserts)

    @computed_field
    @property
    def updated(self) -> int:
        return len(self.updates)


class DateOptionChanges(BaseModel):
    to_add: list[datetime.date] = []
    to_remove: list[datetime.date] = []
    unchanged: list[datetime.date] = []

    @property
    def has_changes(self) -> bool:
        return bool(self.to_add or self.to_remove)
