import math
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Protocol, TypedDict

from ..config import Settings, settings as default_settings
from ..core.exceptions import InvalidVoteTypeError
from ..core.logging import PlanningLogger
from ..models.enums import VoteType
from ..schemas.poll import (
    BulkVotePlan,
    DateOptionTally,
    DateVoteRead,
    VoteRequest,
    VoteTally,
)


class VoteLike(Protocol):
    vote_type: VoteType | str


DateOptionVotes = tuple[int, date | None, Iterable[VoteLike | Mapping[str, object]]]


class PollSummary(TypedDict):
    total_votes: int
    options: list[DateOptionTally]
    winners: list[int]
    result_type: str
    participation_rate: str


def round_half_up_percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


class VotingService:
    """Tallies and ranks date poll votes.

    Votes are read-only objects or mapping rows; every vote must carry one of
    the three ``VoteType`` values. An unknown vote type fails validation
    (a ``ValueError``) rather than being counted. Scores within float noise
    of each other count as a tie.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    def tally(self, votes: Iterable[VoteLike | Mapping[str, object]]) -> VoteTally:
        counts = Counter(DateVoteRead.model_validate(vote).vote_type for vote in votes)

        yes = counts[VoteType.YES]
        if_need_be = counts[VoteType.IF_NEED_BE]
        no = counts[VoteType.NO]
        total = yes + if_need_be + no

        score = (
            yes * self.settings.VOTE_YES_WEIGHT
            + if_need_be * self.settings.VOTE_IF_NEED_BE_WEIGHT
            + no * self.settings.VOTE_NO_WEIGHT
        )

        return VoteTally(
            yes=yes,
            if_need_be=if_need_be,
            no=no,
            total=total,
            percentage=round_half_up_percentage(yes, total),
            score=round(score, 6),
        )

    def tally_options(self, options: Iterable[DateOptionVotes]) -> list[DateOptionTally]:
        return [
            DateOptionTally(option_id=option_id, date=option_date, tally=self.tally(votes))
            for option_id, option_date, votes in options
        ]

    def rank_date_options(self, options: Iterable[DateOptionVotes]) -> list[DateOptionTally]:
        """Tallies for every option, best score first (ties keep input order)."""
        return sorted(
            self.tally_options(options), key=lambda option: option.tally.score, reverse=True
        )

    def summarize_poll(self, options: Iterable[DateOptionVotes]) -> PollSummary:
        option_tallies = self.tally_options(options)
        total_votes = sum(option.tally.total for option in option_tallies)

        max_score = max((option.tally.score for option in option_tallies), default=0.0)
        winners = [
            option.option_id
            for option in option_tallies
            if max_score > 0 and math.isclose(option.tally.score, max_score)
        ]

        result_type = "no_votes"
        if total_votes > 0:
            if len(winners) == 1:
                result_type = "clear_winner"
            elif len(winners) > 1:
                result_type = "tie"
            else:
                result_type = "unclear"

        return {
            "total_votes": total_votes,
            "options": option_tallies,
            "winners": winners,
            "result_type": result_type,
            "participation_rate": self._calculate_participation_rate(total_votes),
        }

    def _calculate_participation_rate(self, votes: int) -> str:
        if votes == 0:
            return "no_participation"
        elif votes < self.settings.POLL_LOW_PARTICIPATION_VOTES:
            return "low"
        elif votes < self.settings.POLL_HIGH_PARTICIPATION_VOTES:
            return "moderate"
        else:
            return "high"

    def plan_bulk_votes(
        self,
        existing: Mapping[int, VoteType | str],
        requested: Iterable[VoteRequest | Mapping[str, object]],
        user_id: int | None = None,
    ) -> BulkVotePlan:
        """Split a voter's batch into inserts, updates and no-ops.

        ``existing`` maps option id to the voter's current vote type. The
        batch is rejected as a whole if any vote type is invalid; a later
        request for the same option replaces an earlier one.
        """
        requests = [VoteRequest.model_validate(vote) for vote in requested]

        invalid = [
            {"option_id": vote.option_id, "vote_type": vote.vote_type}
            for vote in requests
            if vote.vote_type not in VoteType._value2member_map_
        ]
        if invalid:
            PlanningLogger.log_invalid_votes(invalid, user_id=user_id)
            raise InvalidVoteTypeError(invalid)

        latest: dict[int, VoteRequest] = {}
        for vote in requests:
            latest.pop(vote.option_id, None)
            latest[vote.option_id] = vote

        plan = BulkVotePlan()
        for option_id, vote in latest.items():
            current = existing.get(option_id)
            if current is None:
                plan.inserts.append(vote)
            elif VoteType(current) != VoteType(vote.vote_type):
                plan.updates.append(vote)
            else:
                plan.unchanged.append(vote)

        PlanningLogger.log_bulk_vote_plan(
            plan.inserted, plan.updated, len(plan.unchanged), user_id=user_id
        )

        return plan


def tally(votes: Iterable[VoteLike | Mapping[str, object]]) -> VoteTally:
    return VotingService().tally(votes)
