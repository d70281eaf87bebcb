import os
import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from eventplanning.config import Settings
from eventplanning.services.voting_service import VotingService


DATE_OPTIONS = ["confirmed", "polling", "planning", "invalid", None]
VENUE_OPTIONS = ["confirmed", "virtual", "polling", "tbd", "invalid"]
PARTICIPATION_OPTIONS = [
    "free",
    "ticketed",
    "contribution",
    "crowdfunding",
    "interest",
    "invalid",
]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        VOTE_YES_WEIGHT=1.0,
        VOTE_IF_NEED_BE_WEIGHT=0.5,
        VOTE_NO_WEIGHT=0.0,
        POLL_LOW_PARTICIPATION_VOTES=5,
        POLL_HIGH_PARTICIPATION_VOTES=20,
    )


@pytest.fixture
def voting_service(test_settings: Settings) -> VotingService:
    return VotingService(test_settings)


@pytest.fixture
def all_form_combinations() -> list[dict[str, str | None]]:
    return [
        {
            "date_certainty": date_certainty,
            "venue_certainty": venue_certainty,
            "participation_type": participation_type,
        }
        for date_certainty in DATE_OPTIONS
        for venue_certainty in VENUE_OPTIONS
        for participation_type in PARTICIPATION_OPTIONS
    ]
