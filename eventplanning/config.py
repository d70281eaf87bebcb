from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator
from typing import Self
import logging


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"

    VOTE_YES_WEIGHT: float = Field(
        default=1.0, description="Score contributed by a 'yes' vote"
    )
    VOTE_IF_NEED_BE_WEIGHT: float = Field(
        default=0.5, description="Score contributed by an 'if need be' vote"
    )
    VOTE_NO_WEIGHT: float = Field(
        default=0.0, description="Score contributed by a 'no' vote"
    )

    POLL_LOW_PARTICIPATION_VOTES: int = Field(default=5, gt=0)
    POLL_HIGH_PARTICIPATION_VOTES: int = Field(default=20, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(
                f"Invalid LOG_LEVEL: {v}. Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return level

    @field_validator("VOTE_YES_WEIGHT", "VOTE_IF_NEED_BE_WEIGHT", "VOTE_NO_WEIGHT")
    @classmethod
    def validate_vote_weight(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("Vote weights must be between 0.0 and 1.0")
        return v

    @model_validator(mode="after")
    def validate_participation_bounds(self) -> Self:
        if self.POLL_HIGH_PARTICIPATION_VOTES <= self.POLL_LOW_PARTICIPATION_VOTES:
            raise ValueError(
                "POLL_HIGH_PARTICIPATION_VOTES must be greater than POLL_LOW_PARTICIPATION_VOTES"
            )
        return self

    @property
    def log_level(self) -> int:
        return logging.getLevelNamesMapping()[self.LOG_LEVEL]


settings = Settings()
