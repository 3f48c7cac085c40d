"""
Pydantic models for startuppong API resources.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Player(BaseModel):
    """A person on the ladder."""
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: int
    rating: float
    rank: int
    name: str


class Match(BaseModel):
    """The stats before and after a set."""
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: int
    played_time: int
    winner_id: int
    winner_name: str
    winner_rank_before: int
    winner_rank_after: int
    winner_rating_before: float
    winner_rating_after: float
    loser_id: int
    loser_name: str
    loser_rank_before: int
    loser_rank_after: int
    loser_rating_before: float
    loser_rating_after: float

    @property
    def played_at(self) -> datetime:
        """Time the match was recorded, as an aware UTC datetime."""
        return datetime.fromtimestamp(self.played_time, tz=timezone.utc)


class MatchSubmission(BaseModel):
    """Payload for recording a new match."""
    model_config = ConfigDict(frozen=True)

    winner_id: int = Field(gt=0)
    loser_id: int = Field(gt=0)

    @model_validator(mode="after")
    def check_distinct_players(self) -> "MatchSubmission":
        if self.winner_id == self.loser_id:
            raise ValueError("winner_id and loser_id must differ")
        return self

