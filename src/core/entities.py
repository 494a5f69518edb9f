from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from core.metals import MetalType
from core.scoring import (
    MAX_SCORE,
    MIN_SCORE,
    SentimentLabel,
    SentimentLevel,
    label_for_score,
    sentiment_emoji,
    sentiment_label,
    sentiment_level,
)


class _Entity(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ScoredItem(_Entity):
    """
    One analyzed content unit.
    The sentiment label is always derived from the stored score.
    """
    id: str
    title: str = Field(..., min_length=1)
    source_name: str
    url: str = "#"
    published_at: datetime
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    relevant_metals: List[MetalType] = Field(..., min_length=1)

    @field_validator("relevant_metals")
    @classmethod
    def _unique_metals(cls, value: List[MetalType]) -> List[MetalType]:
        if len(set(value)) != len(value):
            raise ValueError(f"duplicate metals in {value}")
        return value

    @computed_field(alias="sentimentLabel")
    @property
    def sentiment_label(self) -> SentimentLabel:
        return label_for_score(self.score)


class SourceScores(_Entity):
    news: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    social: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    momentum: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)


class SentimentIndex(_Entity):
    """
    Aggregate result of one pipeline run.
    """
    overall_score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    level: SentimentLevel
    label: str
    source_scores: SourceScores
    computed_at: datetime

    @computed_field
    @property
    def emoji(self) -> str:
        return sentiment_emoji(self.level)

    @classmethod
    def from_scores(cls, overall_score: int, source_scores: SourceScores) -> "SentimentIndex":
        """Build an index whose level and label follow from the overall score."""
        level = sentiment_level(overall_score)
        return cls(
            overall_score=overall_score,
            level=level,
            label=sentiment_label(level),
            source_scores=source_scores,
            computed_at=datetime.now(timezone.utc),
        )


class AggregationResult(_Entity):
    """
    The sentiment index together with the content used to produce it.
    """
    sentiment: SentimentIndex
    news: List[ScoredItem] = Field(default_factory=list)
