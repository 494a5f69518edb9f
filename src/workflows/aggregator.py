"""
Combines news, social and momentum signals into one sentiment index
"""
import asyncio
import logging
from statistics import fmean
from typing import List, Optional

from core.entities import AggregationResult, ScoredItem, SentimentIndex, SourceScores
from core.scoring import clamp_score, round_half_up
from ingestion.base import SourceAdapter
from processing.momentum import MomentumSource, PlaceholderMomentumSource
from services.config import SentimentWeights

logger = logging.getLogger(__name__)

DISPLAY_CAP = 8
NEWS_ITEM_WEIGHT = 15


def news_score(items: List[ScoredItem], item_weight: int = NEWS_ITEM_WEIGHT) -> int:
    """+weight per bullish item, -weight per bearish item, clamped."""
    score = 0
    for item in items:
        if item.sentiment_label == "bullish":
            score += item_weight
        elif item.sentiment_label == "bearish":
            score -= item_weight
    return clamp_score(score)


def social_score(items: List[ScoredItem]) -> int:
    """Mean raw classifier score of the social items, 0 when there are none."""
    if not items:
        return 0
    return clamp_score(round_half_up(fmean(item.score for item in items)))


def overall_score(scores: SourceScores, weights: SentimentWeights) -> int:
    # Weights sum to 1, so the result already lies in [-100, 100]
    return round_half_up(
        scores.news * weights.news
        + scores.social * weights.social
        + scores.momentum * weights.momentum
    )


class SentimentAggregator:
    """
    Runs the news chain and the social source concurrently and fuses them.
    Never raises: a failing branch contributes no items.
    """

    def __init__(
        self,
        news_source: SourceAdapter,
        social_source: SourceAdapter,
        momentum_source: Optional[MomentumSource] = None,
        weights: Optional[SentimentWeights] = None,
        display_cap: int = DISPLAY_CAP,
        news_item_weight: int = NEWS_ITEM_WEIGHT,
    ):
        self.news_source = news_source
        self.social_source = social_source
        self.momentum_source = momentum_source or PlaceholderMomentumSource()
        self.weights = weights or SentimentWeights()
        self.display_cap = display_cap
        self.news_item_weight = news_item_weight

    async def aggregate(self) -> AggregationResult:
        news_items, social_items = await asyncio.gather(
            self._collect(self.news_source),
            self._collect(self.social_source),
        )

        logger.info(f"Collected {len(news_items)} news and {len(social_items)} social items")

        # News first so it wins the display slots
        merged = (news_items + social_items)[:self.display_cap]

        scores = SourceScores(
            news=news_score(merged, self.news_item_weight),
            social=social_score(social_items),
            momentum=self._momentum(),
        )
        sentiment = SentimentIndex.from_scores(overall_score(scores, self.weights), scores)

        logger.info(
            f"Sentiment {sentiment.overall_score} ({sentiment.level}): "
            f"news={scores.news} social={scores.social} momentum={scores.momentum}"
        )
        return AggregationResult(sentiment=sentiment, news=merged)

    async def _collect(self, source: SourceAdapter) -> List[ScoredItem]:
        try:
            return list(await source.fetch_items())
        except Exception as e:
            logger.exception(f"Source {source.name} failed: {e}")
            return []

    def _momentum(self) -> int:
        try:
            return clamp_score(self.momentum_source.score())
        except Exception as e:
            logger.exception(f"Momentum source {type(self.momentum_source).__name__} failed: {e}")
            return 0
