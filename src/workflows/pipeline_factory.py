"""
Pipeline Factory - Creates the sentiment aggregator from configuration.
"""
import logging
from typing import Optional

import httpx

from ingestion.source_factory import create_classifier, create_news_chain, create_social_adapter
from processing.momentum import MomentumSource, PlaceholderMomentumSource
from services.config import Config
from workflows.aggregator import SentimentAggregator

logger = logging.getLogger(__name__)


def create_aggregator(
    config: Config,
    momentum_source: Optional[MomentumSource] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SentimentAggregator:
    """
    Wire adapters, fallback chain and momentum source into an aggregator.

    Args:
        config: Loaded configuration
        momentum_source: Overrides the placeholder momentum source
        transport: Optional httpx transport shared by every network adapter

    Returns:
        Configured SentimentAggregator
    """
    classifier = create_classifier(config)

    if momentum_source is None:
        momentum_source = PlaceholderMomentumSource(
            low=config.momentum.min,
            high=config.momentum.max,
        )

    logger.info(f"Using momentum source: {type(momentum_source).__name__}")

    return SentimentAggregator(
        news_source=create_news_chain(config, classifier=classifier, transport=transport),
        social_source=create_social_adapter(config, classifier=classifier, transport=transport),
        momentum_source=momentum_source,
        weights=config.weights,
        display_cap=config.DISPLAY_CAP,
        news_item_weight=config.NEWS_ITEM_WEIGHT,
    )
