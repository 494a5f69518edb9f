"""
Source Factory - Creates ingestion adapters from configuration.
"""
import logging
from typing import Optional

import httpx

from ingestion.base import SourceAdapter
from ingestion.fallback import FallbackChain
from ingestion.newsapi import NewsApiAdapter
from ingestion.reddit import RedditAdapter
from ingestion.rss import GoogleNewsAdapter
from ingestion.static import StaticNewsAdapter
from processing.classifier import Lexicon, TextClassifier
from services.config import Config

logger = logging.getLogger(__name__)


def create_classifier(config: Config) -> TextClassifier:
    lexicon = Lexicon.from_terms(config.lexicon.bullish, config.lexicon.bearish)
    return TextClassifier(lexicon=lexicon)


def create_news_chain(
    config: Config,
    classifier: Optional[TextClassifier] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FallbackChain:
    """
    Build the news fallback chain: NewsAPI -> Google News RSS -> static headlines.

    Args:
        config: Loaded configuration
        classifier: Shared classifier, created from config when omitted
        transport: Optional httpx transport for the network stages

    Returns:
        FallbackChain whose stage order is the degradation order
    """
    classifier = classifier or create_classifier(config)

    chain = FallbackChain([
        NewsApiAdapter(
            api_key=config.NEWS_API_KEY,
            base_url=config.NEWS_API_URL,
            page_size=config.NEWS_API_PAGE_SIZE,
            classifier=classifier,
            timeout=config.REQUEST_TIMEOUT,
            transport=transport,
        ),
        GoogleNewsAdapter(
            url_template=config.GOOGLE_NEWS_RSS_URL,
            items_per_query=config.RSS_ITEMS_PER_QUERY,
            classifier=classifier,
            timeout=config.REQUEST_TIMEOUT,
            transport=transport,
        ),
        StaticNewsAdapter(),
    ])
    logger.info(f"Created news chain: {' -> '.join(chain.order)}")
    return chain


def create_social_adapter(
    config: Config,
    classifier: Optional[TextClassifier] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SourceAdapter:
    adapter = RedditAdapter(
        subreddits=config.REDDIT_SUBREDDITS,
        post_limit=config.REDDIT_POST_LIMIT,
        max_items=config.SOCIAL_MAX_ITEMS,
        min_text_length=config.SOCIAL_MIN_TEXT_LENGTH,
        user_agent=config.REDDIT_USER_AGENT,
        classifier=classifier or create_classifier(config),
        timeout=config.REQUEST_TIMEOUT,
        transport=transport,
    )
    logger.info(f"Created reddit adapter: {', '.join(config.REDDIT_SUBREDDITS)}")
    return adapter
