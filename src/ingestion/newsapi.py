"""
Ingest headlines from the NewsAPI search endpoint
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

import httpx
from pydantic import ValidationError

from core.entities import ScoredItem
from core.schemas import NewsApiArticle, NewsApiResponse
from core.sources import NEWS_API_URL
from ingestion.base import HttpSourceAdapter

logger = logging.getLogger(__name__)

NEWS_QUERY = "(gold OR silver OR platinum OR copper) AND price"

# NewsAPI replaces deleted articles with this placeholder
REMOVED_MARKER = "[Removed]"


class NewsApiAdapter(HttpSourceAdapter):
    name = "newsapi"
    BASE_URL = NEWS_API_URL

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = BASE_URL,
        page_size: int = 10,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url
        self.page_size = page_size

    async def fetch_items(self) -> List[ScoredItem]:
        if not self.api_key:
            logger.info("NEWS_API_KEY not configured, skipping NewsAPI")
            return []

        params = {
            "q": NEWS_QUERY,
            "language": "en",
            "sortBy": "publishedAt",
            "pageSize": self.page_size,
        }

        try:
            async with self.client() as client:
                resp = await client.get(
                    self.base_url,
                    params=params,
                    headers={"X-Api-Key": self.api_key},
                )
                resp.raise_for_status()
                payload = NewsApiResponse.model_validate(resp.json())

        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"NewsAPI request failed: {e}")
            return []

        if payload.status != "ok":
            logger.warning(f"NewsAPI returned status {payload.status!r}")
            return []

        fetched_at = datetime.now(timezone.utc)
        items: List[ScoredItem] = []

        for i, raw in enumerate(payload.articles or []):
            try:
                article = NewsApiArticle.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping malformed NewsAPI article {i}: {e}")
                continue

            title = (article.title or "").strip()
            if not title or title == REMOVED_MARKER:
                continue

            source_name = article.source.name if article.source else None
            item = self.score_item(
                item_id=article.url or f"newsapi-{i}",
                title=title,
                body=article.description or "",
                source_name=source_name or "NewsAPI",
                url=article.url or "#",
                published_at=article.published_at or fetched_at,
            )
            if item:
                items.append(item)

        logger.info(f"NewsAPI returned {len(items)} items")
        return items
