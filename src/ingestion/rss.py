"""
Ingestion from RSS search feeds
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence
from urllib.parse import quote_plus

import feedparser

from core.entities import ScoredItem
from core.metals import ALL_METALS
from core.sources import GOOGLE_NEWS_RSS_URL
from ingestion.base import HttpSourceAdapter

logger = logging.getLogger(__name__)


class RSSSearchAdapter(HttpSourceAdapter):
    """
    Queries an RSS search feed once per keyword.
    A failed or unparseable query contributes nothing.
    """

    name = "rss"

    def __init__(
        self,
        url_template: str,
        keywords: Sequence[str],
        source_name: str,
        items_per_query: int = 3,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.url_template = url_template
        self.keywords = list(keywords)
        self.source_name = source_name
        self.items_per_query = items_per_query

    async def fetch_items(self) -> List[ScoredItem]:
        items: List[ScoredItem] = []
        seen_urls = set()
        fetched_at = datetime.now(timezone.utc)

        async with self.client() as client:
            for keyword in self.keywords:
                url = self.url_template.format(query=quote_plus(f"{keyword} price"))
                try:
                    resp = await client.get(url)
                    resp.raise_for_status()
                    feed = feedparser.parse(resp.content)
                except Exception as e:
                    logger.warning(f"RSS query '{keyword}' failed: {e}")
                    continue

                if feed.bozo and not feed.entries:
                    logger.warning(f"RSS query '{keyword}' returned an unparseable feed: {feed.get('bozo_exception')}")
                    continue

                for entry in feed.entries[:self.items_per_query]:
                    link = entry.get("link", "")
                    if link and link in seen_urls:
                        continue

                    title = (entry.get("title") or "").strip()
                    if not title:
                        continue

                    item = self.score_item(
                        item_id=entry.get("id") or link or f"{self.name}-{keyword}-{len(items)}",
                        title=title,
                        body="",
                        source_name=self._entry_source(entry),
                        url=link,
                        published_at=self._published(entry) or fetched_at,
                    )
                    if item:
                        items.append(item)
                        seen_urls.add(link)

        logger.info(f"{self.source_name} returned {len(items)} items")
        return items

    def _entry_source(self, entry) -> str:
        source = entry.get("source") or {}
        return source.get("title") or self.source_name

    @staticmethod
    def _published(entry) -> Optional[datetime]:
        parsed = entry.get("published_parsed")
        if not parsed:
            return None
        return datetime(*parsed[:6], tzinfo=timezone.utc)


class GoogleNewsAdapter(RSSSearchAdapter):
    name = "google_news"
    BASE_URL = GOOGLE_NEWS_RSS_URL

    def __init__(self, url_template: str = BASE_URL, keywords: Optional[Sequence[str]] = None, **kwargs):
        super().__init__(
            url_template=url_template,
            keywords=keywords or list(ALL_METALS),
            source_name="Google News",
            **kwargs,
        )
