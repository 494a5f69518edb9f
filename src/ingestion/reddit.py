import logging
from datetime import datetime, timezone
from typing import List, Sequence

import httpx
from pydantic import ValidationError

from core.entities import ScoredItem
from core.schemas import RedditChild, RedditListing, RedditPost
from core.sources import DEFAULT_SUBREDDITS, REDDIT_URL
from ingestion.base import HttpSourceAdapter
from processing.prefilter import passes_prefilter

logger = logging.getLogger(__name__)


class RedditAdapter(HttpSourceAdapter):
    """
    Scores hot posts from a fixed list of subreddits.
    Subreddits are queried one after another; one failing does not stop the rest.
    """

    name = "reddit"
    BASE_URL = REDDIT_URL

    def __init__(
        self,
        subreddits: Sequence[str] = DEFAULT_SUBREDDITS,
        post_limit: int = 10,
        max_items: int = 10,
        min_text_length: int = 10,
        user_agent: str = "metals-sentiment/1.0",
        base_url: str = BASE_URL,
        **kwargs,
    ):
        kwargs.setdefault("headers", {"User-Agent": user_agent})
        super().__init__(**kwargs)
        self.subreddits = list(subreddits)
        self.post_limit = post_limit
        self.max_items = max_items
        self.min_text_length = min_text_length
        self.base_url = base_url.rstrip("/")

    async def fetch_items(self) -> List[ScoredItem]:
        items: List[ScoredItem] = []

        async with self.client() as client:
            for subreddit in self.subreddits:
                if len(items) >= self.max_items:
                    break

                posts = await self._fetch_subreddit(client, subreddit)

                for post in posts:
                    if len(items) >= self.max_items:
                        break
                    if not passes_prefilter(post.title or "", post.selftext or "", min_length=self.min_text_length):
                        continue

                    item = self._to_item(subreddit, post)
                    if item:
                        items.append(item)

        logger.info(f"Reddit returned {len(items)} items from {len(self.subreddits)} subreddits")
        return items

    async def _fetch_subreddit(self, client: httpx.AsyncClient, subreddit: str) -> List[RedditPost]:
        try:
            resp = await client.get(
                f"{self.base_url}/r/{subreddit}/hot.json",
                params={"limit": self.post_limit},
            )
            resp.raise_for_status()
            listing = RedditListing.model_validate(resp.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"Subreddit r/{subreddit} failed: {e}")
            return []

        children = (listing.data.children if listing.data else None) or []
        posts: List[RedditPost] = []
        for raw in children[:self.post_limit]:
            try:
                child = RedditChild.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping malformed post in r/{subreddit}: {e}")
                continue
            if child.data is not None:
                posts.append(child.data)
        return posts

    def _to_item(self, subreddit: str, post: RedditPost) -> ScoredItem | None:
        published = self._published(subreddit, post)
        selftext = post.selftext or ""
        title = (post.title or "").strip() or selftext.strip()[:120]

        return self.score_item(
            item_id=f"reddit-{post.id}" if post.id else f"reddit-{subreddit}-{post.permalink}",
            title=title,
            body=selftext,
            source_name=f"r/{subreddit}",
            url=f"{self.base_url}{post.permalink}" if post.permalink else "#",
            published_at=published,
        )

    @staticmethod
    def _published(subreddit: str, post: RedditPost) -> datetime:
        if post.created_utc is None:
            return datetime.now(timezone.utc)
        try:
            return datetime.fromtimestamp(post.created_utc, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            logger.warning(f"Post {post.id!r} in r/{subreddit} has unusable created_utc {post.created_utc!r}: {e}")
            return datetime.now(timezone.utc)
