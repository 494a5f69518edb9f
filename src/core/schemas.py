"""
Pydantic records for external payloads and the HTTP response.
Every external field is optional so partial payloads and explicit nulls still parse.
List containers hold raw records; adapters validate them one at a time.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.entities import ScoredItem, SentimentIndex


class NewsApiSource(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class NewsApiArticle(BaseModel):
    """
    Article entry from the NewsAPI /v2/everything endpoint
    """
    model_config = ConfigDict(populate_by_name=True)

    source: Optional[NewsApiSource] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")


class NewsApiResponse(BaseModel):
    status: Optional[str] = None
    total_results: Optional[int] = Field(default=None, alias="totalResults")
    articles: Optional[List[Any]] = None


class RedditPost(BaseModel):
    """
    The `data` object of a Reddit listing child
    """
    id: Optional[str] = None
    title: Optional[str] = None
    selftext: Optional[str] = None
    permalink: Optional[str] = None
    created_utc: Optional[float] = None


class RedditChild(BaseModel):
    kind: Optional[str] = None
    data: Optional[RedditPost] = None


class RedditListingData(BaseModel):
    children: Optional[List[Any]] = None


class RedditListing(BaseModel):
    kind: Optional[str] = None
    data: Optional[RedditListingData] = None


class SentimentResponse(BaseModel):
    """
    Payload of GET /api/sentiment
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    sentiment: SentimentIndex
    news: List[ScoredItem]
    timestamp: datetime
