"""
Loads and handles config from config.yml
The NewsAPI credential (NEWS_API_KEY) is loaded from .env for security
"""
import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from core.lexicon import BEARISH_TERMS, BULLISH_TERMS
from core.sources import DEFAULT_SUBREDDITS, GOOGLE_NEWS_RSS_URL, NEWS_API_URL

logger = logging.getLogger(__name__)


class SentimentWeights(BaseModel):
    """Weights of each sub-score in the overall index. Must sum to 1."""
    news: float = Field(default=0.35, ge=0.0)
    social: float = Field(default=0.45, ge=0.0)
    momentum: float = Field(default=0.2, ge=0.0)

    @model_validator(mode="after")
    def _check_sum(self) -> "SentimentWeights":
        total = self.news + self.social + self.momentum
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Sentiment weights must sum to 1, got {total}")
        return self


class MomentumConfig(BaseModel):
    """Range of the placeholder momentum score."""
    min: int = 10
    max: int = 49


class LexiconConfig(BaseModel):
    bullish: List[str] = Field(default_factory=lambda: list(BULLISH_TERMS))
    bearish: List[str] = Field(default_factory=lambda: list(BEARISH_TERMS))


class Config(BaseModel):
    # News
    NEWS_API_KEY: Optional[str] = None
    NEWS_API_URL: str = NEWS_API_URL
    NEWS_API_PAGE_SIZE: int = 10
    GOOGLE_NEWS_RSS_URL: str = GOOGLE_NEWS_RSS_URL
    RSS_ITEMS_PER_QUERY: int = 3

    # Social
    REDDIT_SUBREDDITS: List[str] = Field(default_factory=lambda: list(DEFAULT_SUBREDDITS))
    REDDIT_POST_LIMIT: int = 10
    REDDIT_USER_AGENT: str = "metals-sentiment/1.0"
    SOCIAL_MAX_ITEMS: int = 10
    SOCIAL_MIN_TEXT_LENGTH: int = 10

    # Transport
    REQUEST_TIMEOUT: float = 5.0

    # Aggregation
    DISPLAY_CAP: int = 8
    NEWS_ITEM_WEIGHT: int = 15
    weights: SentimentWeights = SentimentWeights()
    momentum: MomentumConfig = MomentumConfig()
    lexicon: LexiconConfig = LexiconConfig()

    # Logging
    LOG_LEVEL: str = "INFO"


def _get_config_path() -> str:
    """Get the path to config.yml, handling different working directories."""
    # Try relative path first
    if os.path.exists('resources/config.yml'):
        return 'resources/config.yml'

    # Try from project root
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    config_path = os.path.join(project_root, 'resources', 'config.yml')
    if os.path.exists(config_path):
        return config_path

    raise FileNotFoundError("Cannot find resources/config.yml")


def parse_config(data: Dict[str, Any]) -> Config:
    """Build a Config from parsed YAML data plus environment secrets."""
    data = dict(data or {})

    # Secrets only ever come from the environment
    data.pop("NEWS_API_KEY", None)

    return Config(NEWS_API_KEY=os.getenv("NEWS_API_KEY") or None, **data)


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from config.yml and the NewsAPI key from .env."""
    # Load .env for sensitive credentials
    load_dotenv()

    config_path = path or _get_config_path()

    with open(config_path, 'r') as file:
        config = yaml.safe_load(file) or {}

    logger.debug(f"Loaded config from {config_path}")
    return parse_config(config)
