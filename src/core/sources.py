"""
Default endpoints and forum list for the content sources
"""
from typing import Tuple

NEWS_API_URL = "https://newsapi.org/v2/everything"

GOOGLE_NEWS_RSS_URL = "https://news.google.com/rss/search?q={query}&hl=en-US&gl=US&ceid=US:en"

REDDIT_URL = "https://www.reddit.com"

DEFAULT_SUBREDDITS: Tuple[str, ...] = ("Gold", "Silverbugs", "Wallstreetsilver", "Commodities")
