"""
Fixed headlines used when every network source comes back empty
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Sequence, Tuple

from core.entities import ScoredItem
from core.metals import MetalType
from ingestion.base import SourceAdapter

BULLISH_PRESET = 30
NEUTRAL_PRESET = 0


@dataclass(frozen=True)
class StaticHeadline:
    title: str
    score: int
    metals: Tuple[MetalType, ...]


DEFAULT_HEADLINES: Tuple[StaticHeadline, ...] = (
    StaticHeadline(
        title="Gold prices rally as investors seek safe haven amid market volatility",
        score=BULLISH_PRESET,
        metals=("gold",),
    ),
    StaticHeadline(
        title="Silver demand hits record high from industrial applications",
        score=BULLISH_PRESET,
        metals=("silver",),
    ),
    StaticHeadline(
        title="Copper prices stabilize after recent correction",
        score=NEUTRAL_PRESET,
        metals=("copper",),
    ),
    StaticHeadline(
        title="Platinum gains momentum on automotive sector recovery",
        score=BULLISH_PRESET,
        metals=("platinum",),
    ),
    StaticHeadline(
        title="Central bank gold purchases continue at record pace",
        score=BULLISH_PRESET,
        metals=("gold",),
    ),
)

DEFAULT_SOURCES = ("Reuters", "Bloomberg", "CNBC", "MarketWatch", "Kitco News")


class StaticNewsAdapter(SourceAdapter):
    """
    Network-free last resort. Always returns its headlines, one hour apart.
    """

    name = "static"

    def __init__(
        self,
        headlines: Sequence[StaticHeadline] = DEFAULT_HEADLINES,
        sources: Sequence[str] = DEFAULT_SOURCES,
    ):
        self.headlines = list(headlines)
        self.sources = list(sources)

    async def fetch_items(self) -> List[ScoredItem]:
        now = datetime.now(timezone.utc)

        return [
            ScoredItem(
                id=f"news-{i}",
                title=headline.title,
                source_name=self.sources[i % len(self.sources)],
                url="#",
                published_at=now - timedelta(hours=i),
                score=headline.score,
                relevant_metals=list(headline.metals),
            )
            for i, headline in enumerate(self.headlines)
        ]
