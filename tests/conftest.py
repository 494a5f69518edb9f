"""Pytest configuration and fixtures shared by all tests.

Keeps tests isolated from real credentials so no test reaches the network.
"""
from datetime import datetime, timezone
from itertools import count
from typing import List

import pytest

from core.entities import ScoredItem
from ingestion.base import SourceAdapter
from processing.momentum import MomentumSource


@pytest.fixture(autouse=True)
def isolate_from_env(monkeypatch):
    """Never let a developer's NEWS_API_KEY leak into a test."""
    monkeypatch.delenv("NEWS_API_KEY", raising=False)


class StaticSource(SourceAdapter):
    """Adapter returning a fixed list, counting how often it was asked."""

    def __init__(self, items: List[ScoredItem], name: str = "static-test"):
        self.items = items
        self.name = name
        self.calls = 0

    async def fetch_items(self) -> List[ScoredItem]:
        self.calls += 1
        return list(self.items)


class FailingSource(SourceAdapter):
    """Adapter that breaks its contract by raising."""

    def __init__(self, name: str = "failing-test"):
        self.name = name
        self.calls = 0

    async def fetch_items(self) -> List[ScoredItem]:
        self.calls += 1
        raise RuntimeError("source exploded")


class FixedMomentum(MomentumSource):
    def __init__(self, value: int):
        self.value = value

    def score(self) -> int:
        return self.value


@pytest.fixture
def make_item():
    """Factory for ScoredItems with a given score."""
    ids = count()

    def _make(score: int = 0, source_name: str = "Reuters", metals=("gold",)) -> ScoredItem:
        n = next(ids)
        return ScoredItem(
            id=f"item-{n}",
            title=f"Headline {n}",
            source_name=source_name,
            url=f"https://example.com/{n}",
            published_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
            score=score,
            relevant_metals=list(metals),
        )

    return _make


@pytest.fixture
def static_source():
    return StaticSource


@pytest.fixture
def failing_source():
    return FailingSource


@pytest.fixture
def fixed_momentum():
    return FixedMomentum
