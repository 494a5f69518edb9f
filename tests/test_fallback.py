"""Tests for the static adapter and the first-non-empty fallback chain."""

import pytest

from ingestion.fallback import FallbackChain
from ingestion.static import StaticNewsAdapter


@pytest.mark.asyncio
async def test_static_adapter_covers_every_metal():
    items = await StaticNewsAdapter().fetch_items()

    assert len(items) >= 4
    assert len({i.id for i in items}) == len(items)
    assert {m for i in items for m in i.relevant_metals} == {"gold", "silver", "copper", "platinum"}
    assert {i.sentiment_label for i in items} <= {"bullish", "neutral"}
    assert all(i.url == "#" for i in items)


@pytest.mark.asyncio
async def test_static_adapter_spaces_items_an_hour_apart():
    items = await StaticNewsAdapter().fetch_items()

    gaps = {(a.published_at - b.published_at).total_seconds() for a, b in zip(items, items[1:])}
    assert gaps == {3600.0}


@pytest.mark.asyncio
async def test_first_non_empty_stage_wins(static_source, make_item):
    empty = static_source([], name="primary")
    secondary = static_source([make_item(20)], name="secondary")
    last = static_source([make_item(0)], name="last")

    items = await FallbackChain([empty, secondary, last]).fetch_items()

    assert items == secondary.items
    assert (empty.calls, secondary.calls, last.calls) == (1, 1, 0)


@pytest.mark.asyncio
async def test_raising_stage_counts_as_empty(static_source, failing_source, make_item):
    broken = failing_source(name="primary")
    backup = static_source([make_item(0)], name="backup")

    items = await FallbackChain([broken, backup]).fetch_items()

    assert len(items) == 1
    assert broken.calls == 1


@pytest.mark.asyncio
async def test_every_stage_empty(static_source):
    stages = [static_source([], name="a"), static_source([], name="b")]

    assert await FallbackChain(stages).fetch_items() == []
    assert [s.calls for s in stages] == [1, 1]


@pytest.mark.asyncio
async def test_static_stage_always_rescues(failing_source):
    chain = FallbackChain([failing_source("newsapi"), failing_source("google_news"), StaticNewsAdapter()])

    items = await chain.fetch_items()

    assert len(items) == 5


def test_order_is_inspectable(static_source):
    chain = FallbackChain([static_source([], "newsapi"), static_source([], "google_news"), StaticNewsAdapter()])

    assert chain.order == ["newsapi", "google_news", "static"]


def test_chain_needs_a_stage():
    with pytest.raises(ValueError):
        FallbackChain([])
