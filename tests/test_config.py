"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from services.config import Config, SentimentWeights, load_config, parse_config
from core.lexicon import BEARISH_TERMS, BULLISH_TERMS
from core.sources import DEFAULT_SUBREDDITS, GOOGLE_NEWS_RSS_URL, NEWS_API_URL
from ingestion.source_factory import create_classifier, create_news_chain, create_social_adapter
from ingestion.newsapi import NewsApiAdapter
from ingestion.reddit import RedditAdapter
from ingestion.rss import GoogleNewsAdapter
from processing.classifier import Lexicon


def test_defaults():
    config = parse_config({})

    assert config.NEWS_API_KEY is None
    assert config.DISPLAY_CAP == 8
    assert config.NEWS_ITEM_WEIGHT == 15
    assert config.REQUEST_TIMEOUT == 5.0
    assert config.SOCIAL_MAX_ITEMS == 10
    assert config.SOCIAL_MIN_TEXT_LENGTH == 10
    assert (config.weights.news, config.weights.social, config.weights.momentum) == (0.35, 0.45, 0.2)
    assert (config.momentum.min, config.momentum.max) == (10, 49)


def test_credential_comes_from_environment(monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "from-env")

    config = parse_config({"NEWS_API_KEY": "from-yaml"})

    assert config.NEWS_API_KEY == "from-env"


def test_credential_in_yaml_is_ignored():
    assert parse_config({"NEWS_API_KEY": "from-yaml"}).NEWS_API_KEY is None


def test_blank_credential_is_treated_as_missing(monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "")

    assert parse_config({}).NEWS_API_KEY is None


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "REDDIT_SUBREDDITS:\n"
        "  - Gold\n"
        "REQUEST_TIMEOUT: 2.5\n"
        "weights:\n"
        "  news: 0.5\n"
        "  social: 0.3\n"
        "  momentum: 0.2\n"
        "lexicon:\n"
        "  bullish: [Moon]\n"
        "  bearish: [dump]\n"
    )

    config = load_config(str(path))

    assert config.REDDIT_SUBREDDITS == ["Gold"]
    assert config.REQUEST_TIMEOUT == 2.5
    assert config.weights.news == 0.5
    assert config.lexicon.bullish == ["Moon"]


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("")

    assert load_config(str(path)) == Config()


def test_shipped_config_loads():
    config = load_config()

    assert config.DISPLAY_CAP == 8
    assert config.REDDIT_SUBREDDITS


@pytest.mark.parametrize(
    "weights",
    [
        {"news": 0.5, "social": 0.5, "momentum": 0.5},
        {"news": 1.2, "social": -0.4, "momentum": 0.2},
    ],
)
def test_invalid_weights_are_rejected(weights):
    with pytest.raises(ValidationError):
        SentimentWeights(**weights)


def test_lexicon_override_reaches_classifier():
    config = parse_config({"lexicon": {"bullish": ["Moon"], "bearish": ["dump"]}})

    classifier = create_classifier(config)

    assert classifier.score("gold to the moon") == 10
    assert classifier.score("gold rally") == 0


def test_factories_honour_config():
    config = parse_config({"REDDIT_SUBREDDITS": ["Gold", "Platinum"], "REQUEST_TIMEOUT": 3})

    chain = create_news_chain(config)
    social = create_social_adapter(config)

    assert chain.order == ["newsapi", "google_news", "static"]
    assert social.subreddits == ["Gold", "Platinum"]
    assert social.timeout == 3


def test_defaults_match_adapter_defaults():
    config = parse_config({})

    assert config.NEWS_API_URL == NEWS_API_URL == NewsApiAdapter.BASE_URL
    assert config.GOOGLE_NEWS_RSS_URL == GOOGLE_NEWS_RSS_URL == GoogleNewsAdapter.BASE_URL
    assert config.REDDIT_SUBREDDITS == list(DEFAULT_SUBREDDITS) == RedditAdapter().subreddits
    assert config.lexicon.bullish == list(BULLISH_TERMS) == list(Lexicon().bullish)
    assert config.lexicon.bearish == list(BEARISH_TERMS) == list(Lexicon().bearish)


def test_config_module_does_not_depend_on_adapters():
    import inspect
    import services.config as config_module

    source = inspect.getsource(config_module)

    assert "from ingestion" not in source
    assert "from processing" not in source
