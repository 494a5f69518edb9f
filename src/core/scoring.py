"""
Score bounds and the score -> sentiment mappings shared by every stage
"""
import math
from typing import Dict, Literal

SentimentLabel = Literal["bullish", "neutral", "bearish"]
SentimentLevel = Literal["very_bearish", "bearish", "neutral", "bullish", "very_bullish"]

MIN_SCORE = -100
MAX_SCORE = 100

# Item labels use a symmetric dead zone around zero
LABEL_THRESHOLD = 10

LEVEL_LABELS: Dict[str, str] = {
    "very_bearish": "Very Bearish",
    "bearish": "Bearish",
    "neutral": "Neutral",
    "bullish": "Bullish",
    "very_bullish": "Very Bullish",
}

LEVEL_EMOJIS: Dict[str, str] = {
    "very_bearish": "\U0001F628",
    "bearish": "\U0001F61F",
    "neutral": "\U0001F610",
    "bullish": "\U0001F60A",
    "very_bullish": "\U0001F929",
}


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always going towards +infinity.
    Python's round() is banker's rounding, which would shift scores sitting
    exactly on a half.
    """
    return int(math.floor(value + 0.5))


def label_for_score(score: int) -> SentimentLabel:
    """
    Map an item score to its directional label.
    """
    if score > LABEL_THRESHOLD:
        return "bullish"
    if score < -LABEL_THRESHOLD:
        return "bearish"
    return "neutral"


def sentiment_level(score: int) -> SentimentLevel:
    """
    Map an overall score to one of the five sentiment bands.
    Upper bounds are inclusive.
    """
    if score <= -50:
        return "very_bearish"
    if score <= -20:
        return "bearish"
    if score <= 20:
        return "neutral"
    if score <= 50:
        return "bullish"
    return "very_bullish"


def sentiment_label(level: SentimentLevel) -> str:
    return LEVEL_LABELS[level]


def sentiment_emoji(level: SentimentLevel) -> str:
    return LEVEL_EMOJIS[level]
