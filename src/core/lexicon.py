"""
Default sentiment term lists, matched as lowercase substrings
"""
from typing import Tuple

BULLISH_TERMS: Tuple[str, ...] = (
    "rally", "surge", "soar", "climb", "gain", "rise", "bullish", "demand",
    "record", "high", "buy", "investment", "safe haven", "inflation hedge",
    "outperform", "breakout", "momentum", "upside", "growth", "positive",
)

BEARISH_TERMS: Tuple[str, ...] = (
    "drop", "fall", "decline", "plunge", "crash", "bearish", "sell",
    "weak", "low", "slump", "pullback", "correction", "downside", "risk",
    "negative", "concern", "fear", "uncertainty", "pressure", "retreat",
)

# Market-wide terms with no specific metal
GENERIC_TERMS: Tuple[str, ...] = ("metal", "commodity")
