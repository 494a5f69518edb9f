"""
Keyword-based sentiment scoring and metal attribution.

This is a bag-of-phrases heuristic: each lexicon entry is tested for
substring membership in the lowercased text and contributes once,
however often it occurs. "fears" therefore matches "fear", and
"rallies" does not match "rally".
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from core.lexicon import BEARISH_TERMS, BULLISH_TERMS, GENERIC_TERMS
from core.metals import ALL_METALS, DEFAULT_METALS, GENERIC_METALS, Metal, MetalType
from core.scoring import SentimentLabel, clamp_score, label_for_score

TERM_WEIGHT = 10


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable pair of sentiment term lists.
    """
    bullish: Tuple[str, ...] = BULLISH_TERMS
    bearish: Tuple[str, ...] = BEARISH_TERMS

    @classmethod
    def from_terms(cls, bullish: Iterable[str], bearish: Iterable[str]) -> "Lexicon":
        return cls(
            bullish=tuple(t.lower() for t in bullish),
            bearish=tuple(t.lower() for t in bearish),
        )


@dataclass(frozen=True)
class Classification:
    score: int
    label: SentimentLabel


class TextClassifier:
    """
    Scores free text against a lexicon and attributes it to metals.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        metals: Optional[Dict[str, Metal]] = None,
        term_weight: int = TERM_WEIGHT,
    ):
        self.lexicon = lexicon or Lexicon()
        self.metals = metals or ALL_METALS
        self.term_weight = term_weight

    def score(self, text: str) -> int:
        text = text.lower()
        score = 0

        for term in self.lexicon.bullish:
            if term in text:
                score += self.term_weight

        for term in self.lexicon.bearish:
            if term in text:
                score -= self.term_weight

        return clamp_score(score)

    def classify(self, text: str) -> Classification:
        score = self.score(text)
        return Classification(score=score, label=label_for_score(score))

    def detect_metals(self, text: str) -> List[MetalType]:
        """
        Return the metals a text concerns, in catalogue order.
        Never returns an empty list.
        """
        text = text.lower()

        found: List[MetalType] = [
            metal.id
            for metal in self.metals.values()
            if metal.id in text or metal.symbol.lower() in text
        ]
        if found:
            return found

        if any(term in text for term in GENERIC_TERMS):
            return list(GENERIC_METALS)

        return list(DEFAULT_METALS)
