"""
Ordered "first non-empty wins" chain over source adapters
"""
import logging
from typing import List, Sequence

from core.entities import ScoredItem
from ingestion.base import SourceAdapter

logger = logging.getLogger(__name__)


class FallbackChain(SourceAdapter):
    """
    Tries each stage once, in order, and returns the first non-empty result.
    A stage that raises counts as empty. No retries within a run.
    """

    name = "fallback_chain"

    def __init__(self, stages: Sequence[SourceAdapter]):
        if not stages:
            raise ValueError("FallbackChain requires at least one stage")
        self.stages = tuple(stages)

    @property
    def order(self) -> List[str]:
        return [stage.name for stage in self.stages]

    async def fetch_items(self) -> List[ScoredItem]:
        for stage in self.stages:
            try:
                items = await stage.fetch_items()
            except Exception as e:
                logger.error(f"Stage {stage.name} failed: {e}")
                items = []

            if items:
                logger.info(f"Fallback chain served {len(items)} items from {stage.name}")
                return list(items)

            logger.info(f"Stage {stage.name} yielded nothing, falling back")

        logger.warning(f"Every stage of {self.order} came back empty")
        return []
