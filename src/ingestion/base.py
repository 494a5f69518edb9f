"""
Base classes for Ingestion
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

import httpx
from pydantic import ValidationError

from core.entities import ScoredItem
from processing.classifier import TextClassifier
from processing.prefilter import combined_text

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class SourceAdapter(ABC):
    """
    Base interface for all content sources.
    """

    name: str

    @abstractmethod
    async def fetch_items(self) -> List[ScoredItem]:
        """
        Fetch and score the source's current items.
        Must NEVER raise uncaught exceptions.
        """
        raise NotImplementedError


class HttpSourceAdapter(SourceAdapter):
    """
    Adapter backed by outbound HTTP calls and the text classifier.
    """

    def __init__(
        self,
        classifier: Optional[TextClassifier] = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.classifier = classifier or TextClassifier()
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
            follow_redirects=True,
        )

    def score_item(
        self,
        *,
        item_id: str,
        title: str,
        body: str,
        source_name: str,
        url: str,
        published_at: datetime,
    ) -> Optional[ScoredItem]:
        """
        Classify title + body into a ScoredItem.
        Items breaking the entity invariants are logged and dropped.
        """
        text = combined_text(title, body)
        classification = self.classifier.classify(text)

        try:
            return ScoredItem(
                id=item_id,
                title=title,
                source_name=source_name,
                url=url or "#",
                published_at=published_at,
                score=classification.score,
                relevant_metals=self.classifier.detect_metals(text),
            )
        except ValidationError as e:
            logger.error(f"{self.name} produced an invalid item {item_id!r}: {e}")
            return None
