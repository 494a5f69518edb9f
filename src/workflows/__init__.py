"""
Workflows module - Sentiment aggregation orchestration.
"""
from workflows.aggregator import SentimentAggregator
from workflows.pipeline_factory import create_aggregator

__all__ = [
    "SentimentAggregator",
    "create_aggregator",
]
