"""
Quart application serving the sentiment index to the dashboard.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from quart import Quart, jsonify
from quart_cors import cors

from core.schemas import SentimentResponse
from services.config import load_config
from workflows.aggregator import SentimentAggregator
from workflows.pipeline_factory import create_aggregator

logger = logging.getLogger(__name__)

# Initialize app
app = Quart(__name__)
app = cors(app)

aggregator: Optional[SentimentAggregator] = None


def get_aggregator() -> SentimentAggregator:
    """Get or create the SentimentAggregator instance."""
    global aggregator
    if aggregator is None:
        aggregator = create_aggregator(load_config())
    return aggregator


@app.route('/api/health')
async def health():
    return jsonify({'status': 'ok'})


@app.route('/api/sentiment')
async def sentiment():
    try:
        result = await get_aggregator().aggregate()

        response = SentimentResponse(
            sentiment=result.sentiment,
            news=result.news,
            timestamp=datetime.now(timezone.utc),
        )
        return jsonify(response.model_dump(mode='json', by_alias=True))

    except Exception as e:
        logger.exception(f"Error calculating sentiment: {e}")
        return jsonify({'success': False, 'error': 'Failed to calculate sentiment'}), 500


@app.after_request
async def no_cache(response):
    # Every request must trigger a fresh aggregation
    response.headers['Cache-Control'] = 'no-store'
    return response
