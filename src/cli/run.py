"""
Command line entry point: run one aggregation or serve the HTTP API.
"""
import argparse
import asyncio
import json
import logging
import time

from hypercorn.asyncio import serve
from hypercorn.config import Config as HypercornConfig

from services.config import load_config
from services.logging import setup_logging
from workflows.pipeline_factory import create_aggregator


async def run_once(pretty: bool = False) -> None:
    start_time = time.perf_counter()
    logger = logging.getLogger(__name__)

    config = load_config()
    setup_logging(config.LOG_LEVEL)

    logger.info("Starting sentiment aggregation run")

    aggregator = create_aggregator(config)
    result = await aggregator.aggregate()

    print(json.dumps(
        result.model_dump(mode="json", by_alias=True),
        indent=2 if pretty else None,
        ensure_ascii=False,
    ))

    end_time = time.perf_counter()
    logger.info(f"Total time: {end_time - start_time}")


def run_server(host: str = '0.0.0.0', port: int = 5000, debug: bool = False) -> None:
    """Run the web server."""
    from web.app import app

    config = load_config()
    setup_logging(logging.DEBUG if debug else config.LOG_LEVEL)
    logging.getLogger(__name__).info(f"Starting sentiment API on http://{host}:{port}")

    server_config = HypercornConfig()
    server_config.bind = [f"{host}:{port}"]
    server_config.use_reloader = debug
    server_config.accesslog = '-'
    server_config.errorlog = '-'

    asyncio.run(serve(app, server_config))


def main() -> None:
    parser = argparse.ArgumentParser(description='Precious metals sentiment aggregator')
    parser.add_argument('command', nargs='?', default='run',
                        choices=['run', 'serve'],
                        help='Command to execute')
    parser.add_argument('--pretty', action='store_true',
                        help='Indent the JSON output of run')
    parser.add_argument('--host', default='0.0.0.0',
                        help='Host to bind to (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=5000,
                        help='Port to bind to (default: 5000)')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode')

    args = parser.parse_args()

    if args.command == 'serve':
        run_server(host=args.host, port=args.port, debug=args.debug)
    else:
        asyncio.run(run_once(pretty=args.pretty))


if __name__ == "__main__":
    main()
