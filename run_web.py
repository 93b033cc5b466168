#!/usr/bin/env python
"""
Start the AgriSmart FastAPI app with uvicorn.
"""

import os
import sys
import argparse
import logging
import uvicorn

# make the package importable when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from agrismart.infra.config import get_config

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    cfg = get_config()
    parser = argparse.ArgumentParser(
        description="Start the AgriSmart API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
    python run_web.py                          # defaults from .env
    python run_web.py --port 8080              # custom port
    python run_web.py --predictor remote       # use DISEASE_PREDICTOR_URL
    python run_web.py --reload                 # auto reload for development
        """
    )

    parser.add_argument(
        '--host',
        type=str,
        default='0.0.0.0',
        help='bind address (default: 0.0.0.0)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=cfg.fastapi_port,
        help=f'port (default: {cfg.fastapi_port})'
    )

    parser.add_argument(
        '--reload',
        action='store_true',
        help='reload on code changes (development)'
    )

    parser.add_argument(
        '--predictor',
        type=str,
        choices=['simulated', 'remote'],
        default=None,
        help='disease predictor provider (default: DISEASE_PREDICTOR or simulated)'
    )

    parser.add_argument(
        '--workers',
        type=int,
        default=1,
        help='worker processes (default: 1)'
    )

    args = parser.parse_args()

    if args.predictor:
        os.environ['DISEASE_PREDICTOR'] = args.predictor
        get_config.cache_clear()

    host = args.host if args.host != '0.0.0.0' else 'localhost'
    logger.info(f"Starting AgriSmart API: http://{host}:{args.port}")
    logger.info(f"Disease predictor: {get_config().disease_predictor}")
    logger.info(f"Reload: {args.reload}")
    logger.info(f"Workers: {args.workers}")
    logger.info(f"API docs: http://{host}:{args.port}/docs")

    uvicorn.run(
        "agrismart.api.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info"
    )


if __name__ == '__main__':
    main()
