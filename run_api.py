"""
API Server Runner

Entry point for running the send-guard FastAPI service under uvicorn with
environment setup taken from the command line.
"""

import argparse
import logging
import os

import uvicorn
from dotenv import load_dotenv

from send_guard.utils.safe_logging import configure_safe_logging

logger = logging.getLogger("api_runner")


def parse_arguments():
    """Parse command line arguments for the API server."""
    parser = argparse.ArgumentParser(description="Run the Send Guard API server")

    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind the server to (default: 8000)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--env",
        type=str,
        choices=["development", "testing", "production"],
        default="development",
        help="Environment to run in (default: development)"
    )

    return parser.parse_args()


def setup_environment(env: str) -> None:
    """Export environment settings before the application reads them."""
    os.environ["ENVIRONMENT"] = env
    os.environ.setdefault("DEBUG", "true" if env == "development" else "false")


def main():
    load_dotenv()
    args = parse_arguments()
    configure_safe_logging(level=logging.INFO)
    setup_environment(args.env)

    logger.info(f"Starting API server in {args.env} mode")
    logger.info(f"Server will be available at http://{args.host}:{args.port}")
    if args.env != "production":
        logger.info(f"API documentation will be available at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info" if args.env == "production" else "debug"
    )


if __name__ == "__main__":
    main()
