"""Command line entry point: python -m simple_webserver"""
import argparse
import logging
from typing import List, Optional

import uvicorn

from .config import Settings, configure_logging, split_host_port
from .main import create_app

logger = logging.getLogger("simple_webserver")

DEFAULT_LISTEN_HOST = "0.0.0.0"
DEFAULT_LISTEN_PORT = 8082


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> Settings:
    """Command line flags override SIMPLE_WEBSERVER_* env vars, which override defaults."""
    settings = settings or Settings()

    ap = argparse.ArgumentParser(prog="simple-webserver", description="Diagnostic HTTP server with a Redis health probe")
    ap.add_argument(
        "-listen", "--listen",
        default=settings.listen,
        help="Address + Port to listen on. Format ip:port. Environment variable: SIMPLE_WEBSERVER_LISTEN",
    )
    ap.add_argument(
        "-redis", "--redis",
        default=settings.redis,
        help="Address + Port where a redis server is listening. Environment variable: SIMPLE_WEBSERVER_REDIS",
    )
    args = ap.parse_args(argv)

    return settings.model_copy(update={"listen": args.listen, "redis": args.redis})


def main(argv: Optional[List[str]] = None):
    settings = parse_args(argv)
    configure_logging(settings.log_level)
    settings.log_configuration()

    host, port = split_host_port(settings.listen, DEFAULT_LISTEN_HOST, DEFAULT_LISTEN_PORT)
    app = create_app(settings)

    logger.info(f"Starting webserver and listen on {settings.listen}")
    # Requests are logged by RequestLoggerMiddleware
    uvicorn.run(app, host=host, port=port, access_log=False, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
