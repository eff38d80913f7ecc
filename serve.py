#!/usr/bin/env python3
"""
Local static file server.
Serve the current directory and open it in the browser:
    python serve.py
Serve a single page's directory, starting on that page:
    python serve.py site/about.html --port 8080
"""
import logging
import sys

from dirserve.config import parse_args
from dirserve.errors import DirServeError
from dirserve.server import serve


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stdout,
    )


def main(argv=None):
    config = parse_args(argv)
    configure_logging(config.log_level)

    try:
        serve(config)
    except DirServeError as e:
        logging.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
