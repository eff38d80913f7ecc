import logging
from urllib.parse import quote

from flask import request

REQUEST_LOGGER_NAME = 'dirserve.requests'


def request_uri():
    """Request target as the client sent it, percent-encoding intact."""
    raw = request.environ.get('REQUEST_URI') or request.environ.get('RAW_URI')
    if raw:
        return raw
    # No raw target from the server; re-encode the decoded path
    uri = quote(request.path)
    query = request.query_string.decode('latin-1')
    return f"{uri}?{query}" if query else uri


def install_request_logger(app, logger=None):
    """Log one "<status> <METHOD> <uri>" line for every response the app sends.

    Runs as an after_request hook, so it also sees the 500 Flask builds for an
    unhandled exception. The response is passed through untouched.
    """
    if logger is None:
        logger = logging.getLogger(REQUEST_LOGGER_NAME)

    @app.after_request
    def log_request(response):
        logger.info("%s %s %s", response.status_code, request.method, request_uri())
        return response

    return logger
