import os

from flask import Blueprint, Response

not_found_bp = Blueprint('not_found', __name__)

NOT_FOUND_PATH = os.path.join(os.path.dirname(__file__), '..', 'data', 'not_found.html')


def _load_page():
    with open(NOT_FOUND_PATH, encoding='utf-8') as f:
        return f.read()


NOT_FOUND_HTML = _load_page()


# Unmatched paths get the fixed page with a 200 status, not 404.
@not_found_bp.app_errorhandler(404)
def not_found(error):
    return Response(NOT_FOUND_HTML, status=200, mimetype='text/html')
