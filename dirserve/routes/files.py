import os

from flask import Blueprint, abort, current_app, redirect, request, send_from_directory
from werkzeug.security import safe_join

files_bp = Blueprint('files', __name__)

INDEX_FILE = 'index.html'


@files_bp.route('/', defaults={'path': ''})
@files_bp.route('/<path:path>')
def serve_file(path):
    root = current_app.config['SERVE_ROOT']

    target = safe_join(root, path)
    if target is None:
        abort(404)

    if os.path.isdir(target):
        if path and not path.endswith('/'):
            location = request.path + '/'
            if request.query_string:
                location += '?' + request.query_string.decode('latin-1')
            return redirect(location, code=307)
        path = path + INDEX_FILE

    return send_from_directory(root, path)
