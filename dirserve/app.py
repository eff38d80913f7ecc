from flask import Flask
from flask_cors import CORS

from dirserve.routes.files import files_bp
from dirserve.routes.not_found import not_found_bp
from dirserve.utils.request_log import install_request_logger


def create_app(root, logger=None, cors=True):
    """Build the app serving `root`: static files first, the not-found page for the rest."""
    # No built-in /static route; every URL maps onto `root`.
    app = Flask(__name__, static_folder=None)
    app.config['SERVE_ROOT'] = root

    if cors:
        CORS(app, resources={r"/*": {"origins": "*"}})

    app.register_blueprint(files_bp)
    app.register_blueprint(not_found_bp)

    install_request_logger(app, logger)
    return app
