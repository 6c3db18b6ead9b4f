"""
Logos - Flask API Server

JSON API for Ancient Greek and Latin word lookups.

Key Components:
    - Wiktionary: cleaned definition of a lemma for one language section
    - Morphology: Morpheus analyses of an inflected form
    - Lookup: headword resolution followed by definition

Every failure is answered as ``{"error": message}`` with a matching status code.
"""

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from logos import __version__
from logos.core.config import Settings
from logos.core.errors import LogosError
from logos.logging_config import get_logger, setup_logging
from logos.processing.api_client import APIClient
from logos.processing.wiktionary import DefinitionExtractor
from logos.web.blueprints import morphology_bp, wiktionary_bp

API_PREFIX = "/api"

logger = get_logger("app")


def create_app(settings=None, api_client=None):
    """
    Build the Flask application.

    Args:
        settings: Runtime settings; read from the environment when omitted
        api_client: Shared HTTP client; built from the settings when omitted

    Returns:
        Configured Flask application
    """
    settings = settings or Settings.from_env()
    setup_logging(debug=settings.debug)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.json.ensure_ascii = False
    CORS(app)

    api_client = api_client or APIClient(settings)
    extractor = DefinitionExtractor(api_client)

    app.extensions["logos"] = {"api_client": api_client, "extractor": extractor}
    app.register_blueprint(wiktionary_bp, url_prefix=API_PREFIX)
    app.register_blueprint(morphology_bp, url_prefix=API_PREFIX)

    @app.route(f"{API_PREFIX}/health")
    def health():
        """Liveness check"""
        return jsonify({"status": "ok", "version": __version__})

    @app.errorhandler(LogosError)
    def handle_lookup_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": "Server scraping failed."}), 500

    return app
