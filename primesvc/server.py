"""
server.py

Flask application exposing the scanner:

  POST /primes   {"start": 1, "end": 10}  ->  [1,2,3,5,7]
"""

import logging

from flask import Flask, request
from werkzeug.exceptions import BadRequest

from primesvc.config import ServiceConfig
from primesvc.request_handler import RequestHandler, TEXT_HEADERS

logger = logging.getLogger(__name__)


def create_app(config=None, handler=None):
    config = config or ServiceConfig()
    handler = handler or RequestHandler(strict_errors=config.strict_errors)

    app = Flask(__name__)

    @app.route("/primes", methods=["POST"])
    def get_primes():
        if not request.is_json:
            logger.warning("Rejected request: content type is not application/json")
            return "Request body must be JSON with content type application/json.", 400, TEXT_HEADERS
        try:
            payload = request.get_json()
        except BadRequest:
            logger.warning("Rejected request: body is not valid JSON")
            return "Request body is not valid JSON.", 400, TEXT_HEADERS
        return handler.handle(payload)

    return app


def start_server(config):
    """
    Bind config.host:config.port and serve until interrupted.
    """
    logger.info(f"Starting Server on Port: {config.port}")
    app = create_app(config)
    app.run(host=config.host, port=config.port)
