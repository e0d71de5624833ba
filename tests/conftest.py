import threading

import pytest
from werkzeug.serving import make_server

from primesvc.config import ServiceConfig
from primesvc.server import create_app


@pytest.fixture
def app():
    return create_app(ServiceConfig())


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def live_server():
    """
    Real threaded server on an OS-assigned port; yields its base URL.
    """
    server = make_server("127.0.0.1", 0, create_app(ServiceConfig(host="127.0.0.1", port=0)), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)
