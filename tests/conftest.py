import logging
import threading

import pytest
from werkzeug.serving import make_server

from response_simulator.api.app import create_app
from response_simulator.run_api import build_request_handler


@pytest.fixture
def logger():
    return logging.getLogger("response_simulator.tests")


@pytest.fixture
def app(logger):
    app = create_app(logger=logger)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def live_server(app, logger):
    """Threaded werkzeug server on an ephemeral port, yields its base URL."""
    handler = build_request_handler(5, logger)
    server = make_server("127.0.0.1", 0, app, threaded=True, request_handler=handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield f"http://127.0.0.1:{server.server_port}"

    server.shutdown()
    thread.join(timeout=5)
