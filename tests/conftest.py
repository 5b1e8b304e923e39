"""
Shared pytest fixtures for latencyprobe tests.
"""

import logging
from pathlib import Path

import httpx
import pytest


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy inspection.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_dir = test_output_root / module_name / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def mock_client():
    """
    Builds an httpx.Client whose requests are answered by a handler
    instead of the network.

    Example usage:
        def test_probe(mock_client):
            client = mock_client(lambda request: httpx.Response(200))
    """
    clients: list[httpx.Client] = []

    def factory(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def reset_latencyprobe_logging():
    """Reset the library logger before and after each test.

    Leaves only a NullHandler and an inherited level so one test's logging
    setup cannot leak into the next.
    """
    logger = logging.getLogger("latencyprobe")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
