import logging

import pytest


def by_slow_marker(item):
    # Unit tests first, then slow unit tests, then integration tests, then slow integration tests
    is_slow = 0 if item.get_closest_marker("slow") is None else 1
    is_integration = 1 if "integration" in str(item.fspath) else 0
    return (is_integration, is_slow)


def pytest_addoption(parser):
    parser.addoption("--slow-last", action="store_true", default=False)


def pytest_collection_modifyitems(items, config):
    if config.getoption("--slow-last"):
        items.sort(key=by_slow_marker)


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Configure logging to work properly with caplog fixture.

    The root ``confstore`` logger is created with propagate=False; this fixture lets its records reach the root logger
    so that caplog can capture them.
    """
    caplog.set_level(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)

    confstore_logger = logging.getLogger("confstore")
    original_propagate = confstore_logger.propagate
    confstore_logger.propagate = True

    yield

    root_logger.setLevel(original_level)
    confstore_logger.propagate = original_propagate


@pytest.fixture
def sample_document() -> bytes:
    return b"""{
        "name": "ingest-service",
        "port": 8080,
        "ratio": 3.9,
        "negative": -3.9,
        "enabled": true,
        "nothing": null,
        "hosts": ["alpha", "beta"],
        "ports": [80, 443.0],
        "offsets": [-1, 2, -3],
        "database": {"host": "localhost", "port": 5432, "replicas": [{"host": "r1"}]}
    }"""


@pytest.fixture
def config_file(tmp_path, sample_document):
    path = tmp_path / "config.json"
    path.write_bytes(sample_document)
    return path
