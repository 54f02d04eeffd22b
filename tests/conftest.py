from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for var in (
        "GUTENBLOCKS_NAMESPACE",
        "GUTENBLOCKS_PARSER",
        "GUTENBLOCKS_CLIENT_IDS",
        "GUTENBLOCKS_CLIENT_ID_PREFIX",
        "GUTENBLOCKS_JSON_INDENT",
        "GUTENBLOCKS_LOGS_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
    # setup_logger binds handlers to the stream of the test that created them
    logger = logging.getLogger("gutenblocks")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
