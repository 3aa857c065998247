import logging
import os
from typing import Generator

import pytest


@pytest.fixture(scope="session", autouse=True)
def _load_test_env() -> Generator[None, None, None]:
    """Pin the environment the CLI config reads so a developer's .env does not leak in."""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "DEBUG"
    os.environ["LOKI_ENABLED"] = "false"
    yield


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """setup_loki_logging replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def rfc_kek_128() -> bytes:
    return bytes.fromhex("000102030405060708090A0B0C0D0E0F")


@pytest.fixture
def rfc_kek_192() -> bytes:
    return bytes.fromhex("000102030405060708090A0B0C0D0E0F1011121314151617")


@pytest.fixture
def rfc_kek_256() -> bytes:
    return bytes.fromhex("000102030405060708090A0B0C0D0E0F101112131415161718191A1B1C1D1E1F")
