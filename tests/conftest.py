"""Pytest fixtures for lexwatch tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator

import httpx
import pytest
import structlog

from lexwatch.client import JobStatusClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Reset CLI and structlog logging state around each test."""
    import lexwatch.cli.helpers as cli_helpers

    cli_helpers.reset_logging_state()
    cli_helpers.set_output_level(cli_helpers.OutputLevel.NORMAL)
    structlog.reset_defaults()

    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    for handler in original_handlers:
        root_logger.removeHandler(handler)

    yield

    cli_helpers.reset_logging_state()
    cli_helpers.set_output_level(cli_helpers.OutputLevel.NORMAL)
    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def api_token(monkeypatch: pytest.MonkeyPatch) -> str:
    """Provide a bearer token through the default environment variable."""
    monkeypatch.setenv("LEXWATCH_TOKEN", "test-token")
    monkeypatch.delenv("LEXWATCH_CONFIG", raising=False)
    return "test-token"


@pytest.fixture
def make_client() -> Callable[[Handler], JobStatusClient]:
    """Build a JobStatusClient whose requests are answered by ``handler``."""

    def _make(handler: Handler) -> JobStatusClient:
        return JobStatusClient(
            "http://api.test/api",
            "test-token",
            timeout=5.0,
            transport=httpx.MockTransport(handler),
        )

    return _make
