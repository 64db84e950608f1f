"""Tests for lexwatch.core.logging."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from lexwatch.core.logging import (
    SENSITIVE_PATTERNS,
    LexwatchLogger,
    MonitorContext,
    _add_context,
    _sanitize_event_dict,
    _sanitize_value,
    configure_logging,
    get_current_context,
    get_logger,
    with_context,
)


class TestSanitization:
    def test_known_patterns(self) -> None:
        assert {"token", "bearer", "authorization", "password"} <= SENSITIVE_PATTERNS

    @pytest.mark.parametrize("key", ["token", "API_TOKEN", "Authorization", "bearer_value"])
    def test_redacts_sensitive_keys(self, key: str) -> None:
        assert _sanitize_value(key, "secret-value") == "[REDACTED]"

    def test_keeps_other_keys(self) -> None:
        assert _sanitize_value("job_id", "42") == "42"

    def test_redacts_nested_dict(self) -> None:
        event = {"event": "client.request", "headers": {"Authorization": "Bearer x", "Accept": "json"}}
        result = _sanitize_event_dict(None, "info", event)
        assert result["headers"] == {"Authorization": "[REDACTED]", "Accept": "json"}
        assert result["event"] == "client.request"


# ─── Context ────────────────────────────────────────────────────────────


class TestMonitorContext:
    def test_to_dict_skips_missing_domain(self) -> None:
        ctx = MonitorContext(job_id="42")
        assert set(ctx.to_dict()) == {"job_id", "run_id"}

    def test_with_context_sets_and_resets(self) -> None:
        ctx = MonitorContext(job_id="42", domain="extract-articles")
        assert get_current_context() is None
        with with_context(ctx):
            assert get_current_context() is ctx
        assert get_current_context() is None

    def test_add_context_does_not_override_bound_keys(self) -> None:
        ctx = MonitorContext(job_id="42", domain="extract-articles")
        with with_context(ctx):
            event = _add_context(None, "info", {"event": "x", "job_id": "override"})
        assert event["job_id"] == "override"
        assert event["domain"] == "extract-articles"
        assert event["run_id"] == ctx.run_id


# ─── Logger and configuration ───────────────────────────────────────────


class TestLogger:
    def test_get_logger_returns_wrapper(self) -> None:
        assert isinstance(get_logger("monitor"), LexwatchLogger)

    def test_bind_is_immutable(self) -> None:
        base = get_logger("monitor")
        bound = base.bind(job_id="1")
        assert bound is not base
        assert bound._context["job_id"] == "1"
        assert "job_id" not in base._context


class TestConfigureLogging:
    def test_both_requires_file(self) -> None:
        with pytest.raises(ValueError, match="file_path"):
            configure_logging(format="both")

    def test_json_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "lexwatch.log"
        configure_logging(level="DEBUG", format="json", file_path=log_file)
        assert log_file.parent.is_dir()

        get_logger("monitor").info("monitor.started", job_id="42", token="abc")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "monitor.started"
        assert record["component"] == "monitor"
        assert record["job_id"] == "42"
        assert record["token"] == "[REDACTED]"
        assert "timestamp" in record

    def test_level_filters(self, tmp_path: Path) -> None:
        log_file = tmp_path / "lexwatch.log"
        configure_logging(level="WARNING", format="json", file_path=log_file)
        logger = get_logger("monitor")
        logger.info("monitor.progress")
        logger.warning("monitor.errored", kind="network")
        for handler in logging.getLogger().handlers:
            handler.flush()
        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events == ["monitor.errored"]

    def test_context_included(self, tmp_path: Path) -> None:
        log_file = tmp_path / "lexwatch.log"
        configure_logging(level="INFO", format="json", file_path=log_file)
        with with_context(MonitorContext(job_id="9", domain="req-identify")):
            get_logger("monitor").info("monitor.tick")
        for handler in logging.getLogger().handlers:
            handler.flush()
        record = json.loads(log_file.read_text().strip())
        assert record["job_id"] == "9"
        assert record["domain"] == "req-identify"
