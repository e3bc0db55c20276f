"""
Unit Tests for the Diagnostics Module.

Covers:
- CollectingSink: event recording, level filtering, forwarding.
- LoguruSink: delivery to loguru with structured context.
"""

from __future__ import annotations

from typing import Any, Dict, Generator, List

import pytest
from loguru import logger

from athena.diagnostics import CollectingSink, DiagnosticEvent, DiagnosticsSink, LoguruSink


@pytest.fixture
def loguru_records() -> Generator[List[Dict[str, Any]], None, None]:
    """Capture loguru records emitted during a test."""
    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


class TestCollectingSink:
    """Tests for the CollectingSink class."""

    def test_records_events(self) -> None:
        """Test that level helpers build structured events."""
        sink = CollectingSink()

        sink.debug("loaded", files=3)
        sink.warning("no refs", suite="auth")

        assert sink.events == [
            DiagnosticEvent("DEBUG", "loaded", {"files": 3}),
            DiagnosticEvent("WARNING", "no refs", {"suite": "auth"}),
        ]
        assert len(sink) == 2

    def test_by_level(self) -> None:
        """Test filtering events by level name."""
        sink = CollectingSink()
        sink.info("built")
        sink.warn("careful")

        assert [event.message for event in sink.by_level("warning")] == ["careful"]
        assert [event.message for event in sink.warnings] == ["careful"]

    def test_forwarding(self) -> None:
        """Test that events are forwarded to a downstream sink."""
        downstream = CollectingSink()
        sink = CollectingSink(forward_to=downstream)

        sink.warning("forwarded")

        assert downstream.events == sink.events

    def test_clear(self) -> None:
        """Test clearing recorded events."""
        sink = CollectingSink()
        sink.info("x")
        sink.clear()
        assert sink.events == []

    def test_base_is_abstract(self) -> None:
        """Test that the sink port cannot be instantiated directly."""
        with pytest.raises(TypeError):
            DiagnosticsSink()  # type: ignore[abstract]


class TestLoguruSink:
    """Tests for the LoguruSink class."""

    def test_forwards_to_loguru(self, loguru_records: List[Dict[str, Any]]) -> None:
        """Test that events reach loguru with level and bound context."""
        sink = LoguruSink(component="entity_manager")

        sink.warning("no refs", suite="auth")

        assert len(loguru_records) == 1
        record = loguru_records[0]
        assert record["level"].name == "WARNING"
        assert record["message"] == "no refs"
        assert record["extra"]["suite"] == "auth"
        assert record["extra"]["component"] == "entity_manager"

    def test_debug_level(self, loguru_records: List[Dict[str, Any]]) -> None:
        """Test that debug events keep their level."""
        LoguruSink().debug("loaded")
        assert loguru_records[0]["level"].name == "DEBUG"
