"""
Diagnostics Module.

Provides the logging port used by the entity graph. The EntityManager does
not write to a process-wide logger; it emits structured events to a sink
injected at construction time. Two sinks ship with the package:

- LoguruSink: forwards events to loguru, with the event context bound as extra fields.
- CollectingSink: keeps events in memory, optionally forwarding them onwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger


@dataclass(frozen=True)
class DiagnosticEvent:
    """
    A single structured diagnostic event.

    Attributes:
        level: Loguru level name ("DEBUG", "INFO", "WARNING", ...).
        message: Human readable message.
        context: Structured key/value context (suite name, reference, ...).
    """

    level: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


class DiagnosticsSink(ABC):
    """
    Base class for diagnostics sinks.

    Subclasses implement ``emit``; the level helpers build the event.
    """

    @abstractmethod
    def emit(self, event: DiagnosticEvent) -> None:
        """Deliver a single event."""

    def debug(self, message: str, **context: Any) -> None:
        self.emit(DiagnosticEvent("DEBUG", message, context))

    def info(self, message: str, **context: Any) -> None:
        self.emit(DiagnosticEvent("INFO", message, context))

    def warning(self, message: str, **context: Any) -> None:
        self.emit(DiagnosticEvent("WARNING", message, context))

    warn = warning


class LoguruSink(DiagnosticsSink):
    """Forward diagnostic events to a loguru logger."""

    def __init__(self, component: str = "athena") -> None:
        self._logger = logger.bind(component=component)

    def emit(self, event: DiagnosticEvent) -> None:
        self._logger.bind(**event.context).log(event.level, event.message)


class CollectingSink(DiagnosticsSink):
    """
    Record diagnostic events in memory.

    Usage::

        sink = CollectingSink()
        manager = EntityManager(settings, log=sink)
        for event in sink.warnings:
            print(event.message, event.context)
    """

    def __init__(self, forward_to: Optional[DiagnosticsSink] = None) -> None:
        self.events: List[DiagnosticEvent] = []
        self._forward_to = forward_to

    def emit(self, event: DiagnosticEvent) -> None:
        self.events.append(event)
        if self._forward_to is not None:
            self._forward_to.emit(event)

    def by_level(self, level: str) -> List[DiagnosticEvent]:
        """Return the recorded events with the given level name."""
        level = level.upper()
        return [event for event in self.events if event.level == level]

    @property
    def warnings(self) -> List[DiagnosticEvent]:
        return self.by_level("WARNING")

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
