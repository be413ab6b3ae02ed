"""Diagnostics channel for non-fatal, operator-facing events.

Diagnostics are distinct from errors: they never change the outcome of a
request. They are recorded on the application (so tests and health endpoints
can inspect them) and written to the log at WARNING level.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from scitrera_app_framework import get_logger, Variables


@dataclass(frozen=True)
class DiagnosticEvent:
    """A single diagnostic event."""
    code: str
    message: str
    source: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)
    emitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Diagnostics:
    """Collects diagnostic events emitted while the application runs."""

    def __init__(self, v: Variables = None, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger(v, name=self.__class__.__name__)
        self._events: list[DiagnosticEvent] = []

    def emit(self, code: str, message: str, source: str = None, **details) -> DiagnosticEvent:
        event = DiagnosticEvent(code=code, message=message, source=source, details=details)
        self._events.append(event)
        self.logger.warning("[%s] %s", code, message)
        return event

    @property
    def events(self) -> list[DiagnosticEvent]:
        return list(self._events)

    def by_code(self, code: str) -> list[DiagnosticEvent]:
        return [event for event in self._events if event.code == code]
