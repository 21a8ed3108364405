"""
Audit collaborators for violation records.

Events carry only kind, field, severity, timestamp and caller context.
Never payload text.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Protocol

from privguard.models.violation import Violation, ViolationKind, ViolationSeverity


@dataclass(frozen=True)
class AuditEvent:
    kind: ViolationKind
    field: str
    severity: ViolationSeverity
    timestamp: datetime
    context: Optional[str] = None

    @classmethod
    def from_violation(cls, violation: Violation, context: Optional[str] = None) -> "AuditEvent":
        return cls(
            kind=violation.kind,
            field=violation.field,
            severity=violation.severity,
            timestamp=datetime.now(timezone.utc),
            context=context,
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "field": self.field,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
        }


class AuditSink(Protocol):
    def record(self, event: AuditEvent) -> None:
        ...


class LoggingAuditSink:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("privguard.audit")

    def record(self, event: AuditEvent) -> None:
        self.logger.info(
            "PRIVACY_VIOLATION KIND=%s FIELD=%s SEVERITY=%s TIMESTAMP=%s CONTEXT=%s",
            event.kind.value,
            event.field,
            event.severity.value,
            event.timestamp.isoformat(),
            event.context or "unknown",
        )


class InMemoryAuditSink:
    """Thread-safe collector, mostly for tests and local inspection."""

    def __init__(self):
        self._events: List[AuditEvent] = []
        self._lock = threading.Lock()

    def record(self, event: AuditEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> List[AuditEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
