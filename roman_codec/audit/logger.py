"""
Audit Logger

Every conversion request is logged. The audit logger:
- Writes each event as a structured JSON log line
- Keeps a bounded in-memory history for the front ends
- Supports correlation IDs to trace related events
"""

from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from roman_codec.config import get_settings
from roman_codec.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory history of the most recent events (for display)
    """

    def __init__(
        self,
        history_size: Optional[int] = None,
    ):
        """
        Initialize audit logger.

        Args:
            history_size: Number of events kept in memory.
                          If None, read from AppSettings.audit_history_size.
        """
        if history_size is None:
            history_size = get_settings().app.audit_history_size
        self._history: deque[AuditEvent] = deque(maxlen=history_size)
        self._logger = structlog.get_logger(__name__)

    def log(self, event: AuditEvent) -> None:
        """
        Log an audit event and append it to the history.
        """
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._history.append(event)

    def log_encode_completed(
        self,
        number: int,
        numeral: str,
        mode: str,
        correlation_id: UUID,
    ) -> None:
        """Log a successful encode."""
        event = AuditEventBuilder.encode_completed(
            number=number,
            numeral=numeral,
            mode=mode,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_encode_rejected(
        self,
        source: str,
        error: Exception,
        correlation_id: UUID,
    ) -> None:
        """Log an encode that failed validation."""
        event = AuditEventBuilder.encode_rejected(
            source=source,
            error_code=type(error).__name__,
            error_message=str(error),
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_decode_completed(
        self,
        source: str,
        number: int,
        correlation_id: UUID,
    ) -> None:
        """Log a successful decode."""
        event = AuditEventBuilder.decode_completed(
            source=source,
            number=number,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_decode_rejected(
        self,
        source: str,
        error: Exception,
        correlation_id: UUID,
    ) -> None:
        """Log a numeral that failed validation."""
        event = AuditEventBuilder.decode_rejected(
            source=source,
            error_code=type(error).__name__,
            error_message=str(error),
            correlation_id=correlation_id,
            fragment=getattr(error, "fragment", None),
        )
        self.log(event)

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an unexpected error."""
        event = AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
            correlation_id=correlation_id,
        )
        self.log(event)

    def recent_events(self, limit: Optional[int] = None) -> list[AuditEvent]:
        """
        Most recent events, newest first.

        Args:
            limit: Maximum number of events to return (all if None)
        """
        events = list(reversed(self._history))
        if limit is not None:
            events = events[:limit]
        return events

    def events_for(self, correlation_id: UUID) -> list[AuditEvent]:
        """Events of one request, in chronological order."""
        return [
            event for event in self._history
            if event.correlation_id == correlation_id
        ]


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a conversion request and pass it through.
    """
    return uuid4()
