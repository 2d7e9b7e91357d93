"""
Audit Models for the Roman Numeral Codec

Every conversion request made through the orchestrator is recorded:
1. What was asked (number or numeral)
2. What came back (value, or the kind of failure)
3. Which request it belonged to (correlation ID)

Audit events are append-only. They are never modified after creation.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class ConversionEventType(str, Enum):
    """Types of events we audit."""
    # Integer → numeral
    ENCODE_COMPLETED = "encode_completed"
    ENCODE_REJECTED = "encode_rejected"

    # Numeral → integer
    DECODE_COMPLETED = "decode_completed"
    DECODE_REJECTED = "decode_rejected"

    # System events
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every conversion request produces exactly one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: ConversionEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate the events of one request"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.encode_completed(1994, "MCMXCIV", "subtractive", correlation_id)
        event = AuditEventBuilder.decode_rejected("IIII", "InvalidFormatError", "...", correlation_id)
    """

    @staticmethod
    def encode_completed(
        number: int,
        numeral: str,
        mode: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=ConversionEventType.ENCODE_COMPLETED,
            correlation_id=correlation_id,
            description=f"Encoded {number} as {numeral}",
            details={
                "number": number,
                "numeral": numeral,
                "mode": mode,
            },
        )

    @staticmethod
    def encode_rejected(
        source: str,
        error_code: str,
        error_message: str,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=ConversionEventType.ENCODE_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Could not encode {source[:100]}",
            details={"source": source},
            error_code=error_code,
            error_message=error_message,
        )

    @staticmethod
    def decode_completed(
        source: str,
        number: int,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=ConversionEventType.DECODE_COMPLETED,
            correlation_id=correlation_id,
            description=f"Decoded {source[:100]} as {number}",
            details={
                "source": source,
                "number": number,
            },
        )

    @staticmethod
    def decode_rejected(
        source: str,
        error_code: str,
        error_message: str,
        correlation_id: UUID,
        fragment: Optional[str] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=ConversionEventType.DECODE_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Rejected numeral {source[:100]!r}",
            details={
                "source": source,
                "fragment": fragment,
            },
            error_code=error_code,
            error_message=error_message,
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=ConversionEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description=f"System error: {error_type}",
            details=details or {},
            error_code=error_type,
            error_message=error_message,
        )
