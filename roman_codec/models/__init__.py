"""
Data Models Package

This package contains the Pydantic models used by the codec.
"""

from roman_codec.models.numeral import (
    EXTENDED_UPPER_BOUND,
    LOWER_BOUND,
    STANDARD_UPPER_BOUND,
    ConversionResult,
    NotationMode,
    NumeralValue,
    RomanNumeral,
    ValidationIssue,
    ValidationResult,
    check_number,
)
from roman_codec.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditSeverity,
    ConversionEventType,
)

__all__ = [
    # Numeral models
    "EXTENDED_UPPER_BOUND",
    "LOWER_BOUND",
    "STANDARD_UPPER_BOUND",
    "ConversionResult",
    "NotationMode",
    "NumeralValue",
    "RomanNumeral",
    "ValidationIssue",
    "ValidationResult",
    "check_number",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditSeverity",
    "ConversionEventType",
]
