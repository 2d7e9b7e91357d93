"""
Main Orchestrator for the Roman Numeral Codec

This module ties the codec to its front ends (console and web UI) and
defines the conversion flow:
    raw input → detect direction → encode or decode → audit → result

The orchestrator enforces the boundaries:
- Codec failures (RangeError, InvalidFormatError) become failed results
- Anything else is audited as a system error and re-raised
- Every request is audited under one correlation ID
"""

import logging
import re
from typing import Optional
from uuid import UUID

from roman_codec.audit import AuditLogger, create_correlation_id
from roman_codec.config import get_settings
from roman_codec.errors import NumeralError
from roman_codec.models.numeral import ConversionResult, NotationMode
from roman_codec.numerals import RomanCodec


INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class ConversionFlow:
    """
    Orchestrates conversion requests.

    Flow:
    1. Input → Strip and detect direction (digits encode, anything else decodes)
    2. Convert → Run the codec
    3. Audit → Record the outcome under the request's correlation ID
    4. Result → ConversionResult for display
    """

    def __init__(
        self,
        codec: Optional[RomanCodec] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._codec = codec or RomanCodec()
        self._audit_logger = audit_logger

    @property
    def codec(self) -> RomanCodec:
        return self._codec

    def convert_number(
        self,
        number: int,
        mode: NotationMode = NotationMode.SUBTRACTIVE,
        correlation_id: Optional[UUID] = None,
    ) -> ConversionResult:
        """
        Encode an integer.

        Returns:
            ConversionResult; success is False if the number is out of range
        """
        correlation_id = correlation_id or create_correlation_id()
        mode = NotationMode(mode)
        source = str(number)

        try:
            numeral = self._codec.encode(number, mode)
        except NumeralError as e:
            if self._audit_logger:
                self._audit_logger.log_encode_rejected(
                    source=source,
                    error=e,
                    correlation_id=correlation_id,
                )
            return ConversionResult(
                correlation_id=correlation_id,
                direction="encode",
                source=source,
                success=False,
                mode=mode,
                error_type=type(e).__name__,
                error_message=str(e),
            )
        except Exception as e:
            if self._audit_logger:
                self._audit_logger.log_error(
                    error_type=type(e).__name__,
                    error_message=str(e),
                    details={"source": source, "direction": "encode"},
                    correlation_id=correlation_id,
                )
            raise

        if self._audit_logger:
            self._audit_logger.log_encode_completed(
                number=number,
                numeral=numeral,
                mode=mode.value,
                correlation_id=correlation_id,
            )

        return ConversionResult(
            correlation_id=correlation_id,
            direction="encode",
            source=source,
            success=True,
            numeral=numeral,
            number=number,
            mode=mode,
        )

    def convert_numeral(
        self,
        text: str,
        correlation_id: Optional[UUID] = None,
    ) -> ConversionResult:
        """
        Decode a Roman numeral.

        Returns:
            ConversionResult; success is False if the numeral was rejected
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            numeral, report = self._codec.parse_with_report(text)
        except NumeralError as e:
            if self._audit_logger:
                self._audit_logger.log_decode_rejected(
                    source=text,
                    error=e,
                    correlation_id=correlation_id,
                )
            return ConversionResult(
                correlation_id=correlation_id,
                direction="decode",
                source=text,
                success=False,
                error_type=type(e).__name__,
                error_message=str(e),
            )
        except Exception as e:
            if self._audit_logger:
                self._audit_logger.log_error(
                    error_type=type(e).__name__,
                    error_message=str(e),
                    details={"source": text, "direction": "decode"},
                    correlation_id=correlation_id,
                )
            raise

        if self._audit_logger:
            self._audit_logger.log_decode_completed(
                source=text,
                number=numeral.number,
                correlation_id=correlation_id,
            )

        return ConversionResult(
            correlation_id=correlation_id,
            direction="decode",
            source=text,
            success=True,
            numeral=report.text,
            number=numeral.number,
            warnings=report.warnings,
        )

    def convert(
        self,
        raw: str,
        mode: NotationMode = NotationMode.SUBTRACTIVE,
        correlation_id: Optional[UUID] = None,
    ) -> ConversionResult:
        """
        Convert whatever the user typed.

        Signed or unsigned digits are encoded with the given mode;
        anything else is decoded as a numeral.
        """
        stripped = raw.strip()

        if INTEGER_PATTERN.match(stripped):
            return self.convert_number(int(stripped), mode, correlation_id)

        return self.convert_numeral(stripped, correlation_id)

    def get_user_friendly_summary(self, result: ConversionResult) -> str:
        """
        One-line (plus warnings) description of a result.
        """
        if not result.success:
            return f"❌ {result.source or '(empty)'}: {result.error_message}"

        if result.direction == "encode":
            lines = [f"✅ {result.number} = {result.numeral}"]
            if result.mode == NotationMode.ADDITIVE:
                lines[0] += " (additive)"
        else:
            lines = [f"✅ {result.numeral} = {result.number}"]

        for warning in result.warnings:
            lines.append(f"   ⚠️ {warning}")

        return "\n".join(lines)


def create_app_components(
    codec: Optional[RomanCodec] = None,
) -> tuple[ConversionFlow, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        codec: Preconfigured codec. If None, one is built from settings.

    Returns:
        (conversion_flow, audit_logger)
    """
    settings = get_settings().app

    logging.basicConfig(format="%(message)s", level=settings.log_level)

    audit_logger = AuditLogger(history_size=settings.audit_history_size)
    conversion_flow = ConversionFlow(
        codec=codec,
        audit_logger=audit_logger,
    )

    return conversion_flow, audit_logger
