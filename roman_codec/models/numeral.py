"""
Core Data Models for the Roman Numeral Codec

These models define the values flowing through the codec:
1. Symbols and their values (the symbol table entries)
2. The validated RomanNumeral value object
3. Validation issues and results reported by the validator
4. Conversion results handed to the console and web front ends

IMPORTANT: RomanNumeral never coerces implicitly. Integers and strings
become numerals only through explicit construction, encode or decode.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Final, Literal, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from roman_codec.errors import RangeError


# =============================================================================
# BOUNDS
# =============================================================================

# Largest number with a strict canonical spelling (MMMCMXCIX)
STANDARD_UPPER_BOUND: Final[int] = 3999

# Documented extension: a fourth leading M (MMMMCMXCIX)
EXTENDED_UPPER_BOUND: Final[int] = 4999

LOWER_BOUND: Final[int] = 1


def check_number(number: Any, upper_bound: int = STANDARD_UPPER_BOUND) -> int:
    """
    Check that a number can be written as a Roman numeral.

    Args:
        number: Candidate number
        upper_bound: Largest accepted number

    Returns:
        The number unchanged

    Raises:
        TypeError: If number is not an int (bool is rejected too)
        RangeError: If number is outside [1, upper_bound]
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(
            f"Roman numerals represent integers, got {type(number).__name__}"
        )
    if number < LOWER_BOUND or number > upper_bound:
        raise RangeError(number, LOWER_BOUND, upper_bound)
    return number


# =============================================================================
# ENUMS
# =============================================================================

class NotationMode(str, Enum):
    """
    Notation used when encoding.

    SUBTRACTIVE writes 4 as IV; ADDITIVE writes it as IIII.
    """
    SUBTRACTIVE = "subtractive"
    ADDITIVE = "additive"


# =============================================================================
# SYMBOL TABLE ENTRY
# =============================================================================

class NumeralValue(BaseModel):
    """A symbol and the value it denotes."""
    model_config = ConfigDict(frozen=True)

    symbol: str = Field(
        ...,
        min_length=1,
        max_length=4,
        pattern="^[A-Z]+$",
        description="Uppercase numeral symbol (e.g. 'CM')"
    )
    value: int = Field(
        ...,
        gt=0,
        description="Integer value of the symbol"
    )
    is_alias: bool = Field(
        default=False,
        description="Historical alias, accepted by decode only"
    )

    @property
    def is_compound(self) -> bool:
        """Multi-letter symbols (IV, CM, XIIX...)."""
        return len(self.symbol) > 1


# =============================================================================
# ROMAN NUMERAL VALUE OBJECT
# =============================================================================

class RomanNumeral(BaseModel):
    """
    A validated integer in [1, upper_bound] that can be written in Roman
    numerals.

    Immutable (frozen=True). Arithmetic between two numerals produces a new
    numeral with the left operand's bound; leaving the range raises
    RangeError.

    Usage:
        numeral = RomanNumeral(1994)
        str(numeral)                              # 'MCMXCIV'
        numeral.to_roman(NotationMode.ADDITIVE)   # 'MDCCCCLXXXXIIII'
    """
    model_config = ConfigDict(frozen=True, strict=True)

    number: int = Field(
        ...,
        ge=LOWER_BOUND,
        description="The integer this numeral denotes"
    )
    upper_bound: int = Field(
        default=STANDARD_UPPER_BOUND,
        ge=LOWER_BOUND,
        le=EXTENDED_UPPER_BOUND,
        description="Largest number accepted alongside this numeral"
    )

    def __init__(
        self,
        number: int,
        upper_bound: int = STANDARD_UPPER_BOUND,
        **data: Any,
    ):
        check_number(number, upper_bound)
        super().__init__(number=number, upper_bound=upper_bound, **data)

    def to_roman(self, mode: NotationMode = NotationMode.SUBTRACTIVE) -> str:
        """Write this number in the given notation."""
        from roman_codec.numerals.codec import encode_number

        return encode_number(self.number, mode)

    def __str__(self) -> str:
        return self.to_roman()

    def __int__(self) -> int:
        return self.number

    def __add__(self, other: object) -> "RomanNumeral":
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return RomanNumeral(self.number + other.number, upper_bound=self.upper_bound)

    def __sub__(self, other: object) -> "RomanNumeral":
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return RomanNumeral(self.number - other.number, upper_bound=self.upper_bound)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    issue_type: str = Field(
        ...,
        description=(
            "Type of issue (e.g. 'invalid_character', 'excess_repetition', "
            "'invalid_order')"
        )
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning)$",
        description="Issue severity"
    )
    fragment: Optional[str] = Field(
        default=None,
        description="Offending character or substring"
    )
    position: Optional[int] = Field(
        default=None,
        ge=0,
        description="Index of the fragment in the normalized input"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """
    Result of the two-stage numeral validation.

    Stage 1: Character set (every character belongs to a known symbol)
    Stage 2: Structure (repetition limits, subtractive pairs, ordering)
    """

    source: str = Field(
        ...,
        description="Input as given"
    )
    text: str = Field(
        ...,
        description="Normalized (uppercased) input"
    )
    validated_at: datetime = Field(
        default_factory=datetime.utcnow
    )

    # Stage results
    characters_valid: bool = Field(
        ...,
        description="Did the character set check pass?"
    )
    structure_valid: bool = Field(
        ...,
        description="Did structural validation pass?"
    )

    is_valid: bool = Field(
        ...,
        description="Overall validation result"
    )

    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found, in check order"
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-blocking warnings"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def first_error(self) -> Optional[ValidationIssue]:
        """The error reported to callers of decode."""
        for issue in self.issues:
            if issue.severity == "error":
                return issue
        return None


# =============================================================================
# CONVERSION RESULT
# =============================================================================

class ConversionResult(BaseModel):
    """
    Outcome of one conversion request made through ConversionFlow.

    Failed conversions carry the error class name and message instead of
    a value; nothing is filled in on failure.
    """

    correlation_id: UUID = Field(
        default_factory=uuid4,
        description="Correlates the audit events of this request"
    )
    direction: Literal["encode", "decode"] = Field(
        ...,
        description="Integer to numeral, or numeral to integer"
    )
    source: str = Field(
        ...,
        description="Input as received"
    )
    success: bool

    numeral: Optional[str] = Field(
        default=None,
        description="Roman numeral (output of encode, normalized input of decode)"
    )
    number: Optional[int] = Field(
        default=None,
        description="Integer value"
    )
    mode: Optional[NotationMode] = Field(
        default=None,
        description="Notation used by encode"
    )

    error_type: Optional[str] = None
    error_message: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)
