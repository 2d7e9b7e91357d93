"""
Roman Numeral Codec

Converts integers to Roman numerals and back, with strict validation of
numeral strings.

DESIGN PRINCIPLES:
1. Fail early, fail visibly
2. No silent corrections (no clamping, no partial results)
3. No implicit coercion between int, str and RomanNumeral
4. Every conversion through the orchestrator is auditable
"""

from roman_codec.errors import (
    InvalidFormatError,
    NumeralError,
    RangeError,
    UnknownSymbolError,
)
from roman_codec.models.numeral import (
    EXTENDED_UPPER_BOUND,
    STANDARD_UPPER_BOUND,
    NotationMode,
    NumeralValue,
    RomanNumeral,
)
from roman_codec.numerals import (
    CANONICAL_SYMBOLS,
    HISTORICAL_SYMBOLS,
    RomanCodec,
    SymbolTable,
    decode,
    encode,
)

__version__ = "1.0.0"
__author__ = "Roman Codec Team"

__all__ = [
    "CANONICAL_SYMBOLS",
    "EXTENDED_UPPER_BOUND",
    "HISTORICAL_SYMBOLS",
    "InvalidFormatError",
    "NotationMode",
    "NumeralError",
    "NumeralValue",
    "RangeError",
    "RomanCodec",
    "RomanNumeral",
    "STANDARD_UPPER_BOUND",
    "SymbolTable",
    "UnknownSymbolError",
    "decode",
    "encode",
]
