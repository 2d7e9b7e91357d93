"""Symbol table and codec."""

from roman_codec.numerals.codec import RomanCodec, decode, encode, encode_number
from roman_codec.numerals.symbols import (
    CANONICAL_SYMBOLS,
    HISTORICAL_SYMBOLS,
    SymbolTable,
)

__all__ = [
    "CANONICAL_SYMBOLS",
    "HISTORICAL_SYMBOLS",
    "RomanCodec",
    "SymbolTable",
    "decode",
    "encode",
    "encode_number",
]
