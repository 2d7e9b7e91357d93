"""Numeral validation package."""

from roman_codec.validation.validator import NumeralValidator

__all__ = ["NumeralValidator"]
