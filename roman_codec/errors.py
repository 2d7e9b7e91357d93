"""
Exceptions raised by the Roman numeral codec.

Every failure is terminal for the call that raised it: no partial results,
no clamping. Callers receive the kind of failure and, where known, the
offending character or substring.
"""

from typing import Optional


class NumeralError(Exception):
    """Base exception for numeral conversion failures."""
    pass


class RangeError(NumeralError, ValueError):
    """
    A number falls outside the supported domain.

    Raised on encode input, on RomanNumeral construction and on a decoded
    value that exceeds the configured upper bound.
    """

    def __init__(
        self,
        value: int,
        lower: int,
        upper: int,
        message: Optional[str] = None,
    ):
        self.value = value
        self.lower = lower
        self.upper = upper
        self.bound = "lower" if value < lower else "upper"

        if message is None:
            if self.bound == "lower":
                message = f"Number {value} is below the lower bound {lower}."
            else:
                message = f"Number {value} exceeds the upper bound {upper}."
        super().__init__(message)


class InvalidFormatError(NumeralError, ValueError):
    """
    A string is not a well-formed Roman numeral.

    Attributes:
        text: The input as given by the caller
        issue_type: Short code of the violated rule (e.g. 'invalid_character')
        fragment: Offending character or substring, if known
        position: Index of the fragment in the normalized input, if known
    """

    def __init__(
        self,
        text: Optional[str],
        issue_type: str,
        message: str,
        fragment: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.text = text
        self.issue_type = issue_type
        self.fragment = fragment
        self.position = position
        super().__init__(message)


class UnknownSymbolError(NumeralError, KeyError):
    """A symbol is not present in the symbol table."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"Unknown numeral symbol: {self.symbol!r}"
