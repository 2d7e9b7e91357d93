"""
Roman Numeral Codec

encode: integer → Roman numeral (greedy, largest symbol first)
decode: Roman numeral → integer (validate, then greedy longest match)

Both directions walk an ordered symbol list with a cursor. When a
multi-letter symbol (IV, CM...) is used the cursor moves past it, so the
same subtractive pair never follows itself. A single letter stays under the
cursor and may repeat (III, XXX).

The decoder is strict. A string is rejected, with a typed error, when it:
- is empty or contains unknown characters (InvalidFormatError)
- breaks a structural rule (InvalidFormatError)
- cannot be composed from symbols in descending order (InvalidFormatError)
- denotes a number above the upper bound (RangeError)
- is not the canonical spelling of its value, in strict mode
  (InvalidFormatError)
"""

from typing import Optional

from roman_codec.config import get_settings
from roman_codec.errors import InvalidFormatError, RangeError
from roman_codec.models.numeral import (
    EXTENDED_UPPER_BOUND,
    LOWER_BOUND,
    NotationMode,
    RomanNumeral,
    ValidationResult,
    check_number,
)
from roman_codec.numerals.symbols import (
    CANONICAL_SYMBOLS,
    HISTORICAL_SYMBOLS,
    SymbolTable,
)
from roman_codec.validation.validator import NumeralValidator


def encode_number(
    number: int,
    mode: NotationMode = NotationMode.SUBTRACTIVE,
) -> str:
    """
    Greedy encode of a positive integer, without an upper bound check.

    Callers are expected to have checked the range; RomanCodec.encode and
    RomanNumeral do.
    """
    numerals = CANONICAL_SYMBOLS.order_for(mode)

    result = []
    remainder = number
    position = 0

    # The last symbol is worth 1, so the cursor never runs off the end
    while remainder > 0:
        numeral = numerals[position]
        value = CANONICAL_SYMBOLS.value_of(numeral)

        if remainder >= value:
            remainder -= value
            result.append(numeral)

            if len(numeral) > 1:
                position += 1
        else:
            position += 1

    return "".join(result)


class RomanCodec:
    """
    Converts between integers and Roman numerals.

    Configuration is fixed at construction. Arguments left as None are
    read from CodecSettings. Instances hold no mutable state and may be
    shared between threads.
    """

    def __init__(
        self,
        upper_bound: Optional[int] = None,
        allow_historical_aliases: Optional[bool] = None,
        strict_canonical: Optional[bool] = None,
    ):
        """
        Initialize codec.

        Args:
            upper_bound: Largest number accepted by encode and decode
                         (3999 canonical, up to 4999 extended)
            allow_historical_aliases: Accept O, F, P, G, Q, XIIX and IIXX
                                      when decoding
            strict_canonical: Reject decodable but non-canonical spellings
                              such as IXI. Not applied when historical
                              aliases are allowed.

        Raises:
            ValueError: If upper_bound is outside [1, 4999]
        """
        settings = get_settings().codec

        if upper_bound is None:
            upper_bound = settings.upper_bound
        if allow_historical_aliases is None:
            allow_historical_aliases = settings.allow_historical_aliases
        if strict_canonical is None:
            strict_canonical = settings.strict_canonical

        if not LOWER_BOUND <= upper_bound <= EXTENDED_UPPER_BOUND:
            raise ValueError(
                f"upper_bound must be between {LOWER_BOUND} and "
                f"{EXTENDED_UPPER_BOUND}, got {upper_bound}"
            )

        self._upper_bound = upper_bound
        self._allow_historical_aliases = allow_historical_aliases
        self._strict_canonical = strict_canonical
        self._symbols = (
            HISTORICAL_SYMBOLS if allow_historical_aliases else CANONICAL_SYMBOLS
        )
        self._validator = NumeralValidator(self._symbols, upper_bound)

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    @property
    def allow_historical_aliases(self) -> bool:
        return self._allow_historical_aliases

    @property
    def strict_canonical(self) -> bool:
        return self._strict_canonical

    @property
    def symbols(self) -> SymbolTable:
        return self._symbols

    @property
    def validator(self) -> NumeralValidator:
        return self._validator

    # =========================================================================
    # ENCODE
    # =========================================================================

    def encode(
        self,
        number: int,
        mode: NotationMode = NotationMode.SUBTRACTIVE,
    ) -> str:
        """
        Convert an integer to a Roman numeral.

        Args:
            number: Integer in [1, upper_bound]
            mode: SUBTRACTIVE (IV) or ADDITIVE (IIII)

        Returns:
            Uppercase Roman numeral

        Raises:
            TypeError: If number is not an int
            RangeError: If number is outside [1, upper_bound]

        Examples:
            >>> RomanCodec(upper_bound=3999).encode(1994)
            'MCMXCIV'
            >>> RomanCodec(upper_bound=3999).encode(4, NotationMode.ADDITIVE)
            'IIII'
        """
        check_number(number, self._upper_bound)
        return encode_number(number, NotationMode(mode))

    # =========================================================================
    # DECODE
    # =========================================================================

    @staticmethod
    def _check_text(text: Optional[str]) -> str:
        """
        Reject None and non-string input before validation.

        Raises:
            InvalidFormatError: If text is None
            TypeError: If text is not a string
        """
        if text is None:
            raise InvalidFormatError(
                text,
                "empty",
                "Input cannot be None or empty.",
            )
        if not isinstance(text, str):
            raise TypeError(
                f"Roman numerals are parsed from str, got {type(text).__name__}"
            )
        return text

    def validate(self, text: Optional[str]) -> ValidationResult:
        """
        Run character set and structural validation only.

        None and non-string input raise as in parse.
        """
        return self._validator.validate(self._check_text(text))

    def _accumulate(self, text: str) -> tuple[int, str]:
        """
        Greedy longest-match scan over the parse order.

        Returns:
            (total, unconsumed_suffix)
        """
        candidates = self._symbols.parse_order
        remaining = text
        total = 0
        position = 0

        while remaining and position < len(candidates):
            numeral = candidates[position]

            if not remaining.startswith(numeral):
                position += 1
                continue

            total += self._symbols.value_of(numeral)
            remaining = remaining[len(numeral):]

            if len(numeral) > 1:
                position += 1

        return total, remaining

    def parse_with_report(
        self,
        text: Optional[str],
    ) -> tuple[RomanNumeral, ValidationResult]:
        """
        Decode a numeral and return the validation report alongside it.

        The report carries non-blocking warnings (e.g. lowercase input).

        Raises:
            TypeError: If text is neither a string nor None
            InvalidFormatError: If text is not a well-formed numeral
            RangeError: If the value exceeds upper_bound
        """
        report = self.validate(text)
        issue = report.first_error
        if issue is not None:
            raise InvalidFormatError(
                text,
                issue.issue_type,
                issue.message,
                fragment=issue.fragment,
                position=issue.position,
            )

        normalized = report.text
        total, remaining = self._accumulate(normalized)

        if remaining:
            raise InvalidFormatError(
                text,
                "incomplete_parse",
                f"Invalid Roman numeral: {text!r} (cannot read {remaining!r})",
                fragment=remaining,
                position=len(normalized) - len(remaining),
            )

        if total > self._upper_bound:
            raise RangeError(
                total,
                LOWER_BOUND,
                self._upper_bound,
                message=(
                    f"Roman numeral {text!r} denotes {total}, which exceeds "
                    f"the upper bound {self._upper_bound}."
                ),
            )

        if self._strict_canonical and not self._allow_historical_aliases:
            canonical = encode_number(total)
            if canonical != normalized:
                raise InvalidFormatError(
                    text,
                    "non_canonical",
                    (
                        f"{text!r} is not in canonical form; "
                        f"{total} is written {canonical!r}"
                    ),
                    fragment=normalized,
                    position=0,
                )

        return RomanNumeral(total, upper_bound=self._upper_bound), report

    def parse(self, text: Optional[str]) -> RomanNumeral:
        """
        Convert a Roman numeral to a RomanNumeral value object.

        Input is case-insensitive. Surrounding whitespace is NOT stripped.

        Raises:
            InvalidFormatError: If text is empty, has unknown characters,
                                breaks a structural rule, cannot be fully
                                read, or is non-canonical in strict mode
            RangeError: If the value exceeds upper_bound
        """
        numeral, _ = self.parse_with_report(text)
        return numeral

    def decode(self, text: Optional[str]) -> int:
        """
        Convert a Roman numeral to an integer.

        Examples:
            >>> RomanCodec(upper_bound=3999).decode("mcmxciv")
            1994
        """
        return self.parse(text).number


def encode(number: int, mode: NotationMode = NotationMode.SUBTRACTIVE) -> str:
    """Encode with a codec configured from settings."""
    return RomanCodec().encode(number, mode)


def decode(text: Optional[str]) -> int:
    """Decode with a codec configured from settings."""
    return RomanCodec().decode(text)
