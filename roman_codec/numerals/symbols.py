"""
Symbol Table

Static mapping from numeral symbols to values, plus the ordered symbol
lists that drive the greedy encoder and the longest-match decoder.

Two tables are built once at import and never modified:
- CANONICAL_SYMBOLS: the thirteen symbols of standard subtractive notation
- HISTORICAL_SYMBOLS: canonical symbols plus medieval/renaissance aliases,
  accepted by decode when explicitly enabled and never produced by encode
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from roman_codec.errors import UnknownSymbolError
from roman_codec.models.numeral import NotationMode, NumeralValue


CANONICAL_ENTRIES: tuple[NumeralValue, ...] = (
    NumeralValue(symbol="I", value=1),
    NumeralValue(symbol="IV", value=4),
    NumeralValue(symbol="V", value=5),
    NumeralValue(symbol="IX", value=9),
    NumeralValue(symbol="X", value=10),
    NumeralValue(symbol="XL", value=40),
    NumeralValue(symbol="L", value=50),
    NumeralValue(symbol="XC", value=90),
    NumeralValue(symbol="C", value=100),
    NumeralValue(symbol="CD", value=400),
    NumeralValue(symbol="D", value=500),
    NumeralValue(symbol="CM", value=900),
    NumeralValue(symbol="M", value=1000),
)

HISTORICAL_ALIASES: tuple[NumeralValue, ...] = (
    NumeralValue(symbol="O", value=11, is_alias=True),
    NumeralValue(symbol="IIXX", value=18, is_alias=True),
    NumeralValue(symbol="XIIX", value=18, is_alias=True),
    NumeralValue(symbol="F", value=40, is_alias=True),
    NumeralValue(symbol="P", value=400, is_alias=True),
    NumeralValue(symbol="G", value=400, is_alias=True),
    NumeralValue(symbol="Q", value=500, is_alias=True),
)


class SymbolTable:
    """
    Read-only symbol table.

    Encode orders hold canonical symbols only. The parse order holds every
    symbol, largest value first, longer symbols before shorter ones of the
    same value.
    """

    def __init__(self, entries: Iterable[NumeralValue]):
        entries = tuple(entries)
        self._entries = entries
        self._values: Mapping[str, int] = MappingProxyType(
            {entry.symbol: entry.value for entry in entries}
        )

        canonical = sorted(
            (entry for entry in entries if not entry.is_alias),
            key=lambda entry: entry.value,
            reverse=True,
        )
        self._subtractive_order = tuple(entry.symbol for entry in canonical)
        self._additive_order = tuple(
            entry.symbol for entry in canonical if not entry.is_compound
        )
        self._parse_order = tuple(
            entry.symbol
            for entry in sorted(
                entries,
                key=lambda entry: (-entry.value, -len(entry.symbol)),
            )
        )
        self._alphabet = frozenset("".join(self._values))
        self._subtractive_pairs = frozenset(
            entry.symbol
            for entry in canonical
            if len(entry.symbol) == 2
            and self._values[entry.symbol[0]] < self._values[entry.symbol[1]]
        )

    @property
    def entries(self) -> tuple[NumeralValue, ...]:
        return self._entries

    @property
    def subtractive_order(self) -> tuple[str, ...]:
        """M, CM, D, CD, C, XC, L, XL, X, IX, V, IV, I."""
        return self._subtractive_order

    @property
    def additive_order(self) -> tuple[str, ...]:
        """M, D, C, L, X, V, I."""
        return self._additive_order

    @property
    def parse_order(self) -> tuple[str, ...]:
        return self._parse_order

    @property
    def alphabet(self) -> frozenset[str]:
        """Every character that appears in at least one symbol."""
        return self._alphabet

    @property
    def subtractive_pairs(self) -> frozenset[str]:
        """Two-letter symbols written smaller-before-larger (IV, IX, XL, XC, CD, CM)."""
        return self._subtractive_pairs

    def order_for(self, mode: NotationMode) -> tuple[str, ...]:
        """Encode order for a notation mode."""
        if NotationMode(mode) == NotationMode.ADDITIVE:
            return self._additive_order
        return self._subtractive_order

    def value_of(self, symbol: str) -> int:
        """
        Value of a symbol.

        Raises:
            UnknownSymbolError: If the symbol is not in this table
        """
        try:
            return self._values[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol) from None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._values

    def __len__(self) -> int:
        return len(self._entries)


CANONICAL_SYMBOLS = SymbolTable(CANONICAL_ENTRIES)
HISTORICAL_SYMBOLS = SymbolTable(CANONICAL_ENTRIES + HISTORICAL_ALIASES)
