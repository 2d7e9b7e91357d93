"""
Two-Stage Numeral Validation

Validation happens in two distinct stages:

STAGE 1 - CHARACTER SET:
- Input must not be empty
- Every character must appear in at least one known symbol

STAGE 2 - STRUCTURE:
- V, L and D occur at most once
- I, X, C and M never run four or more times in a row
  (M may run four times when the upper bound is extended past 3999)
- No repeated subtractive pair (IVIV, IXIX, XLXL, XCXC, CDCD, CMCM)
- A smaller numeral may precede a larger one only as a known
  subtractive pair (IV, IX, XL, XC, CD, CM)

Stage 2 is skipped if stage 1 fails. Each check stops at its first
violation, so a result holds at most one issue per check however long the
input is. Issues are reported in check order, so the first error for a
given input is always the same.

IMPORTANT: Validation NEVER silently fixes input.
Lowercase ASCII letters are uppercased, and that is reported as a warning.
Other characters are kept as typed, so an error cites what the caller wrote.
"""

from typing import Final, Optional

from roman_codec.models.numeral import (
    STANDARD_UPPER_BOUND,
    ValidationIssue,
    ValidationResult,
)
from roman_codec.numerals.symbols import CANONICAL_SYMBOLS, SymbolTable


NON_REPEATABLE_NUMERALS: Final[tuple[str, ...]] = ("V", "L", "D")

REPEATABLE_NUMERALS: Final[tuple[str, ...]] = ("I", "X", "C", "M")

MAX_CONSECUTIVE_REPEATS: Final[int] = 3

REPEATED_SUBTRACTIVE_PAIRS: Final[tuple[str, ...]] = (
    "IVIV", "IXIX", "XLXL", "XCXC", "CDCD", "CMCM",
)


class NumeralValidator:
    """
    Validates numeral strings before they are accumulated.

    Stage 1: Character set (against the active symbol table)
    Stage 2: Structure (repetition, subtractive pairs, ordering)
    """

    def __init__(
        self,
        symbols: SymbolTable = CANONICAL_SYMBOLS,
        upper_bound: int = STANDARD_UPPER_BOUND,
    ):
        """
        Initialize validator.

        Args:
            symbols: Symbol table whose characters are accepted
            upper_bound: Largest accepted number; above 3999 allows MMMM
        """
        self._symbols = symbols
        self._max_runs = {
            numeral: MAX_CONSECUTIVE_REPEATS for numeral in REPEATABLE_NUMERALS
        }
        self._max_runs["M"] = max(MAX_CONSECUTIVE_REPEATS, upper_bound // 1000)

    def max_run(self, numeral: str) -> Optional[int]:
        """Longest allowed run of a repeatable numeral."""
        return self._max_runs.get(numeral)

    def _validate_characters(
        self,
        text: str,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 1: Character set validation.

        Returns: (is_valid, list_of_issues)
        """
        issues = []

        if not text.strip():
            issues.append(ValidationIssue(
                issue_type="empty",
                message="Input cannot be empty or whitespace.",
                severity="error",
                suggested_fix="Enter a numeral such as XIV",
            ))
            return False, issues

        for position, char in enumerate(text):
            if char not in self._symbols.alphabet:
                issues.append(ValidationIssue(
                    issue_type="invalid_character",
                    message=f"Invalid Roman numeral character: {char!r}",
                    severity="error",
                    fragment=char,
                    position=position,
                    suggested_fix="Use only the letters I, V, X, L, C, D and M",
                ))
                break

        return not issues, issues

    def _validate_structure(
        self,
        text: str,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 2: Structural validation.

        Returns: (is_valid, list_of_issues)
        """
        issues = []

        # V, L, D at most once
        for numeral in NON_REPEATABLE_NUMERALS:
            first = text.find(numeral)
            if first == -1:
                continue
            second = text.find(numeral, first + 1)
            if second != -1:
                issues.append(ValidationIssue(
                    issue_type="repeated_numeral",
                    message=f"Invalid repetition of numeral: {numeral}",
                    severity="error",
                    fragment=numeral,
                    position=second,
                ))
                break

        # I, X, C, M at most three in a row
        for numeral in REPEATABLE_NUMERALS:
            run = numeral * (self._max_runs[numeral] + 1)
            position = text.find(run)
            if position != -1:
                issues.append(ValidationIssue(
                    issue_type="excess_repetition",
                    message=(
                        f"Numeral {numeral} repeated more than "
                        f"{self._max_runs[numeral]} times in a row"
                    ),
                    severity="error",
                    fragment=run,
                    position=position,
                ))
                break

        for combination in REPEATED_SUBTRACTIVE_PAIRS:
            position = text.find(combination)
            if position != -1:
                issues.append(ValidationIssue(
                    issue_type="repeated_subtractive_pair",
                    message=(
                        f"Invalid repetition of subtractive combination: "
                        f"{combination}"
                    ),
                    severity="error",
                    fragment=combination,
                    position=position,
                ))
                break

        # Smaller before larger only as a known subtractive pair
        for position in range(len(text) - 1):
            pair = text[position:position + 2]
            current = self._symbols.value_of(pair[0])
            following = self._symbols.value_of(pair[1])
            if current < following and pair not in self._symbols.subtractive_pairs:
                issues.append(ValidationIssue(
                    issue_type="invalid_order",
                    message=f"Invalid order of Roman numerals: {pair}",
                    severity="error",
                    fragment=pair,
                    position=position,
                    suggested_fix=(
                        "A smaller numeral may only precede a larger one as "
                        "IV, IX, XL, XC, CD or CM"
                    ),
                ))
                break

        is_valid = not any(issue.severity == "error" for issue in issues)

        return is_valid, issues

    def validate(self, source: str) -> ValidationResult:
        """
        Run the two-stage validation pipeline.

        Args:
            source: The numeral string as given by the caller

        Returns:
            ValidationResult with the first issue of each check
        """
        all_issues = []
        # Only ASCII letters change case; text keeps the length of source
        if source.isascii():
            text = source.upper()
        else:
            text = "".join(
                char.upper() if char.isascii() else char for char in source
            )

        if text != source:
            all_issues.append(ValidationIssue(
                issue_type="normalized_case",
                message=f"Input {source[:40]!r} was read as {text[:40]!r}",
                severity="warning",
            ))

        # Stage 1
        characters_valid, character_issues = self._validate_characters(text)
        all_issues.extend(character_issues)

        # Only run stage 2 if stage 1 passes
        structure_valid = False
        if characters_valid:
            structure_valid, structure_issues = self._validate_structure(text)
            all_issues.extend(structure_issues)

        warnings = [
            issue.message for issue in all_issues if issue.severity == "warning"
        ]

        return ValidationResult(
            source=source,
            text=text,
            characters_valid=characters_valid,
            structure_valid=structure_valid,
            is_valid=characters_valid and structure_valid,
            issues=all_issues,
            warnings=warnings,
        )

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Generate a readable summary of validation results.
        """
        if result.is_valid and not result.warnings:
            return f"✅ {result.text} is a well-formed Roman numeral."

        lines = []

        if result.has_errors:
            lines.append(f"❌ {result.source!r} is not a valid Roman numeral:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"     💡 {issue.suggested_fix}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append("⚠️ Please note:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        return "\n".join(lines)
