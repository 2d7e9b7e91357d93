"""Tests for encode and decode."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from roman_codec import decode, encode
from roman_codec.errors import InvalidFormatError, RangeError
from roman_codec.models.numeral import NotationMode
from roman_codec.numerals.codec import RomanCodec, encode_number


KNOWN_VALUES = [
    (1, "I"), (2, "II"), (3, "III"), (4, "IV"), (5, "V"),
    (6, "VI"), (7, "VII"), (8, "VIII"), (9, "IX"), (10, "X"),
    (50, "L"), (100, "C"), (500, "D"), (1000, "M"),
    (31, "XXXI"), (148, "CXLVIII"), (294, "CCXCIV"), (312, "CCCXII"),
    (421, "CDXXI"), (528, "DXXVIII"), (621, "DCXXI"), (782, "DCCLXXXII"),
    (870, "DCCCLXX"), (941, "CMXLI"), (1043, "MXLIII"), (1110, "MCX"),
    (1226, "MCCXXVI"), (1301, "MCCCI"), (1485, "MCDLXXXV"), (1509, "MDIX"),
    (1607, "MDCVII"), (1754, "MDCCLIV"), (1832, "MDCCCXXXII"),
    (1993, "MCMXCIII"), (1994, "MCMXCIV"), (2074, "MMLXXIV"),
    (2152, "MMCLII"), (2212, "MMCCXII"), (2343, "MMCCCXLIII"),
    (2499, "MMCDXCIX"), (2574, "MMDLXXIV"), (2646, "MMDCXLVI"),
    (2723, "MMDCCXXIII"), (2892, "MMDCCCXCII"), (2975, "MMCMLXXV"),
    (3051, "MMMLI"), (3185, "MMMCLXXXV"), (3250, "MMMCCL"),
    (3313, "MMMCCCXIII"), (3408, "MMMCDVIII"), (3501, "MMMDI"),
    (3610, "MMMDCX"), (3743, "MMMDCCXLIII"), (3844, "MMMDCCCXLIV"),
    (3888, "MMMDCCCLXXXVIII"), (3940, "MMMCMXL"), (3999, "MMMCMXCIX"),
]

EXTENDED_VALUES = [
    (4000, "MMMM"), (4500, "MMMMD"), (4888, "MMMMDCCCLXXXVIII"),
    (4999, "MMMMCMXCIX"),
]


@pytest.fixture
def codec():
    return RomanCodec(upper_bound=3999)


@pytest.fixture
def extended_codec():
    return RomanCodec(upper_bound=4999)


class TestEncode:
    """Integer → numeral."""

    @pytest.mark.parametrize("number,numeral", KNOWN_VALUES)
    def test_known_values(self, codec, number, numeral):
        """Test the known values table."""
        assert codec.encode(number) == numeral

    @pytest.mark.parametrize("number,numeral", [
        (4, "IIII"), (9, "VIIII"), (40, "XXXX"), (1994, "MDCCCCLXXXXIIII"),
        (3999, "MMMDCCCCLXXXXVIIII"),
    ])
    def test_additive_notation(self, codec, number, numeral):
        """Test additive notation never subtracts."""
        assert codec.encode(number, NotationMode.ADDITIVE) == numeral

    @pytest.mark.parametrize("number", [0, -1, -3999, 4000, 10000])
    def test_out_of_range(self, codec, number):
        """Test encode rejects numbers outside [1, 3999]."""
        with pytest.raises(RangeError) as exc_info:
            codec.encode(number)
        assert exc_info.value.value == number

    @pytest.mark.parametrize("value", [1.0, "12", None, True, False])
    def test_non_integer(self, codec, value):
        """Test encode takes ints only."""
        with pytest.raises(TypeError):
            codec.encode(value)

    @pytest.mark.parametrize("number,numeral", EXTENDED_VALUES)
    def test_extended_bound(self, extended_codec, number, numeral):
        """Test numbers up to 4999 with a fourth M."""
        assert extended_codec.encode(number) == numeral

    def test_extended_bound_limit(self, extended_codec):
        """Test the extended bound still stops at 4999."""
        with pytest.raises(RangeError):
            extended_codec.encode(5000)

    def test_aliases_never_encoded(self):
        """Test encode output is canonical with aliases enabled."""
        historical = RomanCodec(allow_historical_aliases=True)
        assert historical.encode(11) == "XI"
        assert historical.encode(18) == "XVIII"
        assert historical.encode(40) == "XL"
        assert historical.encode(500) == "D"

    def test_encode_number_skips_range_check(self):
        """Test the bare greedy encoder."""
        assert encode_number(6000) == "MMMMMM"


class TestDecode:
    """Numeral → integer."""

    @pytest.mark.parametrize("number,numeral", KNOWN_VALUES)
    def test_known_values(self, codec, number, numeral):
        """Test the known values table."""
        assert codec.decode(numeral) == number

    @pytest.mark.parametrize("numeral,number", [
        ("mcmxciv", 1994), ("xiv", 14), ("MmXxIv", 2024),
    ])
    def test_case_insensitive(self, codec, numeral, number):
        """Test lowercase and mixed case input."""
        assert codec.decode(numeral) == number

    @pytest.mark.parametrize("number,numeral", EXTENDED_VALUES)
    def test_extended_bound(self, extended_codec, number, numeral):
        """Test decode with the extended bound."""
        assert extended_codec.decode(numeral) == number

    def test_four_m_rejected_by_default(self, codec):
        """Test MMMM needs the extended bound."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("MMMM")
        assert exc_info.value.issue_type == "excess_repetition"

    def test_value_above_bound(self, codec):
        """Test a readable numeral above the bound raises RangeError."""
        with pytest.raises(RangeError) as exc_info:
            codec.decode("MMMCMC")
        assert exc_info.value.value == 4000
        assert exc_info.value.bound == "upper"

    def test_lower_bound_on_decoded_value(self):
        """Test a codec with a small bound."""
        small = RomanCodec(upper_bound=10)
        assert small.decode("X") == 10
        with pytest.raises(RangeError):
            small.decode("XI")
        with pytest.raises(RangeError):
            small.encode(11)

    @pytest.mark.parametrize("text,issue_type", [
        ("", "empty"),
        ("   ", "empty"),
        ("ABC", "invalid_character"),
        (" XIV", "invalid_character"),
        ("XIV ", "invalid_character"),
        ("X1V", "invalid_character"),
        ("IIII", "excess_repetition"),
        ("MMMMM", "excess_repetition"),
        ("VV", "repeated_numeral"),
        ("IVIV", "repeated_numeral"),
        ("IXIX", "repeated_subtractive_pair"),
        ("CMCM", "repeated_subtractive_pair"),
        ("IM", "invalid_order"),
        ("VX", "invalid_order"),
        ("IVX", "invalid_order"),
        ("IIV", "incomplete_parse"),
        ("XXL", "incomplete_parse"),
        ("IXX", "incomplete_parse"),
        ("IXI", "non_canonical"),
        ("IXIV", "non_canonical"),
        ("CMD", "non_canonical"),
    ])
    def test_rejected(self, codec, text, issue_type):
        """Test malformed numerals are rejected with the violated rule."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(text)
        assert exc_info.value.issue_type == issue_type
        assert exc_info.value.text == text

    def test_incomplete_parse_fragment(self, codec):
        """Test the unread suffix is reported."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("IIV")
        assert exc_info.value.fragment == "V"
        assert exc_info.value.position == 2

    def test_invalid_character_fragment(self, codec):
        """Test the bad character is reported."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("MCMZ")
        assert exc_info.value.fragment == "Z"
        assert exc_info.value.position == 3

    def test_none(self, codec):
        """Test None is an empty input."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(None)
        assert exc_info.value.issue_type == "empty"

    @pytest.mark.parametrize("value", [14, 14.0, b"XIV"])
    def test_non_string(self, codec, value):
        """Test decode takes strings only."""
        with pytest.raises(TypeError):
            codec.decode(value)

    @pytest.mark.parametrize("text", ["ı", "ıv", "ßX"])
    def test_non_ascii_letters_rejected(self, codec, text):
        """Test letters that uppercase into Roman letters are not read as numerals."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode(text)
        assert exc_info.value.issue_type == "invalid_character"
        assert exc_info.value.fragment == text[0]
        assert exc_info.value.position == 0

    def test_long_invalid_input(self, codec):
        """Test a long malformed string is rejected at its first fault."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("IM" * 100_000)
        assert exc_info.value.issue_type == "invalid_order"
        assert exc_info.value.position == 0

    def test_validate_none(self, codec):
        """Test validate treats None like parse does."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.validate(None)
        assert exc_info.value.issue_type == "empty"

    @pytest.mark.parametrize("value", [14, b"XIV"])
    def test_validate_non_string(self, codec, value):
        """Test validate takes strings only."""
        with pytest.raises(TypeError):
            codec.validate(value)

    def test_errors_are_value_errors(self, codec):
        """Test both error kinds can be caught as ValueError."""
        with pytest.raises(ValueError):
            codec.decode("Q")
        with pytest.raises(ValueError):
            codec.encode(0)


class TestStrictCanonical:
    """Tests for non-canonical spellings."""

    @pytest.mark.parametrize("numeral,number", [
        ("IXI", 10), ("IXIV", 13), ("CMD", 1400),
    ])
    def test_accepted_when_not_strict(self, numeral, number):
        """Test readable non-canonical spellings decode when allowed."""
        assert RomanCodec(strict_canonical=False).decode(numeral) == number

    def test_non_canonical_message_names_canonical_form(self, codec):
        """Test the error tells the canonical spelling."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("CMD")
        assert "MCD" in str(exc_info.value)


class TestHistoricalAliases:
    """Tests for decoding historical aliases."""

    @pytest.fixture
    def historical(self):
        return RomanCodec(allow_historical_aliases=True)

    @pytest.mark.parametrize("numeral,number", [
        ("O", 11), ("F", 40), ("P", 400), ("G", 400), ("Q", 500),
        ("XIIX", 18), ("IIXX", 18), ("MO", 1011), ("MCMXCIV", 1994),
    ])
    def test_alias_values(self, historical, numeral, number):
        """Test aliases decode to their values."""
        assert historical.decode(numeral) == number

    def test_aliases_off_by_default(self, codec):
        """Test aliases are rejected without the option."""
        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("O")
        assert exc_info.value.issue_type == "invalid_character"

        with pytest.raises(InvalidFormatError) as exc_info:
            codec.decode("XIIX")
        assert exc_info.value.issue_type == "incomplete_parse"


class TestRoundTrip:
    """Tests over the whole domain."""

    def test_round_trip_standard(self, codec):
        """Test decode(encode(n)) == n for every supported number."""
        for number in range(1, 4000):
            numeral = codec.encode(number)
            assert codec.decode(numeral) == number
            assert codec.decode(numeral.lower()) == number

    def test_round_trip_extended(self, extended_codec):
        """Test the extended range round trips."""
        for number in range(1, 5000):
            assert extended_codec.decode(extended_codec.encode(number)) == number

    def test_additive_output_is_not_decoded_strictly(self, codec):
        """Test additive numerals are outside the strict grammar."""
        with pytest.raises(InvalidFormatError):
            codec.decode(codec.encode(4, NotationMode.ADDITIVE))

    def test_encoded_numerals_are_unique(self, codec):
        """Test distinct numbers never share a numeral."""
        numerals = {codec.encode(number) for number in range(1, 4000)}
        assert len(numerals) == 3999


class TestConfiguration:
    """Tests for codec construction and settings."""

    def test_defaults_from_settings(self):
        """Test a codec built without arguments."""
        codec = RomanCodec()
        assert codec.upper_bound == 3999
        assert codec.allow_historical_aliases is False
        assert codec.strict_canonical is True

    @pytest.mark.parametrize("bound", [0, -1, 5000])
    def test_invalid_upper_bound(self, bound):
        """Test the bound must lie in [1, 4999]."""
        with pytest.raises(ValueError):
            RomanCodec(upper_bound=bound)

    def test_module_functions_follow_environment(self, monkeypatch):
        """Test encode and decode read codec settings."""
        assert encode(1994) == "MCMXCIV"
        assert decode("MCMXCIV") == 1994
        with pytest.raises(RangeError):
            encode(4000)

        monkeypatch.setenv("ROMAN_CODEC_UPPER_BOUND", "4999")
        assert encode(4000) == "MMMM"
        assert decode("MMMM") == 4000

    def test_aliases_from_environment(self, monkeypatch):
        """Test ROMAN_CODEC_ALLOW_HISTORICAL_ALIASES."""
        monkeypatch.setenv("ROMAN_CODEC_ALLOW_HISTORICAL_ALIASES", "true")
        assert decode("O") == 11

    def test_arguments_override_settings(self, monkeypatch):
        """Test explicit arguments win over the environment."""
        monkeypatch.setenv("ROMAN_CODEC_UPPER_BOUND", "4999")
        assert RomanCodec(upper_bound=3999).upper_bound == 3999

    def test_parse_returns_numeral(self, codec):
        """Test parse returns a RomanNumeral with the codec bound."""
        numeral = codec.parse("XIV")
        assert numeral.number == 14
        assert numeral.upper_bound == 3999
        assert str(numeral) == "XIV"

    def test_parse_with_report_keeps_warnings(self, codec):
        """Test the report carries the normalization warning."""
        numeral, report = codec.parse_with_report("xiv")
        assert int(numeral) == 14
        assert report.text == "XIV"
        assert len(report.warnings) == 1


class TestNotationLength:
    """Tests comparing the two notations."""

    def test_subtractive_never_longer(self, codec):
        """Test subtractive output is never longer than additive output."""
        for number in range(1, 4000):
            subtractive = codec.encode(number)
            additive = codec.encode(number, NotationMode.ADDITIVE)
            assert len(subtractive) <= len(additive)


class TestSharedCodec:
    """Tests for one codec used from several threads."""

    def test_concurrent_round_trips(self, extended_codec):
        """Test concurrent encode and decode calls on a shared codec."""
        def round_trip(number):
            return extended_codec.decode(extended_codec.encode(number))

        numbers = list(range(1, 5000))
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(round_trip, numbers))

        assert results == numbers

    def test_concurrent_rejections(self, codec):
        """Test failures in one thread do not affect another."""
        def attempt(text):
            try:
                return codec.decode(text)
            except InvalidFormatError as e:
                return e.issue_type

        inputs = ["XIV", "IIII", "MCMXCIV", "IM"] * 200
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(attempt, inputs))

        assert results == [14, "excess_repetition", 1994, "invalid_order"] * 200
