import decimal
import pytest

from kube_quantity import (
    Format,
    InvalidFormatError,
    InvalidSuffixError,
    ParsedQuantity,
    ParseQuantityError,
    Quantity,
    Sign,
    parse_quantity_string,
)


def test_binary_suffix():
    q = parse_quantity_string("1.25Ki")
    assert q.sign is Sign.POSITIVE
    assert q.mantissa == decimal.Decimal("1.25")
    assert q.format is Format.BINARY_SI
    assert q.base == 2
    assert q.exponent == 10
    assert q.suffix == "Ki"
    assert str(q) == "1.25Ki"


def test_decimal_suffix():
    q = parse_quantity_string("100m")
    assert q.mantissa == decimal.Decimal("100")
    assert q.format is Format.DECIMAL_SI
    assert q.base == 10
    assert q.exponent == -3
    assert q.suffix == "m"


def test_no_suffix():
    q = parse_quantity_string("1250000")
    assert q.format is Format.DECIMAL_SI
    assert q.exponent == 0
    assert q.suffix == ""


def test_exponent():
    q = parse_quantity_string("-12e-3")
    assert q.sign is Sign.NEGATIVE
    assert q.mantissa == decimal.Decimal("12")
    assert q.format is Format.DECIMAL_EXPONENT
    assert q.exponent == -3
    assert q.suffix == "e-3"


def test_exa_is_not_an_exponent():
    q = parse_quantity_string("1E")
    assert q.format is Format.DECIMAL_SI
    assert q.exponent == 18

    q = parse_quantity_string("1E3")
    assert q.format is Format.DECIMAL_EXPONENT
    assert q.exponent == 3


def test_mantissa_is_exact():
    q = parse_quantity_string("0.1000000000000000000000000000000000000001")
    assert q.mantissa == decimal.Decimal("0.1000000000000000000000000000000000000001")


def test_negative_zero():
    q = parse_quantity_string("-0")
    assert q.sign is Sign.POSITIVE
    assert str(q) == "0"


@pytest.mark.parametrize("text,expected", [
    ("1Ki", "1Ki"),
    ("2.5Gi", "2.5Gi"),
    ("0.50Gi", "0.5Gi"),
    ("1.000Ei", "1Ei"),
    ("007", "7"),
    ("1.0", "1"),
    ("100m", "100m"),
    ("500n", "500n"),
    ("3u", "3u"),
    ("0", "0"),
    ("0Ki", "0Ki"),
    ("+5", "5"),
    ("-1.5k", "-1.5k"),
    (".5", "0.5"),
    ("5.", "5"),
    ("1E", "1E"),
    ("12e6", "12e6"),
    ("1.25e3", "1.25e3"),
    ("12E6", "12E6"),
    ("5e+03", "5e3"),
    ("5e-3", "5e-3"),
    ("5e0", "5e0"),
    ("1e1000", "1e1000"),
])
def test_round_trip(text, expected):
    assert str(parse_quantity_string(text)) == expected
    assert ParsedQuantity.parse(text).to_string() == expected


@pytest.mark.parametrize("text", [
    "",
    "abc",
    "+",
    "-",
    ".",
    "Ki",
    "e3",
    " 1",
    "--1",
    "1.2.3",
    "1e2.3",
    "1Ki5",
    "1e2Ki",
    "1.5.Mi",
    "1e99999999999999999999999",
])
def test_invalid_format(text):
    with pytest.raises(InvalidFormatError):
        parse_quantity_string(text)


@pytest.mark.parametrize("text,suffix", [
    ("1kb", "kb"),
    ("1GGi", "GGi"),
    ("1K", "K"),
    ("1ki", "ki"),
    ("1Zi", "Zi"),
    ("1 ", " "),
    ("1 Gi", " Gi"),
    ("1e", "e"),
    ("1e+", "e+"),
])
def test_invalid_suffix(text, suffix):
    with pytest.raises(InvalidSuffixError) as exc_info:
        parse_quantity_string(text)
    assert exc_info.value.suffix == suffix
    assert exc_info.value.quantity == text


def test_errors_are_value_errors():
    with pytest.raises(ValueError) as exc_info:
        parse_quantity_string("abc")
    assert isinstance(exc_info.value, ParseQuantityError)
    assert str(exc_info.value) == "Invalid quantity string 'abc': expected a number"


def test_not_a_string():
    with pytest.raises(TypeError):
        parse_quantity_string(5)
    with pytest.raises(TypeError):
        parse_quantity_string(None)


def test_quantity_wrapper():
    q = ParsedQuantity.from_quantity(Quantity("1Ki"))
    assert q == ParsedQuantity.parse("1024")
    assert q.to_quantity() == Quantity("1Ki")

    with pytest.raises(InvalidFormatError):
        ParsedQuantity.from_quantity(Quantity("abc"))
