import decimal
import pytest

from kube_quantity import Format
from kube_quantity.config import MAX_DIGITS, exact_context
from kube_quantity.core import suffix


def test_lookup():
    assert suffix.lookup("Ki") == (Format.BINARY_SI, 10)
    assert suffix.lookup("Ei") == (Format.BINARY_SI, 60)
    assert suffix.lookup("n") == (Format.DECIMAL_SI, -9)
    assert suffix.lookup("") == (Format.DECIMAL_SI, 0)
    assert suffix.lookup("E") == (Format.DECIMAL_SI, 18)
    assert suffix.lookup("Zi") is None
    assert suffix.lookup("K") is None


def test_suffix_for():
    assert suffix.suffix_for(Format.BINARY_SI, 20) == "Mi"
    assert suffix.suffix_for(Format.BINARY_SI, 0) == ""
    assert suffix.suffix_for(Format.DECIMAL_SI, -3) == "m"
    assert suffix.suffix_for(Format.DECIMAL_EXPONENT, -3) == "e-3"
    assert suffix.suffix_for(Format.DECIMAL_EXPONENT, 6, marker="E") == "E6"


@pytest.mark.parametrize("fmt,other_fmt,other_exponent,expected", [
    (Format.BINARY_SI, Format.BINARY_SI, 30, 30),
    (Format.BINARY_SI, Format.DECIMAL_SI, 6, 20),
    (Format.BINARY_SI, Format.DECIMAL_SI, -3, 0),
    (Format.BINARY_SI, Format.DECIMAL_EXPONENT, 7, 20),
    (Format.DECIMAL_SI, Format.DECIMAL_SI, -9, -9),
    (Format.DECIMAL_SI, Format.BINARY_SI, 10, 3),
    (Format.DECIMAL_SI, Format.DECIMAL_EXPONENT, 4, 3),
    (Format.DECIMAL_SI, Format.DECIMAL_EXPONENT, -10, -9),
    (Format.DECIMAL_SI, Format.DECIMAL_EXPONENT, 25, 18),
    (Format.DECIMAL_EXPONENT, Format.DECIMAL_SI, 6, 6),
    (Format.DECIMAL_EXPONENT, Format.DECIMAL_EXPONENT, -5, -5),
    (Format.DECIMAL_EXPONENT, Format.BINARY_SI, 20, 6),
])
def test_exponent_in(fmt, other_fmt, other_exponent, expected):
    assert suffix.exponent_in(fmt, other_fmt, other_exponent) == expected


def test_format_base():
    assert Format.BINARY_SI.base == 2
    assert Format.DECIMAL_SI.base == 10
    assert Format.DECIMAL_EXPONENT.base == 10


def test_exact_context_traps_rounding():
    ctx = exact_context()
    assert ctx.prec == MAX_DIGITS
    with pytest.raises(decimal.Inexact):
        ctx.divide(decimal.Decimal(1), decimal.Decimal(3))
    assert ctx.divide(decimal.Decimal(1), decimal.Decimal(8)) == decimal.Decimal("0.125")
