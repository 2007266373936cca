import decimal
import re

from ..types import Format, Sign
from . import suffix as sfx
from .exceptions import InvalidFormatError, InvalidSuffixError, PrecisionOverflowError
from .quantity import ParsedQuantity
from .scale import exact_arithmetic, scale_value

NUMBER_PAT = re.compile(r"([+-]?)([0-9]+(?:[.][0-9]*)?|[.][0-9]+)")
EXPONENT_PAT = re.compile(r"([eE])([+-]?[0-9]+)")
NUMERIC_CHARS_PAT = re.compile(r"[0-9.]")


def parse_quantity_string(quantity: str) -> ParsedQuantity:
    """Parse a quantity string into a `ParsedQuantity`.

    Reference: https://kubernetes.io/docs/reference/kubernetes-api/common-definitions/quantity/

    **Parameters**

    * **quantity** `str` - A Kubernetes quantity (e.g. "1Gi", "500m" or "12e6").

    **returns**  An instance of `ParsedQuantity` holding the exact value and its suffix.

    **raises**

    * `InvalidFormatError` - the string does not follow the quantity grammar.
    * `InvalidSuffixError` - the number is followed by an unknown unit suffix.
    """
    if not isinstance(quantity, str):
        raise TypeError(f"quantity must be a string, not '{quantity.__class__.__name__}'")
    if not quantity:
        raise InvalidFormatError(quantity, "empty string")

    match = NUMBER_PAT.match(quantity)
    if not match:
        raise InvalidFormatError(quantity, "expected a number")

    sign = Sign.NEGATIVE if match.group(1) == "-" else Sign.POSITIVE
    number = match.group(2)
    mantissa = decimal.Decimal(number)
    rest = quantity[match.end():]

    exp_match = EXPONENT_PAT.fullmatch(rest)
    if exp_match:
        fmt = Format.DECIMAL_EXPONENT
        exponent = int(exp_match.group(2))
        suffix = sfx.suffix_for(fmt, exponent, marker=exp_match.group(1))
    else:
        unit = sfx.lookup(rest)
        if unit is None:
            if NUMERIC_CHARS_PAT.search(rest):
                raise InvalidFormatError(quantity, f"unexpected characters {rest!r} after the number")
            raise InvalidSuffixError(quantity, rest)
        fmt, exponent = unit
        suffix = rest

    if not mantissa:
        sign = Sign.POSITIVE

    try:
        # make sure the value can be represented exactly before accepting it
        with exact_arithmetic("parse") as ctx:
            scale_value(mantissa, fmt, exponent, ctx)
    except PrecisionOverflowError as e:
        raise InvalidFormatError(quantity, "numerical value out of the supported range") from e

    return ParsedQuantity(sign, mantissa, fmt, exponent, suffix)
