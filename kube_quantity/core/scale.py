import decimal
import logging
from contextlib import contextmanager

from .. import config
from ..types import Format
from .exceptions import PrecisionOverflowError

logger = logging.getLogger(__name__)


@contextmanager
def exact_arithmetic(operation: str):
    """Yields a decimal context where any loss of precision is an error.

    Decimal signals raised in the block are reported as `PrecisionOverflowError`.
    """
    try:
        yield config.exact_context()
    except decimal.DecimalException as e:
        raise PrecisionOverflowError(operation, config.MAX_DIGITS) from e


def scale_value(value: decimal.Decimal, fmt: Format, exponent: int, ctx: decimal.Context) -> decimal.Decimal:
    """Returns `value * base^exponent` for the base of `fmt`."""
    if fmt.base == 10:
        return ctx.scaleb(value, exponent)
    if exponent >= 0:
        return ctx.multiply(value, 2 ** exponent)
    return ctx.divide(value, 2 ** -exponent)


def unscale_value(value: decimal.Decimal, fmt: Format, exponent: int, ctx: decimal.Context) -> decimal.Decimal:
    """Returns `value / base^exponent` for the base of `fmt`.

    Dividing a finite decimal by a power of two always terminates, so the
    result is exact as long as it fits the context precision.
    """
    return scale_value(value, fmt, -exponent, ctx)


def round_to_scale(value: decimal.Decimal, scale: int, rounding: str = config.ROUNDING) -> decimal.Decimal:
    """Rounds `value` to `scale` fractional digits (a negative scale rounds to tens, hundreds...).

    Values that already fit the scale are returned unchanged, without trailing zeros.
    """
    with exact_arithmetic("rounding") as ctx:
        if value.as_tuple().exponent < -scale:
            step = decimal.Decimal(1).scaleb(-scale)
            value = value.quantize(step, context=config.rounding_context(rounding))
        return trim_zeros(value, ctx)


def rounded_quotient(numerator: decimal.Decimal, denominator: decimal.Decimal, scale: int) -> decimal.Decimal:
    """Divides two decimals rounding half to even to `scale` fractional digits.

    The quotient is computed with guard digits and rounded once to the scale.
    `denominator` must not be zero.
    """
    ctx = config.division_context()
    with exact_arithmetic("division"):
        quotient = ctx.divide(numerator, denominator)
    inexact = ctx.flags[decimal.Inexact]
    if inexact and quotient.adjusted() + 1 + scale > config.MAX_DIGITS:
        # the rounded quotient would not fit the precision either
        raise PrecisionOverflowError("division", config.MAX_DIGITS)
    result = round_to_scale(quotient, scale)
    if inexact or result != quotient:
        logger.debug("%s / %s rounded to %d fractional digits", numerator, denominator, scale)
    return result


def trim_zeros(value: decimal.Decimal, ctx: decimal.Context) -> decimal.Decimal:
    """Removes trailing fractional zeros without switching to exponent notation."""
    if value == value.to_integral_value() and value.adjusted() < ctx.prec:
        return value.quantize(decimal.Decimal(1), context=ctx)
    return ctx.normalize(value)


def format_decimal(value: decimal.Decimal) -> str:
    """Plain (never scientific) representation without redundant zeros.

    Negative zero is written as `0`.
    """
    if not value:
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
