import decimal

# Significant digits an exact (add, sub, mul) result may carry before
# PrecisionOverflowError is raised.
MAX_DIGITS = 1000

# Fractional digits kept when a quotient does not terminate.
DIVISION_SCALE = 28

# Division rounds half to even, precision-reducing formatting rounds half away from zero.
ROUNDING = decimal.ROUND_HALF_EVEN
FORMAT_ROUNDING = decimal.ROUND_HALF_UP

EXACT_TRAPS = [
    decimal.InvalidOperation,
    decimal.DivisionByZero,
    decimal.Overflow,
    decimal.Inexact,
]


def exact_context(max_digits: int = MAX_DIGITS) -> decimal.Context:
    """Decimal context where any rounding, overflow or invalid operation raises.

    The context is never installed as the current thread context, it is passed
    explicitly to the operations that need it.
    """
    return decimal.Context(
        prec=max_digits,
        rounding=ROUNDING,
        Emin=decimal.MIN_EMIN,
        Emax=decimal.MAX_EMAX,
        traps=EXACT_TRAPS,
    )


def rounding_context(rounding: str = ROUNDING, max_digits: int = MAX_DIGITS) -> decimal.Context:
    """Like `exact_context` but rounding is allowed, exceeding the precision still raises."""
    ctx = exact_context(max_digits)
    ctx.rounding = rounding
    ctx.traps[decimal.Inexact] = False
    return ctx


def division_context(max_digits: int = MAX_DIGITS) -> decimal.Context:
    """Context for an intermediate quotient.

    Two guard digits and ROUND_05UP keep the final rounding to the requested scale
    correct, as if it had been applied to the exact quotient.
    """
    return rounding_context(decimal.ROUND_05UP, max_digits + 2)
