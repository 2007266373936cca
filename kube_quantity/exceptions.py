from .core.exceptions import (
    DivisionByZeroError,
    InvalidFormatError,
    InvalidSuffixError,
    ParseQuantityError,
    PrecisionOverflowError,
    QuantityArithmeticError,
    QuantityError,
)

__all__ = [
    "DivisionByZeroError",
    "InvalidFormatError",
    "InvalidSuffixError",
    "ParseQuantityError",
    "PrecisionOverflowError",
    "QuantityArithmeticError",
    "QuantityError",
]
