from .core.quantity import ParsedQuantity
from .core.parser import parse_quantity_string
from .core.exceptions import (
    QuantityError,
    ParseQuantityError,
    InvalidFormatError,
    InvalidSuffixError,
    QuantityArithmeticError,
    DivisionByZeroError,
    PrecisionOverflowError,
)
from .types import Format, Quantity, Sign
__all__ = [
    "ParsedQuantity",
    "parse_quantity_string",
    "QuantityError",
    "ParseQuantityError",
    "InvalidFormatError",
    "InvalidSuffixError",
    "QuantityArithmeticError",
    "DivisionByZeroError",
    "PrecisionOverflowError",
    "Format",
    "Quantity",
    "Sign",
]
