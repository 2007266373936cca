"""
Exceptions.
"""


class QuantityError(Exception):
    """
    Base class for all the errors raised by kube_quantity.
    """


class ParseQuantityError(QuantityError, ValueError):
    """
    The string is not a valid quantity.
    """

    def __init__(self, quantity: str, message: str) -> None:
        super().__init__()
        self.quantity = quantity
        self.message = message

    def __str__(self) -> str:
        return f"Invalid quantity string {self.quantity!r}: {self.message}"


class InvalidFormatError(ParseQuantityError):
    """
    The string does not follow the quantity grammar.
    """


class InvalidSuffixError(ParseQuantityError):
    """
    The number is followed by an unknown suffix.
    """

    def __init__(self, quantity: str, suffix: str) -> None:
        super().__init__(quantity, f"invalid unit suffix {suffix!r}")
        self.suffix = suffix


class QuantityArithmeticError(QuantityError, ArithmeticError):
    """
    An arithmetic operation on quantities could not be completed.
    """


class DivisionByZeroError(QuantityArithmeticError, ZeroDivisionError):
    """
    Quantity divided by zero.
    """

    def __init__(self, dividend) -> None:
        super().__init__()
        self.dividend = dividend

    def __str__(self) -> str:
        return f"cannot divide {self.dividend} by zero"


class PrecisionOverflowError(QuantityArithmeticError, OverflowError):
    """
    The exact result needs more digits (or a larger exponent) than supported.
    """

    def __init__(self, operation: str, max_digits: int) -> None:
        super().__init__()
        self.operation = operation
        self.max_digits = max_digits

    def __str__(self) -> str:
        return f"{self.operation}: exact result exceeds {self.max_digits} significant digits"
