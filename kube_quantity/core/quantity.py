import decimal
import functools
from dataclasses import dataclass
from typing import Union

from .. import config
from ..types import Format, Quantity, Sign
from . import suffix as sfx
from .exceptions import DivisionByZeroError
from .scale import exact_arithmetic, format_decimal, round_to_scale, rounded_quotient, scale_value, unscale_value

Scalar = Union[int, decimal.Decimal]


def _check_scalar(scalar: Scalar) -> Scalar:
    if isinstance(scalar, float):
        raise TypeError("float scalars are not supported, use int or decimal.Decimal")
    if not isinstance(scalar, (int, decimal.Decimal)):
        raise TypeError(f"unsupported scalar type: '{scalar.__class__.__name__}'")
    if isinstance(scalar, decimal.Decimal) and not scalar.is_finite():
        raise ValueError(f"scalar must be a finite number, got {scalar}")
    return scalar


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class ParsedQuantity:
    """A Kubernetes quantity reduced to its exact value and suffix.

    The represented value is `sign * mantissa * base^exponent` where `base` depends on the
    `format` (2 for binary SI suffixes, 10 otherwise). Instances are immutable, every
    operation returns a new quantity.

    ```python
    >>> q = ParsedQuantity.parse("1Ki") + ParsedQuantity.parse("2Ki")
    >>> str(q)
    '3Ki'
    >>> ParsedQuantity.parse("1Ki") == ParsedQuantity.parse("1024")
    True
    ```

    The result of an addition or subtraction keeps the format of the left operand and
    the finer unit of the two operands (`1M - 500k` is `500k`). Comparisons only look at
    the exact value, the suffix is ignored.
    """
    sign: Sign
    mantissa: decimal.Decimal
    format: Format
    exponent: int
    suffix: str

    @classmethod
    def parse(cls, quantity: str) -> 'ParsedQuantity':
        """Parse a quantity string. See `parse_quantity_string`."""
        from .parser import parse_quantity_string
        return parse_quantity_string(quantity)

    @classmethod
    def from_quantity(cls, quantity: Quantity) -> 'ParsedQuantity':
        """Parse the string held by a `Quantity` wrapper."""
        return cls.parse(quantity)

    def to_quantity(self) -> Quantity:
        """Wrap the canonical text, e.g. for a `ResourceRequirements` field."""
        return Quantity(self.to_string())

    @property
    def base(self) -> int:
        return self.format.base

    @property
    def _signed_mantissa(self) -> decimal.Decimal:
        if self.sign is Sign.NEGATIVE:
            return self.mantissa.copy_negate()
        return self.mantissa

    @property
    def _marker(self) -> str:
        if self.format is Format.DECIMAL_EXPONENT:
            return self.suffix[0]
        return "e"

    @classmethod
    def _build(cls, signed_mantissa: decimal.Decimal, fmt: Format, exponent: int, marker: str = "e") -> 'ParsedQuantity':
        sign = Sign.NEGATIVE if signed_mantissa < 0 else Sign.POSITIVE
        return cls(sign, signed_mantissa.copy_abs(), fmt, exponent, sfx.suffix_for(fmt, exponent, marker))

    @classmethod
    def _coerce(cls, other: Union['ParsedQuantity', str]) -> 'ParsedQuantity':
        if isinstance(other, ParsedQuantity):
            return other
        if isinstance(other, str):
            return cls.parse(other)
        raise TypeError(f"expected a quantity, got '{other.__class__.__name__}'")

    def to_decimal(self) -> decimal.Decimal:
        """Returns the exact value in base units (e.g. `1Ki` -> `1024`)."""
        with exact_arithmetic("to_decimal") as ctx:
            return scale_value(self._signed_mantissa, self.format, self.exponent, ctx)

    def to_string(self) -> str:
        text = format_decimal(self.mantissa) + self.suffix
        if self.sign is Sign.NEGATIVE and self.mantissa:
            return "-" + text
        return text

    def _combine(self, other: 'ParsedQuantity', operation: str) -> 'ParsedQuantity':
        exponent = min(self.exponent, sfx.exponent_in(self.format, other.format, other.exponent))
        with exact_arithmetic(operation) as ctx:
            lhs = self.to_decimal()
            rhs = other.to_decimal()
            if operation == "add":
                value = ctx.add(lhs, rhs)
            else:
                value = ctx.subtract(lhs, rhs)
            mantissa = unscale_value(value, self.format, exponent, ctx)
        return self._build(mantissa, self.format, exponent, self._marker)

    def add(self, other: Union['ParsedQuantity', str]) -> 'ParsedQuantity':
        """Exact sum of two quantities.

        **Parameters**

        * **other** `ParsedQuantity` or `str` - The quantity to add; strings are parsed first.

        **returns**  A new `ParsedQuantity` using the format of this quantity and the finer
        unit of the two operands.
        """
        return self._combine(self._coerce(other), "add")

    def sub(self, other: Union['ParsedQuantity', str]) -> 'ParsedQuantity':
        """Exact difference of two quantities, formatted like `add`."""
        return self._combine(self._coerce(other), "sub")

    def mul(self, scalar: Scalar) -> 'ParsedQuantity':
        """Multiply by an integer or decimal scalar, keeping the suffix."""
        scalar = _check_scalar(scalar)
        with exact_arithmetic("mul") as ctx:
            mantissa = ctx.multiply(self._signed_mantissa, scalar)
        return self._build(mantissa, self.format, self.exponent, self._marker)

    def div(self, other: Union['ParsedQuantity', str, Scalar],
            scale: int = config.DIVISION_SCALE) -> Union['ParsedQuantity', decimal.Decimal]:
        """Divide by a scalar or by another quantity.

        Dividing by a scalar returns a `ParsedQuantity` with the same suffix, dividing by a
        quantity returns the dimensionless ratio of the two exact values as a `Decimal`.
        Quotients that do not terminate are rounded half to even to `scale` fractional
        digits (of the mantissa for a scalar division).

        **raises**  `DivisionByZeroError` if the divisor is zero.
        """
        if isinstance(other, (ParsedQuantity, str)):
            divisor = self._coerce(other).to_decimal()
            if not divisor:
                raise DivisionByZeroError(self)
            return rounded_quotient(self.to_decimal(), divisor, scale)

        scalar = _check_scalar(other)
        if not scalar:
            raise DivisionByZeroError(self)
        mantissa = rounded_quotient(self._signed_mantissa, decimal.Decimal(scalar), scale)
        return self._build(mantissa, self.format, self.exponent, self._marker)

    def compare(self, other: Union['ParsedQuantity', str]) -> int:
        """Returns -1, 0 or 1 comparing the exact values of the two quantities."""
        lhs = self.to_decimal()
        rhs = self._coerce(other).to_decimal()
        return (lhs > rhs) - (lhs < rhs)

    def __add__(self, other):
        if not isinstance(other, (ParsedQuantity, str)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.parse(other).add(self)

    def __sub__(self, other):
        if not isinstance(other, (ParsedQuantity, str)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.parse(other).sub(self)

    def __mul__(self, other):
        if not isinstance(other, (int, decimal.Decimal)):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, (ParsedQuantity, str, int, decimal.Decimal)):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> 'ParsedQuantity':
        return self._build(self._signed_mantissa.copy_negate(), self.format, self.exponent, self._marker)

    def __pos__(self) -> 'ParsedQuantity':
        return self

    def __abs__(self) -> 'ParsedQuantity':
        return self._build(self.mantissa, self.format, self.exponent, self._marker)

    def __round__(self, ndigits: int = 0) -> 'ParsedQuantity':
        """Round the mantissa half away from zero, the suffix is unchanged."""
        mantissa = round_to_scale(self._signed_mantissa, ndigits, config.FORMAT_ROUNDING)
        return self._build(mantissa, self.format, self.exponent, self._marker)

    def to_string_with_precision(self, precision: int) -> str:
        """Format with at most `precision` fractional digits in the mantissa.

        ```python
        >>> ParsedQuantity.parse("2.024k").to_string_with_precision(2)
        '2.02k'
        ```
        """
        return round(self, precision).to_string()

    def __eq__(self, other):
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, ParsedQuantity):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(self.to_decimal())

    def __bool__(self):
        return bool(self.mantissa)

    def __int__(self):
        return int(self.to_decimal())

    def __float__(self):
        return float(self.to_decimal())

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.to_string()!r})"
