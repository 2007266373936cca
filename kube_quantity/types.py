import enum
import typing


class Format(enum.Enum):
    BINARY_SI = 'BinarySI'                  # e.g. 12Mi = 12 * 2^20
    DECIMAL_SI = 'DecimalSI'                # e.g. 12M = 12 * 10^6
    DECIMAL_EXPONENT = 'DecimalExponent'    # e.g. 12e6 = 12 * 10^6

    @property
    def base(self) -> int:
        return 2 if self is Format.BINARY_SI else 10


class Sign(enum.Enum):
    POSITIVE = 1
    NEGATIVE = -1


# Kubernetes API types carry quantities as plain strings (e.g. `ResourceRequirements.limits`)
Quantity = typing.NewType('Quantity', str)
