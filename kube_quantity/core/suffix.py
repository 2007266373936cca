from typing import Optional, Tuple

from ..types import Format

DECIMAL_SI = {
    "n": -9,  # 1000^(-3)
    "u": -6,  # 1000^(-2)
    "m": -3,  # 1000^(-1) (=0.001)
    "": 0,  # 1000^0 (=1)
    "k": 3,  # 1000^1
    "M": 6,  # 1000^2
    "G": 9,  # 1000^3
    "T": 12,  # 1000^4
    "P": 15,  # 1000^5
    "E": 18,  # 1000^6
}

BINARY_SI = {
    "Ki": 10,  # 1024^1
    "Mi": 20,  # 1024^2
    "Gi": 30,  # 1024^3
    "Ti": 40,  # 1024^4
    "Pi": 50,  # 1024^5
    "Ei": 60,  # 1024^6
}

DECIMAL_SI_TOKENS = {v: k for k, v in DECIMAL_SI.items()}
BINARY_SI_TOKENS = {v: k for k, v in BINARY_SI.items()}

# Steps are powers of 1000 for the decimal families and of 1024 for the binary one.
MIN_DECIMAL_STEP, MAX_DECIMAL_STEP = -3, 6
MIN_BINARY_STEP, MAX_BINARY_STEP = 0, 6


def lookup(token: str) -> Optional[Tuple[Format, int]]:
    """Returns format and exponent of a unit suffix, or None if the suffix is unknown."""
    if token in BINARY_SI:
        return Format.BINARY_SI, BINARY_SI[token]
    if token in DECIMAL_SI:
        return Format.DECIMAL_SI, DECIMAL_SI[token]
    return None


def suffix_for(fmt: Format, exponent: int, marker: str = "e") -> str:
    """Suffix text for a format and exponent.

    `marker` is the letter used in front of a decimal exponent (`e` or `E`).
    """
    if fmt is Format.DECIMAL_EXPONENT:
        return f"{marker}{exponent}"
    if fmt is Format.BINARY_SI:
        # plain numbers in binary notation have no suffix
        return BINARY_SI_TOKENS.get(exponent, "")
    return DECIMAL_SI_TOKENS[exponent]


def step_of(fmt: Format, exponent: int) -> int:
    if fmt is Format.BINARY_SI:
        return exponent // 10
    return exponent // 3


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def exponent_in(fmt: Format, other_fmt: Format, other_exponent: int) -> int:
    """Maps an exponent of `other_fmt` to the closest exponent of `fmt` not above it.

    Binary and SI exponents are matched by step (`Mi` <-> `M`), decimal exponents
    are kept as they are when `fmt` is itself a decimal exponent.
    """
    if fmt is Format.DECIMAL_EXPONENT:
        if other_fmt is Format.BINARY_SI:
            return step_of(other_fmt, other_exponent) * 3
        return other_exponent
    step = step_of(other_fmt, other_exponent)
    if fmt is Format.BINARY_SI:
        return _clamp(step, MIN_BINARY_STEP, MAX_BINARY_STEP) * 10
    return _clamp(step, MIN_DECIMAL_STEP, MAX_DECIMAL_STEP) * 3
