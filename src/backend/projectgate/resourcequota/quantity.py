"""Resource quantity parsing and comparison.

Quantities use the Kubernetes grammar:

    <sign><digits>[.<digits>][<suffix>]

  binary SI   Ki Mi Gi Ti Pi Ei        (powers of 1024)
  decimal SI  n u m  k M G T P E       (powers of 1000)
  exponent    e<int> / E<int>

Every resource name (cpu, memory, storage, object counts, custom resources)
shares the same grammar, so magnitudes are plain Decimals in base units.
"""

import enum
import re
from decimal import (
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    Rounded,
    Subnormal,
    Underflow,
)

from projectgate.errors import QuantityParseError

_BINARY_SUFFIXES: dict[str, int] = {
    "Ki": 1024,
    "Mi": 1024**2,
    "Gi": 1024**3,
    "Ti": 1024**4,
    "Pi": 1024**5,
    "Ei": 1024**6,
}

# suffix -> power of ten
_DECIMAL_SUFFIXES: dict[str, int] = {
    "n": -9,
    "u": -6,
    "m": -3,
    "": 0,
    "k": 3,
    "M": 6,
    "G": 9,
    "T": 12,
    "P": 15,
    "E": 18,
}

_QUANTITY_RE = re.compile(
    r"(?P<number>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))"
    r"(?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|[eE][+-]?[0-9]+|[numkMGTPE])?"
)

# Wide enough for Ei-scale values with nano precision. Any result that would
# need rounding, or falls outside the exponent range, raises instead.
_CONTEXT = Context(
    prec=64,
    traps=[
        DivisionByZero,
        Inexact,
        InvalidOperation,
        Overflow,
        Rounded,
        Subnormal,
        Underflow,
    ],
)


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def parse_quantity(value: str | int | float) -> Decimal:
    """Parse a quantity string into its magnitude in base units.

    Raises QuantityParseError when the value does not match the grammar, or
    when its magnitude cannot be represented exactly.
    """
    text = value if isinstance(value, str) else str(value)
    match = _QUANTITY_RE.fullmatch(text)
    if match is None:
        raise QuantityParseError(f"quantities must match the regular expression: {text!r}")

    number = Decimal(match.group("number"))
    suffix = match.group("suffix") or ""

    try:
        if suffix in _BINARY_SUFFIXES:
            return _CONTEXT.multiply(number, Decimal(_BINARY_SUFFIXES[suffix]))
        if suffix in _DECIMAL_SUFFIXES:
            return number.scaleb(_DECIMAL_SUFFIXES[suffix], _CONTEXT)
        return number.scaleb(int(suffix[1:]), _CONTEXT)
    except DecimalException as exc:
        raise QuantityParseError(f"quantity is out of range: {text!r}") from exc


def add(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of two magnitudes."""
    try:
        return _CONTEXT.add(a, b)
    except DecimalException as exc:
        raise QuantityParseError(f"quantity sum is out of range: {a} + {b}") from exc


def compare(a: Decimal, b: Decimal) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def format_quantity(value: Decimal) -> str:
    """Render a magnitude as a canonical quantity string.

    Integers of at least 1Ki that are exact multiples of a binary suffix use
    the largest such suffix; otherwise the largest exact decimal suffix is
    used, falling back to milli units and finally a plain decimal.
    """
    if value == value.to_integral_value():
        integral = int(value)
        for suffix, factor in reversed(_BINARY_SUFFIXES.items()):
            if integral and integral % factor == 0:
                return f"{integral // factor}{suffix}"
        for suffix in ("E", "P", "T", "G", "M", "k"):
            factor = 10 ** _DECIMAL_SUFFIXES[suffix]
            if integral and integral % factor == 0:
                return f"{integral // factor}{suffix}"
        return str(integral)

    milli = value.scaleb(3, _CONTEXT)
    if milli == milli.to_integral_value():
        return f"{int(milli)}m"
    return format(value.normalize(_CONTEXT), "f")
