"""
Shared data structures for the function algebra.

Payloads carry the parameters a primitive is built from. They form a small
tagged union so the factory can check a payload's shape against the
variant it is about to construct, instead of casting and hoping.

NewtonResult reports how a root search ended.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple, Union

from .exceptions import MalformedPayloadError


# Integer parameters are bounded to a 32-bit C int
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def is_integer(value) -> bool:
    """True for Python and numpy integers. bool is not a number here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def require_int(value, what: str = "value") -> int:
    """Return value as an int, or raise MalformedPayloadError.

    Rejects non-integers and integers outside [INT_MIN, INT_MAX].
    """
    if not is_integer(value):
        raise MalformedPayloadError(
            f"{what} must be an integer, got {type(value).__name__}"
        )
    value = int(value)
    if not INT_MIN <= value <= INT_MAX:
        raise MalformedPayloadError(
            f"{what} {value} is outside the range [{INT_MIN}, {INT_MAX}]"
        )
    return value


@dataclass(frozen=True)
class NoPayload:
    """No parameters (Identity)."""

    tag = "none"


@dataclass(frozen=True)
class IntPayload:
    """A single integer: constant value, exponent or exp coefficient."""

    value: int
    tag = "int"

    def __post_init__(self):
        object.__setattr__(self, "value", require_int(self.value))


@dataclass(frozen=True)
class SequencePayload:
    """An ordered sequence of integers, index = degree."""

    values: Tuple[int, ...]
    tag = "sequence"

    def __post_init__(self):
        if isinstance(self.values, (str, bytes)):
            raise MalformedPayloadError("expected a sequence of integers, got a string")
        try:
            values = tuple(self.values)
        except TypeError:
            raise MalformedPayloadError(
                f"expected a sequence of integers, got {type(self.values).__name__}"
            ) from None
        object.__setattr__(
            self, "values", tuple(require_int(v, "coefficient") for v in values)
        )


Payload = Union[NoPayload, IntPayload, SequencePayload]


def payload_from_value(value) -> Payload:
    """Wrap an untyped value into the matching payload variant.

    This is the boundary where loosely typed input (a factory call, a
    script) becomes a checked payload.
    """
    if isinstance(value, (NoPayload, IntPayload, SequencePayload)):
        return value
    if value is None:
        return NoPayload()
    if is_integer(value):
        return IntPayload(value)
    if isinstance(value, (list, tuple, np.ndarray)):
        return SequencePayload(value)
    raise MalformedPayloadError(
        f"unsupported payload type: {type(value).__name__}"
    )


@dataclass
class NewtonResult:
    """Outcome of a Newton's-method search."""

    x: float  # Final iterate (may be inf/NaN)
    iterations: int  # Steps actually taken, always >= 1
    residual: float  # |f(x)| at the final iterate
    converged: bool  # residual <= eps
