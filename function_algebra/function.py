"""
Functions — single-variable real functions as composable objects.

Every Function answers three questions about itself:
  - evaluate(x):   what is f(x)?
  - derivative(x): what is f'(x)? (a number, recomputed analytically)
  - render():      how does f read as an algebraic string?

Primitives are leaves with closed-form rules. Composites hold two
sub-functions and combine their answers with the sum, difference,
product and quotient rules. Nothing mutates after construction, so a
sub-function can be shared between any number of trees.

Inputs may be scalars or numpy arrays. Scalars come back as float,
arrays come back as float arrays of the same shape.
"""

import numpy as np
from numpy.polynomial import polynomial as P
from dataclasses import astuple
from typing import Sequence, Tuple

from .exceptions import MalformedPayloadError
from .types import IntPayload, NoPayload, SequencePayload, payload_from_value, require_int


def _to_output(y):
    """Collapse 0-d results to a plain float."""
    if np.ndim(y) == 0:
        return float(y)
    return y


# ================================================================
# BASE CLASS
# ================================================================

class Function:
    """A single-variable real function.

    Subclasses implement _evaluate() and _derivative() on float arrays
    and render(). The public evaluate()/derivative() handle conversion
    and silence numpy floating-point warnings: division by zero and
    overflow are valid outcomes (inf/NaN), not errors.
    """

    def evaluate(self, x):
        """Evaluate f(x)."""
        x = np.array(x, dtype=float)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return _to_output(self._evaluate(x))

    def derivative(self, x):
        """Evaluate f'(x)."""
        x = np.array(x, dtype=float)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return _to_output(self._derivative(x))

    def render(self) -> str:
        """Return a human-readable formula string."""
        raise NotImplementedError

    # --- Abstract interface (subclasses must implement) ---

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    # --- Tree shape ---

    @property
    def children(self) -> Tuple["Function", ...]:
        return ()

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    @property
    def is_composed(self) -> bool:
        return len(self.children) > 0

    # --- Algebra (delegates to the checked combination operators) ---

    def __add__(self, other):
        from .operators import add
        return add(self, other)

    def __radd__(self, other):
        from .operators import add
        return add(other, self)

    def __sub__(self, other):
        from .operators import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        from .operators import subtract
        return subtract(other, self)

    def __mul__(self, other):
        from .operators import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from .operators import multiply
        return multiply(other, self)

    def __truediv__(self, other):
        from .operators import divide
        return divide(self, other)

    def __rtruediv__(self, other):
        from .operators import divide
        return divide(other, self)

    def __call__(self, x):
        return self.evaluate(x)

    def __str__(self):
        return self.render()


# ================================================================
# PRIMITIVES
# ================================================================

class PrimitiveFunction(Function):
    """A leaf function built directly from a payload.

    payload_type names the payload variant the factory must supply; its
    fields are passed to the constructor positionally.
    """

    payload_type: type = NoPayload

    @classmethod
    def from_value(cls, value) -> "PrimitiveFunction":
        """Build from an untyped value, checking its shape first."""
        payload = payload_from_value(value)
        if not isinstance(payload, cls.payload_type):
            raise MalformedPayloadError(
                f"{cls.__name__} expects a '{cls.payload_type.tag}' payload, "
                f"got '{payload.tag}'"
            )
        return cls(*astuple(payload))


class Constant(PrimitiveFunction):
    """f(x) = c"""

    payload_type = IntPayload

    def __init__(self, c: int):
        self._c = require_int(c, "constant")

    @property
    def c(self) -> int:
        return self._c

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return np.full_like(x, self._c, dtype=float)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        return np.zeros_like(x, dtype=float)

    def render(self) -> str:
        return str(self._c)

    def __repr__(self):
        return f"Constant({self._c})"


class Identity(PrimitiveFunction):
    """f(x) = x"""

    @classmethod
    def from_value(cls, value=None) -> "Identity":
        # Identity has no parameters; whatever was passed is ignored.
        return cls()

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return x.copy()

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        return np.ones_like(x, dtype=float)

    def render(self) -> str:
        return "x"

    def __repr__(self):
        return "Identity()"


class Power(PrimitiveFunction):
    """f(x) = x^n

    n may be zero or negative. Evaluating a negative power at 0 gives inf.
    """

    payload_type = IntPayload

    def __init__(self, n: int):
        self._n = require_int(n, "exponent")

    @property
    def n(self) -> int:
        return self._n

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return np.power(x, self._n)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        # x^0 is constant; n*x^(n-1) would give 0*inf = NaN at x = 0
        if self._n == 0:
            return np.zeros_like(x, dtype=float)
        return self._n * np.power(x, self._n - 1)

    def render(self) -> str:
        return f"x^{self._n}"

    def __repr__(self):
        return f"Power({self._n})"


class Exponential(PrimitiveFunction):
    """f(x) = e^(k*x)"""

    payload_type = IntPayload

    def __init__(self, k: int):
        self._k = require_int(k, "exponential coefficient")

    @property
    def k(self) -> int:
        return self._k

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return np.exp(self._k * x)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        return self._k * np.exp(self._k * x)

    def render(self) -> str:
        return f"e^{self._k}x"

    def __repr__(self):
        return f"Exponential({self._k})"


class Polynomial(PrimitiveFunction):
    """f(x) = a_0 + a_1*x + ... + a_n*x^n

    Coefficients are given lowest degree first (index = degree), which is
    the order numpy.polynomial.polynomial works in. At least one
    coefficient is required.
    """

    payload_type = SequencePayload

    def __init__(self, coefficients: Sequence[int]):
        values = SequencePayload(coefficients).values
        if not values:
            raise MalformedPayloadError("polynomial needs at least one coefficient")
        self._coefficients = values
        self._values = np.array(values, dtype=float)
        self._der_values = P.polyder(self._values)
        self._values.flags.writeable = False
        self._der_values.flags.writeable = False

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return P.polyval(x, self._values)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        return P.polyval(x, self._der_values)

    def render(self) -> str:
        # Every term is written out, zeros included
        parts = [str(self._coefficients[0])]
        for power, c in enumerate(self._coefficients[1:], start=1):
            parts.append(f"{c}x^{power}")
        return "+".join(parts)

    def __repr__(self):
        return f"Polynomial({list(self._coefficients)})"


# ================================================================
# COMPOSITION
# ================================================================

class CompositeFunction(Function):
    """A function built by combining two sub-functions a and b.

    Sub-functions are referenced, not copied, so the same node may sit in
    several trees. Use the operators in function_algebra.operators (or
    + - * /) to build these; they check both operands first.

    evaluate(), derivative() and render() recurse once per tree level, so
    depth is bounded by the interpreter recursion limit (sys.getrecursionlimit,
    1000 by default). A chain of roughly a thousand + operations raises
    RecursionError; sum long series with numpy instead of building them
    as trees.
    """

    symbol: str = "?"

    def __init__(self, a: Function, b: Function):
        self._a = a
        self._b = b

    @property
    def a(self) -> Function:
        return self._a

    @property
    def b(self) -> Function:
        return self._b

    @property
    def children(self) -> Tuple[Function, ...]:
        return (self._a, self._b)

    def render(self) -> str:
        return f"{self._a.render()}{self.symbol}{self._b.render()}"

    def __repr__(self):
        return f"{type(self).__name__}({self._a!r}, {self._b!r})"


class Sum(CompositeFunction):
    """(a + b)(x) = a(x) + b(x)"""

    symbol = "+"

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return self._a._evaluate(x) + self._b._evaluate(x)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        return self._a._derivative(x) + self._b._derivative(x)


class Difference(CompositeFunction):
    """(a - b)(x) = a(x) - b(x)"""

    symbol = "-"

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return self._a._evaluate(x) - self._b._evaluate(x)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        return self._a._derivative(x) - self._b._derivative(x)


class Product(CompositeFunction):
    """(a * b)' = a'b + ab'"""

    symbol = "*"

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return self._a._evaluate(x) * self._b._evaluate(x)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        va, vb = self._a._evaluate(x), self._b._evaluate(x)
        da, db = self._a._derivative(x), self._b._derivative(x)
        return da * vb + va * db


class Quotient(CompositeFunction):
    """(a / b)' = (a'b - ab') / b^2

    Where b(x) = 0 both evaluate() and derivative() return inf or NaN.
    """

    symbol = "/"

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return self._a._evaluate(x) / self._b._evaluate(x)

    def _derivative(self, x: np.ndarray) -> np.ndarray:
        va, vb = self._a._evaluate(x), self._b._evaluate(x)
        da, db = self._a._derivative(x), self._b._derivative(x)
        return (da * vb - va * db) / vb ** 2
