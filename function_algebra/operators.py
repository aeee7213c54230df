"""
Combination operators — build composite functions from two operands.

Each operator checks BOTH operands before building anything, so a
rejected combination has no side effects. The same checks back the
+ - * / overloads on Function, which makes them symmetric: a bad operand
on either side raises TypeMismatchError.
"""

from .exceptions import TypeMismatchError
from .function import Difference, Function, Product, Quotient, Sum


def ensure_function(operand: object, operation: str = "combine") -> Function:
    """Return operand unchanged if it is a Function, else raise."""
    if not isinstance(operand, Function):
        raise TypeMismatchError(operation, operand)
    return operand


def _check_operands(a: object, b: object, operation: str):
    return ensure_function(a, operation), ensure_function(b, operation)


def add(a: object, b: object) -> Sum:
    """a + b"""
    a, b = _check_operands(a, b, "add")
    return Sum(a, b)


def subtract(a: object, b: object) -> Difference:
    """a - b"""
    a, b = _check_operands(a, b, "subtract")
    return Difference(a, b)


def multiply(a: object, b: object) -> Product:
    """a * b"""
    a, b = _check_operands(a, b, "multiply")
    return Product(a, b)


def divide(a: object, b: object) -> Quotient:
    """a / b. Does not check b for zeros; see Quotient."""
    a, b = _check_operands(a, b, "divide")
    return Quotient(a, b)
