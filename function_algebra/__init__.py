"""
function_algebra — single-variable functions as composable objects.

Primitives (Constant, Identity, Power, Exponential, Polynomial) combine
into Sum/Difference/Product/Quotient trees. Every node can be evaluated,
differentiated at a point, and rendered as a formula. Newton's method
finds roots through the same interface.
"""

from .exceptions import FunctionAlgebraError, TypeMismatchError, MalformedPayloadError
from .types import NoPayload, IntPayload, SequencePayload, NewtonResult, payload_from_value
from .function import (
    Function,
    PrimitiveFunction,
    CompositeFunction,
    Constant,
    Identity,
    Power,
    Exponential,
    Polynomial,
    Sum,
    Difference,
    Product,
    Quotient,
)
from .operators import add, subtract, multiply, divide, ensure_function
from .newton import newton_method, newton_solve, RootFinder
from .factory import FunctionFactory, create_object

__all__ = [
    "FunctionAlgebraError",
    "TypeMismatchError",
    "MalformedPayloadError",
    "NoPayload",
    "IntPayload",
    "SequencePayload",
    "NewtonResult",
    "payload_from_value",
    "Function",
    "PrimitiveFunction",
    "CompositeFunction",
    "Constant",
    "Identity",
    "Power",
    "Exponential",
    "Polynomial",
    "Sum",
    "Difference",
    "Product",
    "Quotient",
    "add",
    "subtract",
    "multiply",
    "divide",
    "ensure_function",
    "newton_method",
    "newton_solve",
    "RootFinder",
    "FunctionFactory",
    "create_object",
]
