"""
Exception classes for function_algebra.

Only two things can go wrong in the core: combining something that is not
a Function, and constructing a primitive from a payload of the wrong shape.
Numeric degeneracies (division by zero, a Newton step that never settles)
are NOT errors; they come back as inf/NaN values.
"""


class FunctionAlgebraError(Exception):
    """Base exception for all function_algebra errors."""


class TypeMismatchError(FunctionAlgebraError, TypeError):
    """An operand handed to a combination operator is not a Function.

    Raised before any composite is built, so a failed combination leaves
    nothing behind.
    """

    def __init__(self, operation: str, operand: object):
        self.operation = operation
        self.operand = operand
        super().__init__(
            f"cannot {operation}: {type(operand).__name__} is not a Function"
        )


class MalformedPayloadError(FunctionAlgebraError, ValueError):
    """A primitive was given a payload that does not match its shape.

    e.g. a string for Power, or an empty coefficient list for Polynomial.
    """
