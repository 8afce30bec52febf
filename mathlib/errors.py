"""Exceptions raised by mathlib.

Each error kind also derives from the closest builtin exception, so
that `except ValueError` (etc.) keeps working in calling code.
"""
__all__ = [
    'MathLibError',
    'InvalidArgumentError',
    'InvalidLengthError',
    'ComponentIndexError',
    'NotSupportedError',
    'ZeroMagnitudeError',
]


class MathLibError(Exception):
    """Base class of all mathlib errors."""
    pass


class InvalidArgumentError(MathLibError, TypeError):
    """A source object is missing (`None`) or has the wrong type."""
    pass


class InvalidLengthError(MathLibError, ValueError):
    """An array or buffer does not have the expected shape."""
    pass


class ComponentIndexError(MathLibError, IndexError):
    """A component or cell index is out of range."""
    pass


class NotSupportedError(MathLibError, NotImplementedError):
    """The operation exists in the API but is not supported yet.

    It is distinct from numerical failures: no computation is attempted.
    """
    pass


class ZeroMagnitudeError(MathLibError, ZeroDivisionError):
    """A vector with zero magnitude was used as a divisor."""
    pass
