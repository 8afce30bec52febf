"""
Small linear-algebra primitives: 2D/3D vectors and 2x2/3x3 matrices.

Components are single-precision floats stored in `torch` tensors
(see `mathlib.config`).
"""
__all__ = [
    'Vector2', 'Vector3', 'Matrice2', 'Matrice3', 'angle_type_of',
    'MathLibError', 'InvalidArgumentError', 'InvalidLengthError',
    'ComponentIndexError', 'NotSupportedError', 'ZeroMagnitudeError',
]
from .vector2 import Vector2
from .vector3 import Vector3
from .matrice2 import Matrice2
from .matrice3 import Matrice3
from ._impl.vector import angle_type_of
from .errors import (
    MathLibError, InvalidArgumentError, InvalidLengthError,
    ComponentIndexError, NotSupportedError, ZeroMagnitudeError,
)
