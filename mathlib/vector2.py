"""Two-dimensional vector."""
__all__ = ['Vector2']
import torch
from . import config
from ._impl import kernels
from ._impl.vector import VectorBase, component_property
from .typing import ScalarLike


class Vector2(VectorBase):
    """2D vector with single-precision components `x` and `y`.

    Examples
    --------
    >>> Vector2(3, 4).magnitude
    5.0
    >>> Vector2.from_array([1, 2])
    Vector2(1.0, 2.0)
    """

    __slots__ = ()
    size = 2

    x = component_property(0, 'x')
    y = component_property(1, 'y')

    def __init__(self, x: ScalarLike = 0., y: ScalarLike = 0.):
        self._data = torch.tensor([float(x), float(y)], **config.backend)

    def cross(self, other: 'Vector2') -> float:
        """z-component of the cross product of the two vectors embedded in 3D."""
        self._check_operand(other)
        return kernels.cross2(self._data, other._data).item()
