"""
## Overview

Three-dimensional vector with the usual geometric queries.

Most operations are defined once, as instance methods, and can be used
either way:

```python
a.dot(b)           # instance call
Vector3.dot(a, b)  # "static" call, same result
```

Operations that take a single vector and return a scalar are also
exposed as properties (`magnitude`, `normalized`).

Matrix-vector products (`Matrice3 * Vector3`) are implemented by
`Matrice3`.

---
"""
__all__ = ['Vector3']
import torch
from . import config
from ._impl import kernels
from ._impl.vector import VectorBase, component_property
from .typing import ScalarLike


class Vector3(VectorBase):
    """3D vector with single-precision components `x`, `y` and `z`.

    Examples
    --------
    >>> v = Vector3(3, 4, 0)
    >>> v.magnitude
    5.0
    >>> v[2] = 12
    >>> v.magnitude
    13.0
    """

    __slots__ = ()
    size = 3

    x = component_property(0, 'x')
    y = component_property(1, 'y')
    z = component_property(2, 'z')

    def __init__(self, x: ScalarLike = 0., y: ScalarLike = 0., z: ScalarLike = 0.):
        self._data = torch.tensor([float(x), float(y), float(z)], **config.backend)

    # Unit directions: y up, x right, z forward

    @classmethod
    def up(cls):
        return cls(0, 1, 0)

    @classmethod
    def down(cls):
        return cls(0, -1, 0)

    @classmethod
    def left(cls):
        return cls(-1, 0, 0)

    @classmethod
    def right(cls):
        return cls(1, 0, 0)

    @classmethod
    def forward(cls):
        return cls(0, 0, 1)

    @classmethod
    def backward(cls):
        return cls(0, 0, -1)

    @classmethod
    def one(cls):
        return cls(1, 1, 1)

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Right-handed cross product `self x other`.

        Parameters
        ----------
        other : `Vector3`
            Right operand.

        Returns
        -------
        cross : `Vector3`
            Vector orthogonal to both operands, with magnitude
            `|self| |other| sin(angle)`.

        """
        self._check_operand(other)
        return self._wrap(kernels.cross3(self._data, other._data))
