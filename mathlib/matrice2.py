"""
## Overview

2x2 matrix.

Products use the standard (row-by-column) rule. The first version of
this library shipped with different product formulas, which are kept
for compatibility and can be requested explicitly:

```python
Matrice2.mult(a, b)                 # true matrix product, same as a * b
Matrice2.mult(a, b, mode='legacy')  # historical formula
```

The legacy matrix-vector product returns a `Matrice2`, not a `Vector2`.

---
"""
__all__ = ['Matrice2']
from ._impl import kernels
from ._impl.matrix import MatrixBase
from .typing import MultMode, ScalarLike
from .vector2 import Vector2


class Matrice2(MatrixBase):
    """2x2 matrix of single-precision cells, indexed by `m[row, col]`.

    Examples
    --------
    >>> Matrice2(1, 0, 0, 1) + Matrice2(2, 3, 4, 5)
    Matrice2(3.0, 3.0, 4.0, 6.0)
    >>> Matrice2(1, 2, 3, 4).determinant
    -2.0
    """

    __slots__ = ()
    size = 2
    vector_type = Vector2
    _det = staticmethod(kernels.det2)
    _matvec = staticmethod(kernels.matvec2)

    def __init__(self, n00: ScalarLike = 0., n01: ScalarLike = 0.,
                 n10: ScalarLike = 0., n11: ScalarLike = 0.):
        self._data = self._cells([n00, n01, n10, n11])

    @classmethod
    def from_rows(cls, a: Vector2, b: Vector2) -> 'Matrice2':
        """Build a matrix whose rows are `a` and `b`."""
        return cls._from_rows([a, b])

    def mult(self, other, mode: MultMode = 'standard'):
        """Multiply by a matrix, a vector or a scalar.

        Parameters
        ----------
        other : `Matrice2 or Vector2 or float`
            Right operand.
        mode : `{'standard', 'legacy'}`, default='standard'
            * `'standard'` : true matrix product (same as `self * other`).
            * `'legacy'`   : formulas of the first version of the library.
              For matrices:
              `(a00*b00 + a01*b10, a10*b00 + a11*b10,
                a10*b01 + a01*b11, a10*b01 + a11*b11)`.
              For vectors, returns the *matrix*
              `(a00*x, a10*y, a10*x, a10*y)`.
              Scalars are multiplied component-wise in both modes.

        Returns
        -------
        product : `Matrice2 or Vector2`

        """
        if mode == 'legacy':
            if isinstance(other, Matrice2):
                return self._wrap(kernels.matmul2_legacy(self._data, other._data))
            if isinstance(other, Vector2):
                return self._wrap(kernels.matvec2_legacy(self._data, other._data))
            mode = 'standard'
        return super().mult(other, mode)
