"""3x3 matrix."""
__all__ = ['Matrice3']
from ._impl import kernels
from ._impl.matrix import MatrixBase
from .typing import ScalarLike
from .vector3 import Vector3


class Matrice3(MatrixBase):
    """3x3 matrix of single-precision cells, indexed by `m[row, col]`.

    `Matrice3 * Vector3` is the matrix-vector product
    `result[i] = sum_j m[i, j] * v[j]`.
    """

    __slots__ = ()
    size = 3
    vector_type = Vector3
    _det = staticmethod(kernels.det3)
    _matvec = staticmethod(kernels.matvec3)

    def __init__(self,
                 n00: ScalarLike = 0., n01: ScalarLike = 0., n02: ScalarLike = 0.,
                 n10: ScalarLike = 0., n11: ScalarLike = 0., n12: ScalarLike = 0.,
                 n20: ScalarLike = 0., n21: ScalarLike = 0., n22: ScalarLike = 0.):
        self._data = self._cells(
            [n00, n01, n02, n10, n11, n12, n20, n21, n22])

    @classmethod
    def from_rows(cls, a: Vector3, b: Vector3, c: Vector3) -> 'Matrice3':
        """Build a matrix whose rows are `a`, `b` and `c`."""
        return cls._from_rows([a, b, c])
