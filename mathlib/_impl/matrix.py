"""
Shared implementation of small square matrices.

`MatrixBase` stores its cells in a `(size, size)` tensor. Concrete
classes set `size`, the vector type they multiply, and the fixed-size
kernels used for determinants and matrix-vector products.
"""
import numbers
import torch
from torch import Tensor
from .. import config
from ..errors import InvalidArgumentError, NotSupportedError
from ..typing import ArrayLike, MultMode, ScalarLike
from ..utils import as_components, check_cell, check_index, zeros
from . import kernels


class MatrixBase:
    """Square matrix with `size * size` single-precision cells."""

    __slots__ = ('_data',)
    size: int = 0
    vector_type: type = None
    _det = None
    _matvec = None

    @classmethod
    def _wrap(cls, data: Tensor):
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def _cells(cls, cells) -> Tensor:
        data = torch.tensor([float(c) for c in cells], **config.backend)
        return data.reshape(cls.size, cls.size)

    @classmethod
    def from_buffer(cls, buffer: ArrayLike):
        """Build a matrix from a `(size, size)` array of cells.

        The buffer is copied: later changes to `buffer` do not affect
        the matrix, and vice versa.

        Raises
        ------
        InvalidArgumentError
            If `buffer` is None or not numeric.
        InvalidLengthError
            If `buffer` does not have shape `(size, size)`.
        """
        return cls._wrap(as_components(buffer, (cls.size, cls.size), cls.__name__))

    @classmethod
    def _from_rows(cls, rows):
        for row in rows:
            if row is None:
                raise InvalidArgumentError(
                    '{}: rows cannot be None.'.format(cls.__name__))
            if not isinstance(row, cls.vector_type):
                raise InvalidArgumentError(
                    '{}: rows must be {}, got {}.'.format(
                        cls.__name__, cls.vector_type.__name__,
                        type(row).__name__))
        return cls._wrap(torch.stack([row._data for row in rows]))

    @classmethod
    def zeros(cls):
        return cls._wrap(zeros(cls.size, cls.size))

    # ------------------------------------------------------------------
    #   Cells
    # ------------------------------------------------------------------

    def __getitem__(self, index) -> float:
        row, col = check_cell(index, self.size, type(self).__name__)
        return self._data[row, col].item()

    def __setitem__(self, index, value: ScalarLike):
        row, col = check_cell(index, self.size, type(self).__name__)
        self._data[row, col] = float(value)

    def __iter__(self):
        """Iterate over cells, row by row."""
        return iter(self._data.flatten().tolist())

    def tolist(self):
        return self._data.tolist()

    def as_tensor(self) -> Tensor:
        """Copy of the storage tensor."""
        return self._data.clone()

    def row(self, index: int):
        """Copy of one row, as a vector."""
        index = check_index(index, self.size, type(self).__name__)
        return self.vector_type._wrap(self._data[index].clone())

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__, ', '.join(map(repr, self)))

    # ------------------------------------------------------------------
    #   Structure
    # ------------------------------------------------------------------

    @property
    def zero(self):
        """New zero matrix (a fresh instance on every access)."""
        return self.zeros()

    def transpose(self):
        return self._wrap(self._data.transpose(0, 1).clone())

    @property
    def transposed(self):
        return self.transpose()

    def diagonal(self) -> bool:
        """True if all off-diagonal cells are zero."""
        return kernels.is_diagonal(self._data)

    @property
    def is_diagonal(self) -> bool:
        return self.diagonal()

    def symmetric(self) -> bool:
        """True if `m[i, j] == m[j, i]` for all off-diagonal cells (NaN equals NaN)."""
        return kernels.is_symmetric(self._data)

    @property
    def is_symmetric(self) -> bool:
        return self.symmetric()

    def antisymmetric(self) -> bool:
        """True if `m[i, j] == -m[j, i]` for all cells.

        This implies that all diagonal cells are zero.
        """
        return kernels.is_antisymmetric(self._data)

    @property
    def is_antisymmetric(self) -> bool:
        return self.antisymmetric()

    def det(self) -> float:
        return self._det(self._data).item()

    @property
    def determinant(self) -> float:
        return self.det()

    # ------------------------------------------------------------------
    #   Arithmetic
    # ------------------------------------------------------------------

    def add(self, other):
        return self + other

    def sub(self, other):
        return self - other

    def mult(self, other, mode: MultMode = 'standard'):
        """Multiply by a matrix, a vector or a scalar.

        Parameters
        ----------
        other : `matrix or vector or float`
            Right operand.
        mode : `{'standard'}`
            Multiplication rule. Only `'standard'` (true matrix product)
            is available for this type.

        Returns
        -------
        product : `matrix or vector`

        """
        if mode != 'standard':
            raise ValueError('Unknown multiplication mode {}.'.format(mode))
        return self * other

    def div(self, other):
        """Matrix division. Not supported."""
        raise NotSupportedError(
            '{}: matrix division is not supported.'.format(type(self).__name__))

    def _same_type(self, other) -> bool:
        return type(other) is type(self)

    def __add__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return self._wrap(self._data + other._data)

    def __sub__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return self._wrap(self._data - other._data)

    def __neg__(self):
        return self._wrap(-self._data)

    def __mul__(self, other):
        if self._same_type(other):
            return self._wrap(torch.matmul(self._data, other._data))
        if isinstance(other, self.vector_type):
            return other._wrap(self._matvec(self._data, other._data))
        if isinstance(other, numbers.Real):
            return self._wrap(self._data * float(other))
        return NotImplemented

    def __rmul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._wrap(self._data * float(scalar))

    def __matmul__(self, other):
        if isinstance(other, numbers.Real):
            return NotImplemented
        return self.__mul__(other)

    def __eq__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return kernels.same_values(self._data, other._data)

    def __ne__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return not kernels.same_values(self._data, other._data)

    __hash__ = None
