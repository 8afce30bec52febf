"""
Shared implementation of fixed-size vectors.

`VectorBase` stores its components in a 1D tensor of length `size` and
implements everything that does not depend on the dimension. Concrete
classes (`Vector2`, `Vector3`) only add their constructor, named
component accessors and the cross product.
"""
import numbers
import torch
from torch import Tensor
from warnings import warn
from .. import config
from ..errors import InvalidArgumentError, InvalidLengthError, ZeroMagnitudeError
from ..typing import ArrayLike, ScalarLike
from ..utils import as_components, check_index, zeros
from . import kernels


def angle_type_of(cosine: ScalarLike, tol: float = 0.) -> int:
    """Classify the sign of a cosine.

    Parameters
    ----------
    cosine : `float`
        Cosine of an angle (see `cosine_between`).
    tol : `float`, default=0
        Values with `abs(cosine) <= tol` are considered zero.

    Returns
    -------
    kind : `{0, 1, -1}`
        * `0`  : right angle
        * `1`  : acute angle
        * `-1` : obtuse angle

    """
    cosine = float(cosine)
    if abs(cosine) <= tol:
        return 0
    if cosine < 0:
        return -1
    return 1


def component_property(index: int, name: str):
    """Read/write property bound to one component."""

    def getter(self) -> float:
        return self._data[index].item()

    def setter(self, value: ScalarLike):
        self._data[index] = float(value)

    return property(getter, setter, doc='Component `{}`.'.format(name))


class VectorBase:
    """Vector with `size` single-precision components."""

    __slots__ = ('_data',)
    size: int = 0
    angle_type_of = staticmethod(angle_type_of)

    @classmethod
    def _wrap(cls, data: Tensor):
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_array(cls, values: ArrayLike):
        """Build a vector from an array of exactly `size` values.

        Raises
        ------
        InvalidArgumentError
            If `values` is None or not numeric.
        InvalidLengthError
            If `values` does not hold exactly `size` values.
        """
        return cls._wrap(as_components(values, (cls.size,), cls.__name__))

    @classmethod
    def from_vector(cls, vector: 'VectorBase'):
        """Convert another vector.

        Missing components are set to zero and extra components are
        dropped, so that `Vector3.from_vector(Vector2(1, 2))` is
        `Vector3(1, 2, 0)`.

        Raises
        ------
        InvalidArgumentError
            If `vector` is None or not a vector.
        """
        if vector is None:
            raise InvalidArgumentError(
                '{}: cannot convert from None.'.format(cls.__name__))
        if not isinstance(vector, VectorBase):
            raise InvalidArgumentError(
                '{}: cannot convert from {}.'.format(
                    cls.__name__, type(vector).__name__))
        data = zeros(cls.size)
        n = min(cls.size, vector.size)
        data[:n] = vector._data[:n]
        return cls._wrap(data)

    @classmethod
    def zero(cls):
        return cls._wrap(zeros(cls.size))

    @classmethod
    def dot_components(cls, *components: ScalarLike) -> float:
        """Sum of squares of raw components."""
        if len(components) != cls.size:
            raise InvalidLengthError(
                '{}: expected {} components, got {}.'.format(
                    cls.__name__, cls.size, len(components)))
        data = torch.tensor([float(c) for c in components], **config.backend)
        return kernels.dot(data, data).item()

    # ------------------------------------------------------------------
    #   Components
    # ------------------------------------------------------------------

    def __getitem__(self, index) -> float:
        index = check_index(index, self.size, type(self).__name__)
        return self._data[index].item()

    def __setitem__(self, index, value: ScalarLike):
        index = check_index(index, self.size, type(self).__name__)
        self._data[index] = float(value)

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self.tolist())

    def tolist(self):
        return self._data.tolist()

    def as_tensor(self) -> Tensor:
        """Copy of the storage tensor."""
        return self._data.clone()

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__, ', '.join(map(repr, self.tolist())))

    # ------------------------------------------------------------------
    #   Geometry
    # ------------------------------------------------------------------

    def dot(self, other=None) -> float:
        """Dot product `self . other` (or `self . self` if `other` is None)."""
        other = self if other is None else self._check_operand(other)
        return kernels.dot(self._data, other._data).item()

    def length(self) -> float:
        """Euclidean magnitude."""
        return torch.sqrt(kernels.dot(self._data, self._data)).item()

    @property
    def magnitude(self) -> float:
        return self.length()

    def normalize(self):
        """Unit vector with the same direction.

        Raises
        ------
        ZeroMagnitudeError
            If the vector has zero magnitude.
        """
        norm = torch.sqrt(kernels.dot(self._data, self._data))
        if norm == 0:
            raise ZeroMagnitudeError(
                '{}: cannot normalize a zero-length vector.'
                .format(type(self).__name__))
        return self._wrap(self._data / norm)

    @property
    def normalized(self):
        return self.normalize()

    def sqrt_dot(self, other) -> float:
        """Square root of the dot product of two vectors.

        This is *not* a distance: `sqrt_dot(a, a)` is the magnitude of
        `a`, but for `a != b` the result has no simple geometric meaning.
        If the dot product is negative, the result is NaN.
        """
        self._check_operand(other)
        ab = kernels.dot(self._data, other._data)
        if ab < 0:
            warn('`sqrt_dot` of vectors with a negative dot product '
                 'is NaN', RuntimeWarning)
        return torch.sqrt(ab).item()

    def distance(self, other) -> float:
        """Euclidean distance between two points."""
        self._check_operand(other)
        diff = other._data - self._data
        return torch.sqrt(kernels.dot(diff, diff)).item()

    def direction(self, other):
        """Displacement `other - self` (not normalized)."""
        self._check_operand(other)
        return other - self

    def cosine_between(self, other) -> float:
        """Cosine of the angle between two vectors.

        Raises
        ------
        ZeroMagnitudeError
            If either vector has zero magnitude.
        """
        self._check_operand(other)
        norm = (torch.sqrt(kernels.dot(self._data, self._data)) *
                torch.sqrt(kernels.dot(other._data, other._data)))
        if norm == 0:
            raise ZeroMagnitudeError(
                '{}: the angle with a zero-length vector is undefined.'
                .format(type(self).__name__))
        return (kernels.dot(self._data, other._data) / norm).item()

    def angle_type(self, other, tol: float = 0.) -> int:
        """Right (0), acute (1) or obtuse (-1) angle between two vectors."""
        return angle_type_of(self.cosine_between(other), tol)

    def project(self, onto):
        r"""Projection of `self` onto `onto`: $\frac{a \cdot b}{b \cdot b} b$

        Raises
        ------
        ZeroMagnitudeError
            If `onto` has zero magnitude.
        """
        self._check_operand(onto)
        bb = kernels.dot(onto._data, onto._data)
        if bb == 0:
            raise ZeroMagnitudeError(
                '{}: cannot project onto a zero-length vector.'
                .format(type(self).__name__))
        return self._wrap(onto._data * (kernels.dot(self._data, onto._data) / bb))

    def reject(self, onto):
        """Component of `self` perpendicular to `onto`."""
        return self - self.project(onto)

    # ------------------------------------------------------------------
    #   Operators
    # ------------------------------------------------------------------

    def _same_type(self, other) -> bool:
        return type(other) is type(self)

    def _check_operand(self, other):
        if not self._same_type(other):
            raise InvalidArgumentError(
                '{}: expected a {} operand, got {}.'.format(
                    type(self).__name__, type(self).__name__,
                    type(other).__name__))
        return other

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

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._wrap(self._data * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError(
                '{}: division by zero.'.format(type(self).__name__))
        return self._wrap(self._data / float(scalar))

    def __eq__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return kernels.same_values(self._data, other._data)

    def __ne__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return not kernels.same_values(self._data, other._data)

    __hash__ = None
