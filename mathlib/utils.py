"""Helpers that convert user inputs into component storage."""
__all__ = ['as_components', 'is_ragged', 'zeros', 'check_index', 'check_cell']
import operator
import torch
from torch import Tensor
from typing import Sequence, Tuple
from . import config
from .errors import ComponentIndexError, InvalidArgumentError, InvalidLengthError
from .typing import ArrayLike


def as_components(values: ArrayLike, shape: Tuple[int, ...], name: str = 'array') -> Tensor:
    """Copy an array-like into a new storage tensor of a given shape.

    The result never shares memory with `values`, even when `values` is
    already a tensor with the right dtype and device.

    Parameters
    ----------
    values : `sequence[float] or sequence[sequence[float]] or tensor`
        Input values.
    shape : `tuple[int]`
        Expected shape.
    name : `str`
        Name used in error messages.

    Returns
    -------
    data : `tensor`
        Owned tensor with shape `shape`, on the configured backend.

    Raises
    ------
    InvalidArgumentError
        If `values` is None or holds non-numeric values.
    InvalidLengthError
        If `values` does not have shape `shape`.

    """
    if values is None:
        raise InvalidArgumentError('{}: cannot build from None.'.format(name))
    try:
        data = torch.as_tensor(values, **config.backend)
    except (TypeError, ValueError) as e:
        if is_ragged(values):
            raise InvalidLengthError(
                '{}: expected shape {}, got a ragged input.'.format(
                    name, tuple(shape))) from e
        raise InvalidArgumentError(
            '{}: expected numeric values ({}).'.format(name, e)) from e
    if tuple(data.shape) != tuple(shape):
        raise InvalidLengthError(
            '{}: expected shape {}, got {}.'.format(
                name, tuple(shape), tuple(data.shape)))
    return data.clone()


def is_ragged(values) -> bool:
    """True if nested sequences at the same depth have different lengths."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        return False
    subs = [v for v in values
            if isinstance(v, Sequence) and not isinstance(v, (str, bytes))]
    if not subs:
        return False
    if len(subs) != len(values) or len(set(map(len, subs))) > 1:
        return True
    return any(is_ragged(v) for v in subs)


def zeros(*shape: int) -> Tensor:
    """Zero-filled storage tensor on the configured backend."""
    return torch.zeros(shape, **config.backend)


def check_index(index, size: int, name: str = 'vector') -> int:
    """Validate a component index.

    Only indices in `[0, size)` are valid: negative indices are errors.
    """
    index = operator.index(index)
    if not 0 <= index < size:
        raise ComponentIndexError(
            '{}: index {} out of range [0, {}).'.format(name, index, size))
    return index


def check_cell(index, size: int, name: str = 'matrix') -> Tuple[int, int]:
    """Validate a `(row, col)` cell index."""
    if not isinstance(index, tuple) or len(index) != 2:
        raise ComponentIndexError(
            '{}: cells are indexed by a (row, col) pair, got {!r}.'
            .format(name, index))
    row, col = index
    return check_index(row, size, name), check_index(col, size, name)
