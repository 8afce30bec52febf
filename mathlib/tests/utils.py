import torch
from mathlib import Vector2, Vector3, Matrice2, Matrice3


def get_test_seeds():
    return [0, 1, 2, 3]


def init_seed(seed):
    return torch.Generator().manual_seed(seed)


def randn(*shape, generator=None):
    return torch.randn(shape, generator=generator, dtype=torch.float32)


def rand_vector2(generator=None):
    return Vector2.from_array(randn(2, generator=generator))


def rand_vector3(generator=None):
    return Vector3.from_array(randn(3, generator=generator))


def rand_matrice2(generator=None):
    return Matrice2.from_buffer(randn(2, 2, generator=generator))


def rand_matrice3(generator=None):
    return Matrice3.from_buffer(randn(3, 3, generator=generator))


def allclose(a, b, **kwargs):
    """Compare two vectors/matrices (or a vector and a tensor)."""
    a = a.as_tensor() if hasattr(a, 'as_tensor') else torch.as_tensor(a)
    b = b.as_tensor() if hasattr(b, 'as_tensor') else torch.as_tensor(b)
    return torch.allclose(a.cpu().float(), b.cpu().float(), **kwargs)
