"""
Small fixed-size kernels.

All kernels work on the storage tensors of vectors (shape `(n,)`) and
matrices (shape `(n, n)`) and return new tensors. They are compiled
with torchscript so that each call is a single graph instead of a
handful of python-level tensor operations.

The `*_legacy` kernels reproduce the 2x2 products of the first version
of the library. They are NOT matrix products and are only reachable
through `Matrice2.mult(..., mode='legacy')`.
"""
import torch
from torch import Tensor


@torch.jit.script
def dot(a: Tensor, b: Tensor) -> Tensor:
    return (a * b).sum()


@torch.jit.script
def cross2(a: Tensor, b: Tensor) -> Tensor:
    return a[0] * b[1] - a[1] * b[0]


@torch.jit.script
def cross3(a: Tensor, b: Tensor) -> Tensor:
    return torch.stack([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])


@torch.jit.script
def det2(a: Tensor) -> Tensor:
    dt = a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]
    return dt


@torch.jit.script
def det3(a: Tensor) -> Tensor:
    dt = a[0, 0] * (a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1]) + \
         a[0, 1] * (a[1, 2] * a[2, 0] - a[1, 0] * a[2, 2]) + \
         a[0, 2] * (a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0])
    return dt


@torch.jit.script
def matvec2(A: Tensor, v: Tensor) -> Tensor:
    return torch.stack([
        A[0, 0] * v[0] + A[0, 1] * v[1],
        A[1, 0] * v[0] + A[1, 1] * v[1],
    ])


@torch.jit.script
def matvec3(A: Tensor, v: Tensor) -> Tensor:
    return torch.stack([
        A[0, 0] * v[0] + A[0, 1] * v[1] + A[0, 2] * v[2],
        A[1, 0] * v[0] + A[1, 1] * v[1] + A[1, 2] * v[2],
        A[2, 0] * v[0] + A[2, 1] * v[1] + A[2, 2] * v[2],
    ])


@torch.jit.script
def matmul2_legacy(a: Tensor, b: Tensor) -> Tensor:
    return torch.stack([
        a[0, 0] * b[0, 0] + a[0, 1] * b[1, 0],
        a[1, 0] * b[0, 0] + a[1, 1] * b[1, 0],
        a[1, 0] * b[0, 1] + a[0, 1] * b[1, 1],
        a[1, 0] * b[0, 1] + a[1, 1] * b[1, 1],
    ]).reshape([2, 2])


@torch.jit.script
def matvec2_legacy(a: Tensor, v: Tensor) -> Tensor:
    return torch.stack([
        a[0, 0] * v[0],
        a[1, 0] * v[1],
        a[1, 0] * v[0],
        a[1, 0] * v[1],
    ]).reshape([2, 2])


@torch.jit.script
def same_values(a: Tensor, b: Tensor) -> bool:
    # NaN compares equal to NaN
    same = (a == b) | (torch.isnan(a) & torch.isnan(b))
    return bool(same.all())


@torch.jit.script
def off_diagonal(a: Tensor) -> Tensor:
    mask = torch.eye(a.shape[0], dtype=torch.bool, device=a.device)
    return a.masked_select(mask.logical_not())


@torch.jit.script
def is_diagonal(a: Tensor) -> bool:
    return bool((off_diagonal(a) == 0).all())


@torch.jit.script
def is_symmetric(a: Tensor) -> bool:
    return same_values(off_diagonal(a), off_diagonal(a.transpose(0, 1)))


@torch.jit.script
def is_antisymmetric(a: Tensor) -> bool:
    # the diagonal of an antisymmetric matrix must be zero
    return bool((a == -a.transpose(0, 1)).all())
