"""
## Overview

Storage settings shared by all vector and matrix types.

Components are stored in `torch` tensors. The data type is fixed to
single precision. The device defaults to the CPU and can be changed with
the `MATHLIB_DEVICE` environment variable (e.g., `MATHLIB_DEVICE=cuda:0`),
which is read once, at import time.

---
"""
__all__ = ['dtype', 'device', 'backend']
import os
import torch

dtype = torch.float32
device = torch.device(os.environ.get('MATHLIB_DEVICE', 'cpu'))
backend = dict(dtype=dtype, device=device)
