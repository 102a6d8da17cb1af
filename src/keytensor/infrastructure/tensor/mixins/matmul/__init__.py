"""
Matmul mixins and rank-specific implementations for Tensor operations.

This package aggregates the matrix-multiplication API and its concrete
control-path implementations:

- ``matmul`` / ``__matmul__`` : rank-2 and batched rank-3 blocked GEMM

Implementation modules are imported for their *side effects*: registering
control paths with the tensor control-path manager.

Public API
----------
Only the base mixin class is exported:

- ``TensorMixinMatmul``
"""

from ._tensor_matmul import *
from ._base import TensorMixinMatmul

__all__ = [
    TensorMixinMatmul.__name__,
]
