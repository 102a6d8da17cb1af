"""
Memory-layout mixins and rank-specific implementations for Tensor operations.

This package aggregates structural Tensor operations and their concrete
control-path implementations:

- ``transpose`` / ``T`` : rank-2 matrix transpose and batched rank-3 transpose

Design notes
------------
- Implementation modules are imported for their *side effects*: registering
  control paths with the tensor control-path manager.
- These modules are not part of the public API and should not be imported
  directly by users.

Public API
----------
Only the base mixin class is exported:

- ``TensorMixinMemory``
"""

from ._tensor_transpose import *
from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
