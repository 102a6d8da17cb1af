"""
Arithmetic mixins for Tensor operations.

This package provides the shape-checked elementwise binary operations:

- addition       (``add`` / ``__add__``)
- subtraction    (``subtract`` / ``__sub__``)
- Hadamard product (``elementwise_mult`` / ``__mul__`` with a tensor)

Public API
----------
Only the mixin class is exported:

- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
