"""
Unary mixins for Tensor operations.

This package provides the elementwise unary and scalar Tensor operations:

- ``neg`` / ``__neg__``  : elementwise negation
- ``reciprocal``         : elementwise ``1 / x``
- ``mult``               : multiply by a scalar
- ``pow`` / ``__pow__``  : elementwise power
- ``relu``               : elementwise ``max(x, 0)``
- ``binarilize``         : elementwise ``x > 0`` as 1.0 / 0.0
- ``exp``                : elementwise exponential

Public API
----------
Only the mixin class is exported:

- ``TensorMixinUnary``
"""

from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
