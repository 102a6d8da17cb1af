"""
Unary operation mixin implementing elementwise Tensor transforms.

This module declares :class:`TensorMixinUnary`, which provides the
elementwise unary and scalar operations of the tensor API: ``neg``,
``reciprocal``, ``mult``, ``pow``, ``relu``, ``binarilize`` and ``exp``.

Every operation is a single pass over the flat storage and returns a freshly
allocated tensor of the same shape; operands are never modified.

Floating-point edge cases follow IEEE-754 (e.g. ``reciprocal`` of ``0.0`` is
``inf``); NumPy's floating-point warnings are suppressed for these ops.
"""

from __future__ import annotations

from abc import ABC
from numbers import Real
from typing import Any, Callable, Union

import numpy as np

from .....domain._tensor import ITensor

Number = Union[int, float]


class TensorMixinUnary(ABC):
    """
    Mixin providing elementwise unary and scalar tensor operations.

    Notes
    -----
    Methods assume the host class provides `.shape`, `.data` and the
    `._from_flat(shape, flat)` classmethod.
    """

    def _map_flat(self, fn: Callable[[np.ndarray], Any]) -> "ITensor":
        """Apply `fn` to the flat storage and wrap the result in a new tensor."""
        return type(self)._from_flat(self.shape, np.asarray(fn(self.data)))

    def neg(self) -> "ITensor":
        """
        Elementwise negation, ``-x``.
        """
        return self._map_flat(np.negative)

    def reciprocal(self) -> "ITensor":
        """
        Elementwise reciprocal, ``1 / x``.

        Zero elements map to ``inf`` (signed like the zero); no error is
        raised.
        """
        with np.errstate(divide="ignore"):
            return self._map_flat(np.reciprocal)

    def mult(self, scalar: Number) -> "ITensor":
        """
        Multiply every element by `scalar`.

        Raises
        ------
        TypeError
            If `scalar` is not a real number.
        """
        if not isinstance(scalar, Real):
            raise TypeError(f"mult expects a real scalar, got {type(scalar)!r}")
        s = float(scalar)
        with np.errstate(over="ignore", invalid="ignore"):
            return self._map_flat(lambda x: x * s)

    def pow(self, exponent: Number) -> "ITensor":
        """
        Raise every element to `exponent`.

        Results with no real value (e.g. a negative base with a fractional
        exponent) are ``nan``, as with C ``pow``.
        """
        if not isinstance(exponent, Real):
            raise TypeError(f"pow expects a real exponent, got {type(exponent)!r}")
        e = float(exponent)
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            return self._map_flat(lambda x: np.power(x, e))

    def relu(self) -> "ITensor":
        """
        Elementwise rectifier: ``x if x > 0 else 0``.
        """
        return self._map_flat(lambda x: np.where(x > 0, x, 0.0))

    def binarilize(self) -> "ITensor":
        """
        Elementwise step: ``1 if x > 0 else 0``.

        The comparison is strict, so exactly-zero inputs map to 0.
        """
        return self._map_flat(lambda x: (x > 0).astype(np.float64))

    def exp(self) -> "ITensor":
        """
        Elementwise natural exponential. Overflow saturates to ``inf``.
        """
        with np.errstate(over="ignore"):
            return self._map_flat(np.exp)

    # ----------------------------
    # Unary operators
    # ----------------------------
    def __neg__(self) -> "ITensor":
        return self.neg()

    def __pow__(self, exponent: Number) -> "ITensor":
        if not isinstance(exponent, Real):
            return NotImplemented
        return self.pow(exponent)
