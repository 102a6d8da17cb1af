"""
Arithmetic mixin implementing elementwise binary Tensor operations.

This module declares :class:`TensorMixinArithmetic`, which provides
``add``, ``subtract`` and ``elementwise_mult`` together with the matching
Python operators.

Binary operations are strict: both operands must be tensors of identical
shape. There is no broadcasting and no promotion of scalars to tensors; the
only scalar operation is :meth:`TensorMixinUnary.mult`, reached through
``tensor * scalar``.
"""

from __future__ import annotations

from abc import ABC
from numbers import Real
from typing import Union

from .....domain._errors import ShapeError
from .....domain._tensor import ITensor

Number = Union[int, float]


class TensorMixinArithmetic(ABC):
    """
    Mixin providing shape-checked elementwise binary operations.

    Notes
    -----
    Methods assume the host class provides `.shape`, `.data`, `.neg()`,
    `.mult()` and the `._from_flat(shape, flat)` classmethod.
    """

    @staticmethod
    def _require_tensor(other: object, op: str) -> None:
        """
        Raise TypeError unless `other` is a tensor.
        """
        if not isinstance(other, TensorMixinArithmetic):
            raise TypeError(f"{op} expects a tensor operand, got {type(other)!r}")

    @staticmethod
    def _binary_op_shape_check(a: "ITensor", b: "ITensor", op: str) -> None:
        """
        Validate shape compatibility for binary elementwise operations.

        Raises
        ------
        ShapeError
            If shapes do not match exactly.
        """
        if a.shape != b.shape:
            raise ShapeError(f"Mismatched shape in {op}: {a.shape} vs {b.shape}")

    def add(self, other: "ITensor") -> "ITensor":
        """
        Elementwise sum ``self + other``.

        Raises
        ------
        ShapeError
            If the shapes differ.
        """
        self._require_tensor(other, "add")
        self._binary_op_shape_check(self, other, "add")
        return type(self)._from_flat(self.shape, self.data + other.data)

    def subtract(self, other: "ITensor") -> "ITensor":
        """
        Elementwise difference, computed as ``self.add(other.neg())``.

        Raises
        ------
        ShapeError
            If the shapes differ.
        """
        self._require_tensor(other, "subtract")
        self._binary_op_shape_check(self, other, "subtract")
        return self.add(other.neg())

    def elementwise_mult(self, other: "ITensor") -> "ITensor":
        """
        Hadamard (elementwise) product.

        Raises
        ------
        ShapeError
            If the shapes differ.
        """
        self._require_tensor(other, "elementwise_mult")
        self._binary_op_shape_check(self, other, "elementwise_mult")
        return type(self)._from_flat(self.shape, self.data * other.data)

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self, other: "ITensor") -> "ITensor":
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ITensor") -> "ITensor":
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Union["ITensor", Number]) -> "ITensor":
        """
        ``tensor * scalar`` scales; ``tensor * tensor`` is the Hadamard product.
        """
        if isinstance(other, TensorMixinArithmetic):
            return self.elementwise_mult(other)
        if isinstance(other, Real):
            return self.mult(other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "ITensor":
        if isinstance(other, Real):
            return self.mult(other)
        return NotImplemented
