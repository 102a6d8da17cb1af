"""
Tensor-related exceptions for keytensor.

This module defines the error taxonomy raised by tensor construction,
indexing, shape transforms and matrix multiplication. Every error is a
caller-input error: operations fail fast at the point of detection and never
return partial or default results.

All errors derive from :class:`TensorError`. Each concrete error also derives
from the closest built-in exception (``ValueError`` or ``IndexError``) so
callers that only know the standard hierarchy can still catch them.
"""

from __future__ import annotations

from typing import Sequence


class TensorError(Exception):
    """
    Base class for all keytensor errors.
    """


class DimensionMismatchError(TensorError, ValueError):
    """
    Raised when a coordinate vector's rank does not match the tensor rank, or
    when matmul contraction dimensions disagree.

    Attributes
    ----------
    expected : int
        The expected rank or extent.
    got : int
        The rank or extent actually supplied.
    """

    def __init__(self, message: str, *, expected: int, got: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.got = got


class OutOfBoundsError(TensorError, IndexError):
    """
    Raised when a coordinate falls outside its axis extent.

    Attributes
    ----------
    axis : int | None
        Axis on which the violation occurred, or None for flat offsets.
    value : int
        The offending coordinate (or flat offset).
    extent : int
        The valid exclusive upper bound.
    """

    def __init__(self, axis: int | None, value: int, extent: int) -> None:
        if axis is None:
            msg = f"Flat offset {value} out of bounds for storage of size {extent}"
        else:
            msg = f"Index {value} out of bounds for axis {axis} with extent {extent}"
        super().__init__(msg)
        self.axis = axis
        self.value = value
        self.extent = extent


class ShapeError(TensorError, ValueError):
    """
    Raised for mismatched shapes in elementwise binary ops, reshapes that
    change the total size, and invalid axis extents.
    """


class InvalidArgumentError(TensorError, ValueError):
    """
    Raised for malformed arguments such as index/value lists of different
    lengths, or invalid configuration values.
    """


class UnsupportedRankError(TensorError, ValueError):
    """
    Raised when an operation is invoked on a tensor rank it does not support.

    Attributes
    ----------
    op : str
        Name of the operation (e.g. "transpose", "matmul").
    rank : int
        Rank of the offending operand.
    supported : tuple[int, ...]
        Ranks the operation accepts for that operand.
    """

    def __init__(
        self, op: str, rank: int, supported: Sequence[int], operand: str = "input"
    ) -> None:
        supported = tuple(supported)
        allowed = " or ".join(str(r) for r in supported)
        super().__init__(
            f"{op} requires the {operand} to have rank {allowed}, got rank {rank}"
        )
        self.op = op
        self.rank = rank
        self.supported = supported
        self.operand = operand
