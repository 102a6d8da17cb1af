"""
Tensor shape, indexing, and reshape mixin (NumPy CPU backend).

This module defines `TensorShapeAndIndexingMixin`, which implements the
row-major indexing scheme shared by every coordinate-based operation, plus
the shape helpers used during construction.

Design notes
------------
- Storage is flat and row-major: the last axis varies fastest.
- `linear_index` is the single linearization routine. `Tensor.index`,
  transpose and sparse construction all go through it, so they cannot
  disagree on layout.
- To avoid circular imports, new tensors are constructed via
  `type(self)._from_flat(...)` rather than importing `Tensor`.
"""

from __future__ import annotations

import operator
from abc import ABC
from typing import Any, Sequence

import numpy as np

from ...domain._errors import DimensionMismatchError, OutOfBoundsError, ShapeError
from ...domain._tensor import ITensor

MAX_NUMEL = np.iinfo(np.intp).max // np.dtype(np.float64).itemsize
"""Largest element count whose float64 byte size NumPy can address."""


def normalize_shape(shape_like: Any) -> tuple[int, ...]:
    """
    Convert a shape-like sequence into a tuple of non-negative ints.

    Raises
    ------
    ShapeError
        If `shape_like` is not a sequence of integers, any extent is
        negative, or the storage size for the shape is not addressable.
    """
    try:
        shape = tuple(operator.index(d) for d in shape_like)
    except TypeError as e:
        raise ShapeError(
            f"Shape must be a sequence of integers, got {shape_like!r}"
        ) from e
    for axis, d in enumerate(shape):
        if d < 0:
            raise ShapeError(f"Negative extent {d} on axis {axis} in shape {shape}")
    if numel_of(shape) > MAX_NUMEL:
        raise ShapeError(
            f"Shape {shape} overflows the storage size limit "
            f"({numel_of(shape)} elements > {MAX_NUMEL})"
        )
    return shape


def numel_of(shape: Sequence[int]) -> int:
    """Return the product of the extents in `shape` (1 for rank 0)."""
    n = 1
    for d in shape:
        n *= d
    return n


def row_major_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """Return the element stride of each axis for row-major storage."""
    strides = [0] * len(shape)
    stride = 1
    for axis in range(len(shape) - 1, -1, -1):
        strides[axis] = stride
        stride *= shape[axis]
    return tuple(strides)


def linear_index(shape: Sequence[int], coords: Sequence[int]) -> int:
    """
    Map a coordinate vector to its flat row-major offset.

    Axes are consumed from last to first; the stride starts at 1 and is
    multiplied by each consumed extent.

    Raises
    ------
    DimensionMismatchError
        If ``len(coords) != len(shape)``.
    OutOfBoundsError
        If ``not 0 <= coords[i] < shape[i]`` for some axis.
    """
    if len(coords) != len(shape):
        raise DimensionMismatchError(
            f"Mismatched dims in index: tensor has rank {len(shape)}, "
            f"got {len(coords)} coordinates",
            expected=len(shape),
            got=len(coords),
        )
    offset = 0
    stride = 1
    for axis in range(len(shape) - 1, -1, -1):
        c = operator.index(coords[axis])
        if c < 0 or c >= shape[axis]:
            raise OutOfBoundsError(axis, c, shape[axis])
        offset += c * stride
        stride *= shape[axis]
    return offset


class TensorShapeAndIndexingMixin(ABC):
    """
    Indexing and reshape operations for the concrete Tensor implementation.

    Notes
    -----
    Methods assume the host class provides:
        - `.shape`, `.data`, `.numel()`
        - `._from_flat(shape, flat)` classmethod
    """

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Row-major element strides, e.g. ``(3, 1)`` for shape ``(2, 3)``.
        """
        return row_major_strides(self.shape)

    def index(self, coords: Sequence[int]) -> int:
        """
        Map a per-axis coordinate vector to a flat offset into storage.

        Parameters
        ----------
        coords : Sequence[int]
            One coordinate per axis.

        Returns
        -------
        int
            Offset in ``range(self.numel())``.

        Raises
        ------
        DimensionMismatchError
            If ``len(coords)`` differs from the tensor rank.
        OutOfBoundsError
            If any coordinate lies outside ``[0, shape[i])``.
        """
        return linear_index(self.shape, tuple(coords))

    def unravel_index(self, offset: int) -> tuple[int, ...]:
        """
        Inverse of `index`: map a flat offset back to its coordinates.

        Raises
        ------
        OutOfBoundsError
            If `offset` lies outside ``[0, numel)``.
        """
        offset = operator.index(offset)
        n = self.numel()
        if offset < 0 or offset >= n:
            raise OutOfBoundsError(None, offset, n)

        shape = self.shape
        coords = [0] * len(shape)
        for axis in range(len(shape) - 1, -1, -1):
            offset, coords[axis] = divmod(offset, shape[axis])
        return tuple(coords)

    def __getitem__(self, coords: Any) -> float:
        """
        Return the element at `coords` as a Python float.

        A bare integer is accepted as the coordinate of a rank-1 tensor;
        ``t[()]`` reads a rank-0 tensor.
        """
        if not isinstance(coords, tuple):
            coords = (coords,)
        return float(self.data[self.index(coords)])

    def reshape(self, new_shape: Sequence[int]) -> "ITensor":
        """
        Return a tensor with `new_shape` holding a copy of this tensor's flat
        data in unchanged order.

        Raises
        ------
        ShapeError
            If ``product(new_shape) != product(shape)`` or an extent is
            negative.
        """
        new_shape = normalize_shape(new_shape)
        if numel_of(new_shape) != self.numel():
            raise ShapeError(
                f"Mismatched dims in reshape: cannot reshape {self.shape} "
                f"({self.numel()} elements) to {new_shape} "
                f"({numel_of(new_shape)} elements)"
            )
        return type(self)._from_flat(new_shape, self.data.copy())
