"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor` class that satisfies the
domain-level `ITensor` protocol. Each tensor owns one flat, contiguous,
row-major float64 NumPy array and an immutable shape tuple.

Design notes
------------
- Value semantics: every operation allocates a new result; no tensor ever
  shares its backing store with another. The `data` property hands out a
  read-only view so callers cannot mutate storage behind the tensor's back.
- Operations are grouped into mixins (indexing/reshape, unary, arithmetic,
  memory layout, matmul). Rank-specific operations are routed through the
  tensor control-path manager on ``ndim``.
- Broadcasting is intentionally not implemented; binary ops require exact
  shape matches.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Optional, Sequence

import numpy as np

from ...domain._errors import InvalidArgumentError, ShapeError
from ...domain._tensor import ITensor
from ._shape_and_indexing import (
    TensorShapeAndIndexingMixin,
    linear_index,
    normalize_shape,
    numel_of,
)
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.matmul import TensorMixinMatmul
from .mixins.memory import TensorMixinMemory
from .mixins.unary import TensorMixinUnary

DTYPE = np.float64
"""Element type of every tensor's backing store."""


class Tensor(
    TensorShapeAndIndexingMixin,
    TensorMixinUnary,
    TensorMixinArithmetic,
    TensorMixinMemory,
    TensorMixinMatmul,
    ITensor,
):
    """
    Dense N-dimensional tensor with flat row-major float64 storage.

    Parameters
    ----------
    dims : Sequence[int]
        Tensor shape. Every extent must be a non-negative integer. An empty
        shape describes a rank-0 (scalar) tensor holding one element.
    idx : Optional[Sequence[Sequence[int]]]
        Coordinates of entries to set after zero-filling. Must be given
        together with `val`.
    val : Optional[Sequence[float]]
        Values written at the matching `idx` coordinates. When coordinates
        collide, later entries overwrite earlier ones.

    Raises
    ------
    ShapeError
        If `dims` contains a negative or non-integer extent, or its size
        overflows the addressable storage size.
    InvalidArgumentError
        If only one of `idx`/`val` is given, or their lengths differ.
    DimensionMismatchError, OutOfBoundsError
        If an `idx` entry is not a valid coordinate (see `index`).

    Examples
    --------
        Tensor((2, 3))                                  # zeros
        Tensor((2, 2), [(0, 0), (1, 1)], [1.0, 1.0])    # 2x2 identity
    """

    def __init__(
        self,
        dims: Sequence[int],
        idx: Optional[Sequence[Sequence[int]]] = None,
        val: Optional[Sequence[float]] = None,
    ) -> None:
        self._shape: tuple[int, ...] = normalize_shape(dims)
        self._data: np.ndarray = np.zeros(numel_of(self._shape), dtype=DTYPE)

        if idx is None and val is None:
            return
        if idx is None or val is None:
            raise InvalidArgumentError(
                "idx and val must be given together "
                f"(got idx={'set' if idx is not None else None}, "
                f"val={'set' if val is not None else None})"
            )

        idx = list(idx)
        val = list(val)
        if len(idx) != len(val):
            raise InvalidArgumentError(
                f"Mismatched idx and val size: {len(idx)} vs {len(val)}"
            )
        for coords, v in zip(idx, val):
            self._data[linear_index(self._shape, tuple(coords))] = float(v)

    @classmethod
    def _from_flat(cls, shape: Sequence[int], flat: Any) -> "Tensor":
        """
        Wrap a freshly computed flat array as a tensor without re-zeroing.

        The caller must hand over ownership: `flat` must not be referenced by
        any other tensor.

        Raises
        ------
        ShapeError
            If the number of values does not match the shape.
        """
        shape = normalize_shape(shape)
        arr = np.ascontiguousarray(flat, dtype=DTYPE).reshape(-1)
        if arr.size != numel_of(shape):
            raise ShapeError(
                f"Cannot wrap {arr.size} values as a tensor of shape {shape}"
            )
        out = cls.__new__(cls)
        out._shape = shape
        out._data = arr
        return out

    # ----------------------------
    # Factories
    # ----------------------------
    @classmethod
    def zeros(cls, dims: Sequence[int]) -> "Tensor":
        """
        Create a tensor of shape `dims` filled with zeros.
        """
        return cls(dims)

    @classmethod
    def ones(cls, dims: Sequence[int]) -> "Tensor":
        """
        Create a tensor of shape `dims` filled with ones.
        """
        return cls.full(dims, 1.0)

    @classmethod
    def full(cls, dims: Sequence[int], value: float) -> "Tensor":
        """
        Create a tensor of shape `dims` with every element set to `value`.
        """
        shape = normalize_shape(dims)
        return cls._from_flat(shape, np.full(numel_of(shape), float(value), DTYPE))

    @classmethod
    def from_numpy(cls, arr: Any) -> "Tensor":
        """
        Create a tensor from an array-like, copying and converting to float64.

        The tensor's shape is the array's shape.
        """
        src = np.array(arr, dtype=DTYPE, copy=True)
        return cls._from_flat(src.shape, src.reshape(-1))

    @classmethod
    def from_list(cls, nested: Any) -> "Tensor":
        """
        Create a tensor from (possibly nested) Python lists of numbers.

        Raises
        ------
        ShapeError
            If the nesting is ragged.
        InvalidArgumentError
            If an element cannot be converted to float64.
        """
        try:
            arr = np.array(nested, dtype=object)
        except ValueError as e:
            raise ShapeError(f"Cannot build a tensor from ragged data: {e}") from e
        if any(
            isinstance(x, (list, tuple, np.ndarray)) for x in arr.reshape(-1)
        ):
            raise ShapeError(f"Cannot build a tensor from ragged data: {nested!r}")
        try:
            return cls.from_numpy(arr.astype(DTYPE))
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Cannot convert elements to float64: {e}"
            ) from e

    # ----------------------------
    # Metadata
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.
        """
        return self._shape

    @property
    def ndim(self) -> int:
        """
        Return the rank. This is the dispatch state for rank-specific ops.
        """
        return len(self._shape)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """
        Return a read-only view of the flat backing store.

        Returns
        -------
        np.ndarray
            1-D float64 view of length `numel()`. Writing to it raises
            ``ValueError``.
        """
        view = self._data.view()
        view.flags.writeable = False
        return view

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        return self._data.size

    # ----------------------------
    # Accessors / host interop
    # ----------------------------
    def get_data(self) -> np.ndarray:
        """
        Return a copy of the flat storage, in row-major order.
        """
        return self._data.copy()

    def get_dims(self) -> tuple[int, ...]:
        """
        Return the shape.
        """
        return self._shape

    def to_numpy(self) -> np.ndarray:
        """
        Return a shaped copy of the tensor as a NumPy array.
        """
        return self._data.reshape(self._shape).copy()

    def clone(self) -> "Tensor":
        """
        Return an independent copy of this tensor.
        """
        return type(self)._from_flat(self._shape, self._data.copy())

    def print(self, file: Optional[IO[str]] = None) -> None:
        """
        Debug helper: write every element in storage order, one per line.

        Parameters
        ----------
        file : Optional[IO[str]]
            Text stream to write to. Defaults to ``sys.stdout``.
        """
        out = sys.stdout if file is None else file
        for x in self._data:
            out.write(f"{float(x):f}\n")

    def __repr__(self) -> str:
        """
        Return a short description of the tensor's shape and dtype.
        """
        return f"Tensor(shape={self._shape}, dtype={self._data.dtype})"
