"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface mirrors the public surface of the concrete
NumPy-backed `Tensor` so that callers can type against the protocol without
importing the infrastructure layer.

Notes
-----
- Every operation returns a new tensor; the protocol exposes no in-place
  mutators.
- Storage is flat and row-major (the last axis varies fastest).
"""

from __future__ import annotations

from typing import IO, Any, Optional, Protocol, Sequence, Union, runtime_checkable

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a dense N-dimensional array of floats with an immutable
    shape and an exclusively owned, flat row-major backing store.
    """

    # ---------------------------------------------------------------------
    # Shape and storage metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape. Its length is the rank.
        """
        ...

    @property
    def ndim(self) -> int:
        """Return the rank (number of axes)."""
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """Return the row-major element stride of each axis."""
        ...

    @property
    def dtype(self) -> Any:
        """Return the element dtype of the backing store."""
        ...

    @property
    def data(self) -> Any:
        """
        Return a read-only view of the flat backing store.

        Returns
        -------
        Any
            Backend-native flat array (``np.ndarray`` in the NumPy backend).
        """
        ...

    def numel(self) -> int:
        """Return the total number of elements (product of the shape)."""
        ...

    # ---------------------------------------------------------------------
    # Accessors / host interop
    # ---------------------------------------------------------------------
    def get_data(self) -> Any:
        """Return a copy of the flat backing store."""
        ...

    def get_dims(self) -> tuple[int, ...]:
        """Return the shape."""
        ...

    def to_numpy(self) -> Any:
        """Return a shaped copy of the tensor as a backend-native array."""
        ...

    def clone(self) -> "ITensor":
        """Return an independent copy of this tensor."""
        ...

    def print(self, file: Optional[IO[str]] = None) -> None:
        """Write every element in storage order, one per line."""
        ...

    # ---------------------------------------------------------------------
    # Indexing
    # ---------------------------------------------------------------------
    def index(self, coords: Sequence[int]) -> int:
        """
        Map a coordinate vector to a flat offset into the backing store.

        Raises
        ------
        DimensionMismatchError
            If ``len(coords)`` differs from the rank.
        OutOfBoundsError
            If any coordinate lies outside its axis extent.
        """
        ...

    def unravel_index(self, offset: int) -> tuple[int, ...]:
        """Map a flat offset back to its coordinate vector."""
        ...

    def __getitem__(self, coords: Any) -> float:
        """Return the element stored at `coords`."""
        ...

    # ---------------------------------------------------------------------
    # Shape transforms
    # ---------------------------------------------------------------------
    def reshape(self, new_shape: Sequence[int]) -> "ITensor":
        """Return a tensor with `new_shape` sharing no storage with `self`."""
        ...

    def transpose(self) -> "ITensor":
        """Transpose a matrix or a batch of matrices."""
        ...

    @property
    def T(self) -> "ITensor":
        """Alias for `transpose()`."""
        ...

    # ---------------------------------------------------------------------
    # Elementwise and scalar operations
    # ---------------------------------------------------------------------
    def neg(self) -> "ITensor": ...

    def reciprocal(self) -> "ITensor": ...

    def mult(self, scalar: Number) -> "ITensor": ...

    def pow(self, exponent: Number) -> "ITensor": ...

    def relu(self) -> "ITensor": ...

    def binarilize(self) -> "ITensor": ...

    def exp(self) -> "ITensor": ...

    def add(self, other: "ITensor") -> "ITensor": ...

    def subtract(self, other: "ITensor") -> "ITensor": ...

    def elementwise_mult(self, other: "ITensor") -> "ITensor": ...

    def __neg__(self) -> "ITensor": ...

    def __add__(self, other: "ITensor") -> "ITensor": ...

    def __sub__(self, other: "ITensor") -> "ITensor": ...

    def __mul__(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def __rmul__(self, other: Number) -> "ITensor": ...

    def __pow__(self, exponent: Number) -> "ITensor": ...

    # ---------------------------------------------------------------------
    # Matrix multiplication
    # ---------------------------------------------------------------------
    def matmul(self, other: "ITensor", *, block_size: Optional[int] = None) -> "ITensor":
        """
        Blocked matrix product of a rank-2 or batched rank-3 tensor with a
        rank-2 tensor.
        """
        ...

    def __matmul__(self, other: "ITensor") -> "ITensor": ...
