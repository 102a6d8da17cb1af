"""
CPU matrix-multiplication kernels for keytensor.

This module provides the cache-blocked GEMM used by `Tensor.matmul`, its
batched variant, and a naive triple-loop reference kernel.

Blocking scheme
---------------
The M, N and K ranges are partitioned into tiles of edge `block_size` (the last
tile in each dimension is clipped). The tile loops run in
``i-block -> j-block -> k-block`` order, and for each tile triple the partial
product ``A[i-tile, k-tile] @ B[k-tile, j-tile]`` is *accumulated* into the
output tile ``C[i-tile, j-tile]``. The same output tile is therefore revisited
once per k-block, which is why the output buffer must start zero-filled.

Results equal the naive triple loop modulo floating-point summation order.

Tensor layout
-------------
All arrays are C-contiguous (row-major) float64 NumPy arrays:

- A: (M, K) or (B, M, K) for the batched kernel
- B: (K, N), shared by every batch element
- C: (M, N) or (B, M, N)
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np

from ...domain._config import validate_block_size
from ...domain._errors import DimensionMismatchError, ShapeError


def iter_blocks(extent: int, block_size: int) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(start, stop)`` ranges partitioning ``range(extent)`` into blocks.

    The last block is clipped to the remaining size. An extent of 0 yields
    nothing.
    """
    for start in range(0, extent, block_size):
        yield start, min(start + block_size, extent)


def _check_gemm_operands(a: np.ndarray, b: np.ndarray) -> Tuple[int, int, int]:
    if a.ndim != 2 or b.ndim != 2:
        raise ShapeError(
            f"matmul kernel expects 2D operands, got {a.shape} and {b.shape}"
        )
    m, k = a.shape
    k2, n = b.shape
    if k != k2:
        raise DimensionMismatchError(
            f"Mismatched matmul matrix dimensions: {a.shape} @ {b.shape}",
            expected=k,
            got=k2,
        )
    return m, k, n


def matmul2d_blocked_cpu(
    a: np.ndarray,
    b: np.ndarray,
    out: Optional[np.ndarray] = None,
    *,
    block_size: int,
) -> np.ndarray:
    """
    Cache-blocked 2D matrix product ``out += a @ b``.

    Parameters
    ----------
    a : np.ndarray
        Left operand of shape (M, K).
    b : np.ndarray
        Right operand of shape (K, N).
    out : Optional[np.ndarray]
        Output buffer of shape (M, N). Results are accumulated into it, so it
        must be zero-filled for a plain product. If None, a zero buffer is
        allocated.
    block_size : int
        Tile edge length for all three loop dimensions.

    Returns
    -------
    np.ndarray
        The output buffer (M, N).

    Raises
    ------
    DimensionMismatchError
        If the contraction dimensions differ.
    ShapeError
        If operands are not 2D or `out` has the wrong shape.
    """
    block_size = validate_block_size(block_size)
    m, k, n = _check_gemm_operands(a, b)

    if out is None:
        out = np.zeros((m, n), dtype=np.result_type(a.dtype, b.dtype))
    elif out.shape != (m, n):
        raise ShapeError(f"matmul output must have shape {(m, n)}, got {out.shape}")

    for i0, i1 in iter_blocks(m, block_size):
        for j0, j1 in iter_blocks(n, block_size):
            c_tile = out[i0:i1, j0:j1]
            for k0, k1 in iter_blocks(k, block_size):
                # accumulate, the same C tile is revisited once per k-block
                c_tile += a[i0:i1, k0:k1] @ b[k0:k1, j0:j1]

    return out


def batched_matmul_blocked_cpu(
    a: np.ndarray,
    b: np.ndarray,
    out: Optional[np.ndarray] = None,
    *,
    block_size: int,
) -> np.ndarray:
    """
    Batched cache-blocked product: ``out[i] += a[i] @ b`` for every batch index.

    The right-hand matrix `b` is not batched; the same (K, N) matrix is
    applied to every (M, K) slice of `a`.

    Parameters
    ----------
    a : np.ndarray
        Left operand of shape (B, M, K).
    b : np.ndarray
        Right operand of shape (K, N).
    out : Optional[np.ndarray]
        Zero-filled output of shape (B, M, N), or None to allocate one.
    block_size : int
        Tile edge length.

    Returns
    -------
    np.ndarray
        The output buffer (B, M, N).

    Raises
    ------
    InvalidArgumentError
        If `block_size` is not a positive integer.
    ShapeError
        If `a` is not 3D, `b` is not 2D, or `out` has the wrong shape.
    DimensionMismatchError
        If the contraction dimensions differ.

    All checks run before the batch loop, so they apply when ``B == 0``.
    """
    block_size = validate_block_size(block_size)
    if a.ndim != 3:
        raise ShapeError(
            f"batched matmul kernel expects a 3D left operand, got {a.shape}"
        )
    if b.ndim != 2:
        raise ShapeError(
            f"batched matmul kernel expects a 2D right operand, got {b.shape}"
        )
    batch, m, k = a.shape
    k2, n = b.shape
    if k != k2:
        raise DimensionMismatchError(
            f"Mismatched matmul matrix dimensions: {a.shape} @ {b.shape}",
            expected=k,
            got=k2,
        )

    if out is None:
        out = np.zeros((batch, m, n), dtype=np.result_type(a.dtype, b.dtype))
    elif out.shape != (batch, m, n):
        raise ShapeError(
            f"batched matmul output must have shape {(batch, m, n)}, got {out.shape}"
        )

    for bi in range(batch):
        # out[bi] is a view, so the 2D kernel accumulates straight into `out`
        matmul2d_blocked_cpu(a[bi], b, out[bi], block_size=block_size)

    return out


def matmul_naive_cpu(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Reference triple-loop matrix product (CPU, pure Python loops).

    Intended as a correctness baseline for the blocked kernels and for
    benchmarking; it is slow by construction.

    Parameters
    ----------
    a : np.ndarray
        Left operand of shape (M, K).
    b : np.ndarray
        Right operand of shape (K, N).

    Returns
    -------
    np.ndarray
        Product of shape (M, N).
    """
    m, k, n = _check_gemm_operands(a, b)
    out = np.zeros((m, n), dtype=np.float64)
    for i in range(m):
        for j in range(n):
            acc = 0.0
            for p in range(k):
                acc += float(a[i, p]) * float(b[p, j])
            out[i, j] = acc
    return out

