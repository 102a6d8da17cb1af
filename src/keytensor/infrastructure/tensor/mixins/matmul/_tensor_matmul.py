"""
Rank-specific implementations of Tensor.matmul via control-path dispatch.

This module registers the rank-2 and batched rank-3 matmul implementations
with the `tensor_control_path_manager`, which dispatches on the rank of the
left operand. Both paths validate the right operand, resolve the block size,
and run the cache-blocked CPU kernel on read-only views of the operands'
storage. The result is written into a freshly zero-filled buffer.
"""

import logging
from typing import Optional

from ..._tensor_builder import tensor_control_path_manager

from .....domain._config import get_matmul_config, validate_block_size
from .....domain._errors import DimensionMismatchError, UnsupportedRankError
from .....domain._tensor import ITensor
from ....ops.matmul_cpu import batched_matmul_blocked_cpu, matmul2d_blocked_cpu

from ._base import TensorMixinMatmul as TMM

logger = logging.getLogger(__name__)

MATMUL_LEFT_RANKS = (2, 3)


def _unsupported_matmul(method_name: str, rank: int) -> UnsupportedRankError:
    return UnsupportedRankError(
        method_name, rank, MATMUL_LEFT_RANKS, operand="left operand"
    )


def _check_matmul_operands(self: ITensor, other: "ITensor") -> int:
    """
    Validate `other` against `self` and return the contraction extent K.

    Raises
    ------
    TypeError
        If `other` is not a tensor.
    UnsupportedRankError
        If `other` is not rank 2.
    DimensionMismatchError
        If the contraction dimensions differ.
    """
    if not isinstance(other, TMM):
        raise TypeError(f"matmul expects a tensor operand, got {type(other)!r}")
    if other.ndim != 2:
        raise UnsupportedRankError("matmul", other.ndim, (2,), operand="right operand")
    k = self.shape[-1]
    if k != other.shape[0]:
        raise DimensionMismatchError(
            f"Mismatched matmul matrix dimensions: {self.shape} @ {other.shape}",
            expected=k,
            got=other.shape[0],
        )
    return k


def _resolve_block_size(block_size: Optional[int]) -> int:
    if block_size is None:
        return get_matmul_config().block_size
    return validate_block_size(block_size)


@tensor_control_path_manager(TMM, TMM.matmul, 2, _unsupported_matmul)
def tensor_matmul_2d(
    self: ITensor, other: "ITensor", *, block_size: Optional[int] = None
) -> "ITensor":
    """
    Rank-2 control path: (M, K) @ (K, N) -> (M, N).
    """
    _check_matmul_operands(self, other)
    bs = _resolve_block_size(block_size)
    logger.debug("matmul %s @ %s block_size=%d", self.shape, other.shape, bs)

    a = self.data.reshape(self.shape)
    b = other.data.reshape(other.shape)
    out = matmul2d_blocked_cpu(a, b, block_size=bs)

    return type(self)._from_flat(out.shape, out.reshape(-1))


@tensor_control_path_manager(TMM, TMM.matmul, 3, _unsupported_matmul)
def tensor_matmul_batched(
    self: ITensor, other: "ITensor", *, block_size: Optional[int] = None
) -> "ITensor":
    """
    Rank-3 control path: (B, M, K) @ (K, N) -> (B, M, N).

    The same right-hand matrix is applied to every batch element.
    """
    _check_matmul_operands(self, other)
    bs = _resolve_block_size(block_size)
    logger.debug("matmul %s @ %s block_size=%d", self.shape, other.shape, bs)

    a = self.data.reshape(self.shape)
    b = other.data.reshape(other.shape)
    out = batched_matmul_blocked_cpu(a, b, block_size=bs)

    return type(self)._from_flat(out.shape, out.reshape(-1))
