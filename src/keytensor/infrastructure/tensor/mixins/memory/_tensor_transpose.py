"""
Rank-specific implementations of Tensor.transpose via control-path dispatch.

This module registers the rank-2 and batched rank-3 transpose implementations
with the `tensor_control_path_manager`, which dispatches on ``self.ndim``.
Any other rank raises `UnsupportedRankError`.

Both implementations copy every element to its permuted coordinate using the
shared row-major `linear_index` routine, for the source and the output alike.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager
from ..._shape_and_indexing import linear_index

from .....domain._errors import UnsupportedRankError
from .....domain._tensor import ITensor

from ._base import TensorMixinMemory as TMM

TRANSPOSE_RANKS = (2, 3)


def _unsupported_transpose(method_name: str, rank: int) -> UnsupportedRankError:
    return UnsupportedRankError(method_name, rank, TRANSPOSE_RANKS)


@tensor_control_path_manager(TMM, TMM.transpose, 2, _unsupported_transpose)
def tensor_transpose_2d(self: ITensor) -> "ITensor":
    """
    Rank-2 control path: ``out[j, i] = self[i, j]``.
    """
    rows, cols = self.shape
    out_shape = (cols, rows)
    src = self.data
    flat = np.zeros(self.numel(), dtype=np.float64)

    for i in range(rows):
        for j in range(cols):
            flat[linear_index(out_shape, (j, i))] = src[self.index((i, j))]

    return type(self)._from_flat(out_shape, flat)


@tensor_control_path_manager(TMM, TMM.transpose, 3, _unsupported_transpose)
def tensor_transpose_batched(self: ITensor) -> "ITensor":
    """
    Rank-3 control path: ``out[b, j, i] = self[b, i, j]`` for every batch `b`.
    """
    batch, rows, cols = self.shape
    out_shape = (batch, cols, rows)
    src = self.data
    flat = np.zeros(self.numel(), dtype=np.float64)

    for b in range(batch):
        for i in range(rows):
            for j in range(cols):
                flat[linear_index(out_shape, (b, j, i))] = src[self.index((b, i, j))]

    return type(self)._from_flat(out_shape, flat)
