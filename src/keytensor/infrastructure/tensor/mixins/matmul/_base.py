"""
Matrix-multiplication mixin declaring the Tensor matmul API.

This module declares :class:`TensorMixinMatmul`, which specifies the public
signature and semantics of ``matmul`` and the ``@`` operator.

The mixin itself does not implement numerical kernels. Rank-specific control
paths are registered in ``_tensor_matmul`` and delegate to the cache-blocked
CPU kernels in ``infrastructure.ops.matmul_cpu``.
"""

from abc import ABC
from typing import Optional

from .....domain._tensor import ITensor


class TensorMixinMatmul(ABC):
    """
    Abstract mixin defining matrix multiplication for tensors.

    Notes
    -----
    - The left operand selects the control path by its rank (2 or 3).
    - The right operand is always a single (K, N) matrix; it is never batched.
    """

    def matmul(
        self: ITensor, other: "ITensor", *, block_size: Optional[int] = None
    ) -> "ITensor":
        """
        Cache-blocked matrix product.

        Parameters
        ----------
        other : ITensor
            Right operand of shape (K, N).
        block_size : Optional[int]
            Tile edge length. If None, the active `MatmulConfig` is used.

        Returns
        -------
        ITensor
            - rank 2, self (M, K): result (M, N),
              ``out[i, j] = sum_k self[i, k] * other[k, j]``.
            - rank 3, self (B, M, K): result (B, M, N),
              ``out[b, i, j] = sum_k self[b, i, k] * other[k, j]``.

        Raises
        ------
        UnsupportedRankError
            If `self` is not rank 2 or 3, or `other` is not rank 2.
        DimensionMismatchError
            If ``self.shape[-1] != other.shape[0]``.
        InvalidArgumentError
            If `block_size` is not a positive integer.
        """
        ...

    def __matmul__(self, other: "ITensor") -> "ITensor":
        """
        Operator alias for `matmul()` using the active block size.
        """
        if not isinstance(other, TensorMixinMatmul):
            return NotImplemented
        return self.matmul(other)
