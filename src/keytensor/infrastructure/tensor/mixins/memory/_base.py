"""
Memory-layout mixin declaring structural Tensor transforms.

This module declares :class:`TensorMixinMemory`, which specifies the public
API of operations that move elements to new coordinates without changing
their values, currently ``transpose`` and its ``T`` alias.

The mixin itself does not implement the permutation. Rank-specific control
paths are registered in ``_tensor_transpose`` and selected at runtime by the
tensor rank.
"""

from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinMemory(ABC):
    """
    Abstract mixin defining structural (layout) tensor operations.

    Notes
    -----
    - Methods in this class are interface declarations; the rank-specific
      implementations are installed by the control-path manager.
    - Calling a declared method on a rank with no registered control path
      raises `UnsupportedRankError`.
    """

    def transpose(self: ITensor) -> "ITensor":
        """
        Transpose a matrix, or each matrix of a batch.

        Returns
        -------
        ITensor
            - rank 2, shape (R, C): a tensor of shape (C, R) with
              ``out[j, i] = self[i, j]``.
            - rank 3, shape (B, R, C): a tensor of shape (B, C, R) with
              ``out[b, j, i] = self[b, i, j]``; the batch axis is untouched.

        Raises
        ------
        UnsupportedRankError
            For any rank other than 2 or 3.

        Notes
        -----
        Each element is copied to its permuted coordinate through the
        row-major `index` mapping.
        """
        ...

    @property
    def T(self) -> "ITensor":
        """
        Convenience property for `transpose()`.
        """
        return self.transpose()
