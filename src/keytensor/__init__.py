"""
keytensor: a dense N-dimensional tensor library.

Public API
----------
- `Tensor` and the `ones` / `zeros` / `full` factories
- error types: `TensorError`, `DimensionMismatchError`, `OutOfBoundsError`,
  `ShapeError`, `InvalidArgumentError`, `UnsupportedRankError`
- matmul configuration: `MatmulConfig`, `get_matmul_config`,
  `set_matmul_config`, `matmul_config`
"""

from .domain._config import (
    DEFAULT_MATMUL_BLOCK_SIZE,
    MatmulConfig,
    get_matmul_config,
    matmul_config,
    set_matmul_config,
)
from .domain._errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    OutOfBoundsError,
    ShapeError,
    TensorError,
    UnsupportedRankError,
)
from .domain._tensor import ITensor
from .infrastructure.tensor import Tensor

ones = Tensor.ones
zeros = Tensor.zeros
full = Tensor.full

__version__ = "1.0.0"

__all__ = [
    "Tensor",
    "ITensor",
    "ones",
    "zeros",
    "full",
    "TensorError",
    "DimensionMismatchError",
    "OutOfBoundsError",
    "ShapeError",
    "InvalidArgumentError",
    "UnsupportedRankError",
    "DEFAULT_MATMUL_BLOCK_SIZE",
    "MatmulConfig",
    "get_matmul_config",
    "set_matmul_config",
    "matmul_config",
]
