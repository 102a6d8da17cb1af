"""
Runtime configuration for keytensor kernels.

Currently this holds the matmul cache-blocking parameters. The block edge
length is a tunable constant, not part of the matmul contract: any positive
value yields the same product (modulo floating-point summation order).

Resolution order
----------------
1. An explicit ``block_size=`` argument to ``Tensor.matmul``.
2. The configuration active in the current context (see `matmul_config`).
3. The process default, read once from ``KEYTENSOR_MATMUL_BLOCK_SIZE``
   at import time, falling back to ``DEFAULT_MATMUL_BLOCK_SIZE``.

The active configuration lives in a `ContextVar`, so scoped overrides made in
one thread or task are not observed by others.
"""

from __future__ import annotations

import logging
import operator
import os
import warnings
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from ._errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MATMUL_BLOCK_SIZE = 32
MATMUL_BLOCK_SIZE_ENV = "KEYTENSOR_MATMUL_BLOCK_SIZE"


def validate_block_size(block_size: int) -> int:
    """
    Validate a matmul block edge length.

    Returns
    -------
    int
        The block size as a plain ``int``.

    Raises
    ------
    InvalidArgumentError
        If `block_size` is not a positive integer.
    """
    if isinstance(block_size, (bool, np.bool_)):
        raise InvalidArgumentError(
            f"block_size must be a positive int, got {block_size!r}"
        )
    try:
        value = operator.index(block_size)
    except TypeError as e:
        raise InvalidArgumentError(
            f"block_size must be a positive int, got {block_size!r}"
        ) from e
    if value <= 0:
        raise InvalidArgumentError(f"block_size must be positive, got {value}")
    return value


@dataclass(frozen=True)
class MatmulConfig:
    """
    Matmul cache-blocking configuration.

    Attributes
    ----------
    block_size : int
        Edge length of the square tiles the M, N and K ranges are partitioned
        into. The last tile in each dimension is clipped to the remaining size.
    """

    block_size: int = DEFAULT_MATMUL_BLOCK_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "block_size", validate_block_size(self.block_size))


def _config_from_env() -> MatmulConfig:
    raw = os.environ.get(MATMUL_BLOCK_SIZE_ENV)
    if raw is None or not raw.strip():
        return MatmulConfig()
    try:
        return MatmulConfig(block_size=int(raw))
    except (ValueError, InvalidArgumentError) as e:
        warnings.warn(
            f"Ignoring {MATMUL_BLOCK_SIZE_ENV}={raw!r}; "
            f"falling back to block_size={DEFAULT_MATMUL_BLOCK_SIZE}. "
            f"Reason: {e}",
            RuntimeWarning,
            stacklevel=2,
        )
        return MatmulConfig()


_active_config: ContextVar[MatmulConfig] = ContextVar(
    "keytensor_matmul_config", default=_config_from_env()
)


def get_matmul_config() -> MatmulConfig:
    """Return the matmul configuration active in the current context."""
    return _active_config.get()


def set_matmul_config(config: MatmulConfig) -> None:
    """
    Replace the matmul configuration for the current context.

    Raises
    ------
    TypeError
        If `config` is not a `MatmulConfig`.
    """
    if not isinstance(config, MatmulConfig):
        raise TypeError(f"Expected MatmulConfig, got {type(config)!r}")
    logger.debug("matmul config set to %r", config)
    _active_config.set(config)


@contextmanager
def matmul_config(block_size: Optional[int] = None) -> Iterator[MatmulConfig]:
    """
    Temporarily override the matmul configuration.

    Example
    -------
        with matmul_config(block_size=8):
            c = a.matmul(b)   # tiles of 8x8x8

    The previous configuration is restored on exit, including on error.
    """
    current = _active_config.get()
    new = MatmulConfig(
        block_size=current.block_size if block_size is None else block_size
    )
    token = _active_config.set(new)
    logger.debug("matmul config override %r -> %r", current, new)
    try:
        yield new
    finally:
        _active_config.reset(token)
