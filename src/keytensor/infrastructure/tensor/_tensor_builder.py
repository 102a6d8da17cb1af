"""
Tensor control-path manager for rank-specific dispatch.

This module defines the shared control-path manager used to register and
resolve rank-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"ndim"``. As a result, method dispatch
is performed based on the runtime rank of the receiving tensor.

Typical usage
-------------
Rank-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, 2)
    def op_rank2(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, 3)
    def op_rank3(self, ...): ...

At runtime, calling ``Tensor.op(...)`` dispatches to the implementation whose
registered rank matches ``self.ndim``; any other rank hits the registration's
trap factory (typically raising `UnsupportedRankError`).
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Tensor methods based on `self.ndim`
tensor_control_path_manager = create_path_builder("ndim")
