"""
CPU compute kernels operating on NumPy arrays.

These functions are backend primitives used by the Tensor mixins; they accept
and return plain ``np.ndarray`` objects and know nothing about `Tensor`.
"""
