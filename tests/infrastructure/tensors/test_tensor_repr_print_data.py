import io
import unittest
import numpy as np

from src.keytensor.infrastructure.tensor._tensor import Tensor


class TestTensorDataAccessors(unittest.TestCase):
    """
    Tests for Tensor.data, get_data, get_dims, to_numpy and clone.

    These tests assert:
    - `data` is a flat float64 view of storage that cannot be written through.
    - `get_data` and `to_numpy` return independent copies.
    - `clone` produces a tensor that shares nothing with the source.
    """

    def setUp(self):
        self.t = Tensor.from_list([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_data_is_flat_float64(self):
        self.assertEqual(self.t.data.shape, (6,))
        self.assertEqual(self.t.data.dtype, np.float64)
        self.assertEqual(self.t.dtype, np.float64)
        np.testing.assert_array_equal(self.t.data, [1, 2, 3, 4, 5, 6])

    def test_data_view_is_read_only(self):
        view = self.t.data
        with self.assertRaises(ValueError):
            view[0] = 99.0
        self.assertEqual(self.t[0, 0], 1.0)

    def test_get_data_returns_copy(self):
        d = self.t.get_data()
        d[0] = 99.0
        self.assertEqual(self.t[0, 0], 1.0)

    def test_to_numpy_is_shaped_copy(self):
        arr = self.t.to_numpy()
        self.assertEqual(arr.shape, (2, 3))
        arr[1, 2] = -1.0
        self.assertEqual(self.t[1, 2], 6.0)

    def test_get_dims_matches_shape(self):
        self.assertEqual(self.t.get_dims(), (2, 3))
        self.assertEqual(self.t.get_dims(), self.t.shape)

    def test_clone_is_independent(self):
        c = self.t.clone()
        self.assertIsNot(c, self.t)
        self.assertEqual(c.shape, self.t.shape)
        np.testing.assert_array_equal(c.get_data(), self.t.get_data())
        self.assertFalse(np.shares_memory(c.data, self.t.data))


class TestTensorPrintAndRepr(unittest.TestCase):
    def test_print_writes_one_fixed_point_value_per_line(self):
        t = Tensor((2, 2), [(0, 1), (1, 0)], [2.5, -1.0])
        buf = io.StringIO()
        t.print(file=buf)
        self.assertEqual(
            buf.getvalue(), "0.000000\n2.500000\n-1.000000\n0.000000\n"
        )

    def test_print_empty_tensor_writes_nothing(self):
        buf = io.StringIO()
        Tensor((0, 4)).print(file=buf)
        self.assertEqual(buf.getvalue(), "")

    def test_print_scalar_tensor(self):
        buf = io.StringIO()
        Tensor.full((), 3.0).print(file=buf)
        self.assertEqual(buf.getvalue(), "3.000000\n")

    def test_repr_mentions_shape_and_dtype(self):
        r = repr(Tensor((2, 3)))
        self.assertIn("(2, 3)", r)
        self.assertIn("float64", r)
        self.assertTrue(r.startswith("Tensor("))


if __name__ == "__main__":
    unittest.main()
