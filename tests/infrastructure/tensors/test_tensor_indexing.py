import itertools
import unittest
import numpy as np

from src.keytensor.domain._errors import DimensionMismatchError, OutOfBoundsError
from src.keytensor.infrastructure.tensor._tensor import Tensor


class TestTensorIndex(unittest.TestCase):
    def test_row_major_offsets_2d(self):
        t = Tensor((2, 3))
        self.assertEqual(t.index((0, 0)), 0)
        self.assertEqual(t.index((0, 2)), 2)
        self.assertEqual(t.index((1, 0)), 3)
        self.assertEqual(t.index((1, 2)), 5)

    def test_last_axis_varies_fastest_3d(self):
        t = Tensor((2, 3, 4))
        self.assertEqual(t.index((0, 0, 1)), 1)
        self.assertEqual(t.index((0, 1, 0)), 4)
        self.assertEqual(t.index((1, 0, 0)), 12)
        self.assertEqual(t.index((1, 2, 3)), 23)

    def test_matches_numpy_ravel_multi_index(self):
        shape = (3, 1, 4, 2)
        t = Tensor(shape)
        for coords in itertools.product(*(range(d) for d in shape)):
            self.assertEqual(t.index(coords), int(np.ravel_multi_index(coords, shape)))

    def test_bijection_onto_storage(self):
        for shape in [(5,), (2, 3), (2, 3, 4), (3, 1, 2, 2)]:
            with self.subTest(shape=shape):
                t = Tensor(shape)
                offsets = [
                    t.index(c) for c in itertools.product(*(range(d) for d in shape))
                ]
                self.assertEqual(sorted(offsets), list(range(t.numel())))

    def test_unravel_inverts_index(self):
        shape = (2, 3, 4)
        t = Tensor(shape)
        for coords in itertools.product(*(range(d) for d in shape)):
            self.assertEqual(t.unravel_index(t.index(coords)), coords)
        for offset in range(t.numel()):
            self.assertEqual(t.index(t.unravel_index(offset)), offset)

    def test_rank_zero_index(self):
        t = Tensor(())
        self.assertEqual(t.index(()), 0)
        self.assertEqual(t.unravel_index(0), ())

    def test_accepts_list_and_numpy_ints(self):
        t = Tensor((2, 3))
        self.assertEqual(t.index([1, np.int64(2)]), 5)

    def test_rank_mismatch_raises(self):
        t = Tensor((2, 3))
        with self.assertRaises(DimensionMismatchError) as ctx:
            t.index((1,))
        self.assertEqual(ctx.exception.expected, 2)
        self.assertEqual(ctx.exception.got, 1)
        with self.assertRaises(DimensionMismatchError):
            t.index((0, 0, 0))

    def test_coordinate_equal_to_extent_raises(self):
        t = Tensor((2, 3))
        with self.assertRaises(OutOfBoundsError) as ctx:
            t.index((0, 3))
        self.assertEqual(ctx.exception.axis, 1)
        self.assertEqual(ctx.exception.value, 3)
        self.assertEqual(ctx.exception.extent, 3)

    def test_negative_coordinate_raises(self):
        with self.assertRaises(OutOfBoundsError):
            Tensor((2, 3)).index((-1, 0))

    def test_any_index_on_zero_extent_axis_raises(self):
        with self.assertRaises(OutOfBoundsError):
            Tensor((0, 3)).index((0, 0))

    def test_unravel_out_of_range_raises(self):
        t = Tensor((2, 3))
        with self.assertRaises(OutOfBoundsError):
            t.unravel_index(6)
        with self.assertRaises(OutOfBoundsError):
            t.unravel_index(-1)


class TestTensorGetItemAndStrides(unittest.TestCase):
    def test_getitem_reads_element(self):
        t = Tensor((2, 3), [(1, 2)], [7.0])
        self.assertEqual(t[1, 2], 7.0)
        self.assertEqual(t[0, 0], 0.0)
        self.assertIsInstance(t[1, 2], float)

    def test_getitem_int_for_rank_one(self):
        t = Tensor((3,), [(2,)], [4.0])
        self.assertEqual(t[2], 4.0)

    def test_getitem_rank_zero(self):
        t = Tensor((), [()], [2.5])
        self.assertEqual(t[()], 2.5)

    def test_getitem_out_of_bounds_is_index_error(self):
        with self.assertRaises(IndexError):
            Tensor((2,))[2]

    def test_strides(self):
        self.assertEqual(Tensor((2, 3, 4)).strides, (12, 4, 1))
        self.assertEqual(Tensor((5,)).strides, (1,))
        self.assertEqual(Tensor(()).strides, ())


if __name__ == "__main__":
    unittest.main()
