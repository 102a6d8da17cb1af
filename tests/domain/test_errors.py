import unittest

from src.keytensor.domain._errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    OutOfBoundsError,
    ShapeError,
    TensorError,
    UnsupportedRankError,
)


class TestErrorHierarchy(unittest.TestCase):
    def test_all_errors_derive_from_tensor_error(self):
        for cls in (
            DimensionMismatchError,
            OutOfBoundsError,
            ShapeError,
            InvalidArgumentError,
            UnsupportedRankError,
        ):
            with self.subTest(cls=cls.__name__):
                self.assertTrue(issubclass(cls, TensorError))

    def test_builtin_bases(self):
        self.assertTrue(issubclass(OutOfBoundsError, IndexError))
        self.assertTrue(issubclass(DimensionMismatchError, ValueError))
        self.assertTrue(issubclass(ShapeError, ValueError))
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))
        self.assertTrue(issubclass(UnsupportedRankError, ValueError))


class TestErrorAttributes(unittest.TestCase):
    def test_dimension_mismatch_carries_expected_and_got(self):
        e = DimensionMismatchError("bad", expected=2, got=3)
        self.assertEqual(e.expected, 2)
        self.assertEqual(e.got, 3)
        self.assertEqual(str(e), "bad")

    def test_out_of_bounds_axis_message(self):
        e = OutOfBoundsError(1, 5, 4)
        self.assertEqual((e.axis, e.value, e.extent), (1, 5, 4))
        self.assertIn("axis 1", str(e))
        self.assertIn("extent 4", str(e))

    def test_out_of_bounds_flat_offset_message(self):
        e = OutOfBoundsError(None, 10, 6)
        self.assertIsNone(e.axis)
        self.assertIn("Flat offset 10", str(e))

    def test_unsupported_rank_attributes_and_message(self):
        e = UnsupportedRankError("transpose", 4, (2, 3))
        self.assertEqual(e.op, "transpose")
        self.assertEqual(e.rank, 4)
        self.assertEqual(e.supported, (2, 3))
        self.assertEqual(e.operand, "input")
        self.assertIn("rank 2 or 3", str(e))
        self.assertIn("got rank 4", str(e))

    def test_unsupported_rank_accepts_any_sequence(self):
        e = UnsupportedRankError("matmul", 1, [2], operand="right operand")
        self.assertEqual(e.supported, (2,))
        self.assertIn("right operand", str(e))


if __name__ == "__main__":
    unittest.main()
