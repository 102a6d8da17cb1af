import unittest

from src.keytensor.domain.utils._control_path import create_path_builder


class _Boom(Exception):
    def __init__(self, method_name, state):
        super().__init__(f"{method_name} has no path for {state!r}")
        self.method_name = method_name
        self.state = state


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder("mode")

    def test_state_must_be_hashable(self) -> None:
        class C:
            mode = "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            self.decorator(C, C.foo, ["not-hashable"])(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self, x: int) -> int:
                return -1

        @self.decorator(C, C.foo, "A")
        def foo_a(self, x: int) -> int:
            return x + 1

        @self.decorator(C, C.foo, "B")
        def foo_b(self, x: int) -> int:
            return x * 10

        self.assertEqual(C("A").foo(2), 3)
        self.assertEqual(C("B").foo(2), 20)

    def test_sub_method_receives_self(self) -> None:
        class C:
            mode = 1
            scale = 7

            def foo(self) -> int: ...

        @self.decorator(C, C.foo, 1)
        def foo_1(self) -> int:
            return self.scale

        self.assertEqual(C().foo(), 7)

    def test_kwargs_are_forwarded(self) -> None:
        class C:
            mode = 0

            def foo(self, *, k: int = 0) -> int: ...

        @self.decorator(C, C.foo, 0)
        def foo_0(self, *, k: int = 0) -> int:
            return k

        self.assertEqual(C().foo(k=5), 5)

    def test_missing_path_raises_not_implemented_by_default(self) -> None:
        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self) -> int: ...

        @self.decorator(C, C.foo, "A")
        def foo_a(self) -> int:
            return 1

        with self.assertRaises(NotImplementedError) as ctx:
            C("Z").foo()
        self.assertIn("Missing control path", str(ctx.exception))

    def test_missing_path_uses_trap_factory(self) -> None:
        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self) -> int: ...

        @self.decorator(C, C.foo, "A", _Boom)
        def foo_a(self) -> int:
            return 1

        with self.assertRaises(_Boom) as ctx:
            C("Z").foo()
        self.assertEqual(ctx.exception.method_name, "foo")
        self.assertEqual(ctx.exception.state, "Z")

    def test_missing_state_attribute_raises(self) -> None:
        class C:
            def foo(self) -> int: ...

        @self.decorator(C, C.foo, "A")
        def foo_a(self) -> int:
            return 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo()
        self.assertIn("'mode'", str(ctx.exception))

    def test_wrapper_preserves_method_metadata(self) -> None:
        class C:
            mode = "A"

            def foo(self) -> int:
                """Original docstring."""

        @self.decorator(C, C.foo, "A")
        def foo_a(self) -> int:
            return 1

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "Original docstring.")

    def test_decorator_returns_sub_method_unchanged(self) -> None:
        class C:
            mode = "A"

            def foo(self) -> int: ...

        def foo_a(self) -> int:
            return 1

        self.assertIs(self.decorator(C, C.foo, "A")(foo_a), foo_a)

    def test_builders_do_not_share_registrations(self) -> None:
        other = create_path_builder("mode")

        class C:
            mode = "A"

            def foo(self) -> int: ...

        @self.decorator(C, C.foo, "A")
        def foo_a(self) -> int:
            return 1

        class D:
            mode = "A"

            def foo(self) -> int: ...

        @other(D, D.foo, "B")
        def foo_b(self) -> int:
            return 2

        self.assertEqual(C().foo(), 1)
        with self.assertRaises(NotImplementedError):
            D().foo()


if __name__ == "__main__":
    unittest.main()
