"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on the runtime value of a named
attribute on the receiver (its *dispatch state*).

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the receiver's state attribute and dispatches
  to the implementation registered for that value.

In keytensor the state attribute is the tensor rank (``ndim``), which lets
rank-specific algorithms (e.g. rank-2 vs. batched rank-3 matmul) live in
separate functions instead of if/elif chains.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Sub-methods are called like bound instance methods: `sm(self, *args, **kwargs)`.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[str, Any], BaseException]
"""Builds the exception raised when no control path matches `(method_name, state)`."""


def create_path_builder(
    state_attr: str,
) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapFactory]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" used to register stateful control paths.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("ndim")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, 2)
        def foo_2(self, x: int) -> int:
            ...

    When `MyClass.foo(...)` is called, it dispatches to `foo_2` if
    `self.ndim == 2`.

    Parameters
    ----------
    state_attr : str
        Name of the attribute (usually a property) read from the receiver to
        select a control path.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            installed wrapper via `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[TrapFactory]
            Called as `trap_exception(method_name, state)` when no control
            path matches the receiver's state; the returned exception is
            raised. If None, `NotImplementedError` is raised.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            )

        method_name = method.__name__
        smk: MethodKey = MethodKey(cls.__name__, method_name, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` for the configured state and install the
            dispatcher on `cls`.
            """
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                cur_state = getattr(self, state_attr)
                key = MethodKey(cls.__name__, method_name, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur_state), repr(method_name)
                        )
                    )
                raise trap_exception(method_name, cur_state)

            setattr(cls, method_name, wrapper)
            return sub_method

        return decorator

    return templator
