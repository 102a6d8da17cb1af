import unittest
from typing import Any, Dict, Set, Type

from src.keytensor.infrastructure.tensor._tensor import Tensor
from src.keytensor.domain._tensor import ITensor


def _iter_effective_member_names(cls: Type[Any]) -> Set[str]:
    """
    Return the set of member names that exist on a class/protocol, including
    methods, properties, static/class methods and other descriptors.

    The MRO's __dict__ is inspected so decorated members are not missed.
    """
    names: Set[str] = set()

    for base in cls.__mro__:
        if base is object:
            continue

        d: Dict[str, Any] = getattr(base, "__dict__", {})
        names.update(d.keys())

    return names


def _is_dunder(name: str) -> bool:
    return len(name) >= 4 and name.startswith("__") and name.endswith("__")


def _include_name(name: str) -> bool:
    """
    Include public names and dunders.
    Exclude single-underscore "private" helpers like `_foo`.
    """
    if _is_dunder(name):
        return True
    return not name.startswith("_")


# Protocol / ABC bookkeeping and construction-only members
_IGNORE = {
    "__abstractmethods__",
    "__annotations__",
    "__dict__",
    "__doc__",
    "__init__",
    "__module__",
    "__parameters__",
    "__protocol_attrs__",
    "__non_callable_proto_members__",
    "__subclasshook__",
    "__weakref__",
    "__orig_bases__",
    "__slots__",
    "__static_attributes__",
    "__firstlineno__",
    "__repr__",
    # classmethod factories, reachable through the concrete type only
    "zeros",
    "ones",
    "full",
    "from_numpy",
    "from_list",
}


class TestITensorMatchesTensorInterface(unittest.TestCase):
    def test_itensor_declares_every_tensor_member(self) -> None:
        tensor_names = {
            n for n in _iter_effective_member_names(Tensor) if _include_name(n)
        }
        itensor_names = {
            n for n in _iter_effective_member_names(ITensor) if _include_name(n)
        }

        missing = sorted((tensor_names - _IGNORE) - itensor_names)

        self.assertFalse(
            missing,
            (
                "ITensor is missing public/dunder members that exist on Tensor.\n"
                f"Missing ({len(missing)}): {missing}"
            ),
        )

    def test_tensor_instance_satisfies_itensor(self) -> None:
        self.assertIsInstance(Tensor((2, 2)), ITensor)


if __name__ == "__main__":
    unittest.main()
