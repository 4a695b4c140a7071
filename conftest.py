from collections import namedtuple
from types import SimpleNamespace
from typing import ClassVar

import pytest

Point = namedtuple("Point", ["x", "y"])


def _define_classes() -> SimpleNamespace:
    # Defined per test so that class-level state never leaks between tests
    class Box:
        def __init__(self, size: int):
            self.__size = size

        def __grow(self, by: int) -> int:
            self.__size += by
            return self.__size

    class Vault:
        counter = 0
        _label = "vault"
        __registry: ClassVar[dict] = {}

        def __init__(self, secret: str = "hunter2"):
            self.__secret = secret
            self._items = [1, 2, [3, 4]]
            self.__pair = ("a", "b")
            self.__origin = Point(1, 2)
            self.__meta = {"owner": "root"}
            self.__child = Box(5)
            self.__ratio = 0.5

        def __reveal(self, prefix: str = "") -> str:
            return prefix + self.__secret

        @staticmethod
        def __checksum(value: str) -> int:
            return sum(map(ord, value))

        @classmethod
        def __bump(cls) -> int:
            cls.counter += 1
            return cls.counter

        @property
        def __masked(self) -> str:
            return "*" * len(self.__secret)

    class SubVault(Vault):
        def __init__(self):
            super().__init__("inherited")
            self.__extra = "sub"

    class Slotted:
        __slots__ = ("__value",)

        def __init__(self, value: int):
            self.__value = value

    class Declared:
        __token: str
        __retries: int = 3

        def __init__(self, token: str):
            self.__token = token

    return SimpleNamespace(
        Box=Box, Vault=Vault, SubVault=SubVault, Slotted=Slotted, Declared=Declared
    )


@pytest.fixture
def classes() -> SimpleNamespace:
    return _define_classes()


@pytest.fixture
def vault(classes):
    return classes.Vault()
