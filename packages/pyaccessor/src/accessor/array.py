from typing import Any, Iterator, List, TYPE_CHECKING

from accessor.spec import ArrayPropProtocol

if TYPE_CHECKING:
    from accessor.spec import AccessorProtocol


def _rebuild(original: tuple, items: List[Any]) -> tuple:
    # namedtuples take their fields positionally, plain tuples take an iterable
    make = getattr(type(original), "_make", None)
    if make is not None:
        return make(items)
    return type(original)(items)


class ArrayProp(ArrayPropProtocol):
    __slots__ = ("_accessor", "_name")

    def __init__(self, accessor: "AccessorProtocol", name: str):
        self._accessor = accessor
        self._name = name

    def get_origin(self) -> Any:
        return self._accessor.get_direct(self._name)

    def get_name(self) -> str:
        return self._name

    def get_accessor(self) -> "AccessorProtocol":
        return self._accessor

    def __getitem__(self, key: Any) -> Any:
        return self.get_origin()[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        array = self.get_origin()
        if isinstance(array, tuple):
            items = list(array)
            items[key] = value
            self._accessor.set_direct(self._name, _rebuild(array, items))
        else:
            array[key] = value

    def __delitem__(self, key: Any) -> None:
        array = self.get_origin()
        if isinstance(array, tuple):
            items = list(array)
            del items[key]
            self._accessor.set_direct(self._name, _rebuild(array, items))
        else:
            del array[key]

    def append(self, value: Any) -> None:
        array = self.get_origin()
        if isinstance(array, tuple):
            self._accessor.set_direct(self._name, _rebuild(array, [*array, value]))
        elif isinstance(array, dict):
            raise TypeError(
                f"Cannot append to '{self._name}': it holds a dict, assign a key"
            )
        else:
            array.append(value)

    def __len__(self) -> int:
        return len(self.get_origin())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get_origin())

    def __contains__(self, item: Any) -> bool:
        return item in self.get_origin()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ArrayProp):
            other = other.get_origin()
        return self.get_origin() == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<ArrayProp '{self._name}': {self.get_origin()!r}>"
