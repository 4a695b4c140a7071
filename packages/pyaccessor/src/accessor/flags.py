from enum import IntFlag
from typing import Iterable, Union


class WrapFlags(IntFlag):
    NONE = 0x00
    ARRAY = 0x01  # list / tuple / dict values become ArrayProp
    OBJECT = 0x02  # plain objects become nested Accessors
    ALL = ARRAY | OBJECT


FlagsLike = Union[int, str, Iterable[str]]


def _parse_name(name: str) -> WrapFlags:
    key = name.strip().upper()
    try:
        return WrapFlags[key]
    except KeyError:
        valid = ", ".join(n.lower() for n in WrapFlags.__members__)
        raise ValueError(
            f"Unknown wrap flag '{name}'. Expected one of: {valid}"
        ) from None


def parse_flags(value: FlagsLike) -> WrapFlags:
    """
    Normalizes the accepted spellings of wrap flags into a WrapFlags value.

    Accepts an int (or WrapFlags), a single flag name ("array", "object",
    "all", "none"; case-insensitive) or an iterable of names which are OR-ed
    together.
    """
    if isinstance(value, bool):
        raise ValueError(f"Wrap flags cannot be a boolean: {value!r}")
    if isinstance(value, int):
        if value & ~int(WrapFlags.ALL):
            raise ValueError(f"Unknown wrap flag bits in {value:#04x}")
        return WrapFlags(value)
    if isinstance(value, str):
        return _parse_name(value)

    flags = WrapFlags.NONE
    for name in value:
        flags |= _parse_name(name)
    return flags
