import inspect
import logging
from typing import Any, Dict, List, Optional, Tuple

from accessor.spec import AccessorProtocol

from .array import ArrayProp
from .exceptions import (
    InvalidTargetError,
    MemberAccessError,
    UnboundMemberError,
    UndefinedMethodError,
    UndefinedPropertyError,
)
from .flags import FlagsLike, WrapFlags, parse_flags
from .reflection import (
    MethodHandle,
    PropertyHandle,
    find_method,
    find_property,
    is_dunder,
    member_names,
    resolve_class,
)

log = logging.getLogger(__name__)

_ARRAY_TYPES = (list, tuple, dict)
_SCALAR_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    range,
    set,
    frozenset,
)

# Slot names as stored, see Accessor.__slots__
_INTERNALS = frozenset(
    f"_Accessor__{name}"
    for name in ("klass", "origin", "flags", "properties", "methods")
)


def _is_plain_object(value: Any) -> bool:
    if isinstance(value, _ARRAY_TYPES + _SCALAR_TYPES):
        return False
    return not (
        inspect.isclass(value) or inspect.ismodule(value) or inspect.isroutine(value)
    )


def unwrap(value: Any) -> Any:
    """Returns the object an Accessor or ArrayProp stands for, else the value."""
    if isinstance(value, Accessor):
        origin = value.get_origin()
        return value.get_class() if origin is None else origin
    if isinstance(value, ArrayProp):
        return value.get_origin()
    return value


def access(value: Any, flags: FlagsLike = WrapFlags.ARRAY) -> "Accessor":
    """Creates an Accessor that wraps the given object, class or class path."""
    return Accessor.from_(value, flags)


class Accessor(AccessorProtocol):
    """
    Exposes the non-public members of an object (or a class) as if they were
    public.

    Attribute syntax is forwarded to the wrapped target:

        acc = access(user)
        acc.password            # reads user._User__password
        acc.password = "x"      # writes it
        acc.check("x")          # calls user._User__check("x")

    The explicit methods (get, set, call, has, ...) cover names that collide
    with the accessor's own API. Resolved members are memoized per accessor.
    """

    __slots__ = ("__klass", "__origin", "__flags", "__properties", "__methods")

    @classmethod
    def from_(cls, value: Any, flags: FlagsLike = WrapFlags.ARRAY) -> "Accessor":
        return cls(value, flags)

    def __init__(self, value: Any, flags: FlagsLike = WrapFlags.ARRAY):
        origin: Optional[Any] = None
        if isinstance(value, Accessor):
            klass, origin = value.get_class(), value.get_origin()
        elif isinstance(value, str):
            klass = resolve_class(value)
        elif inspect.isclass(value):
            klass = value
        elif value is None:
            raise InvalidTargetError(value)
        else:
            klass, origin = type(value), value

        # Plain assignment is forwarded to the target, see __setattr__
        object.__setattr__(self, "_Accessor__klass", klass)
        object.__setattr__(self, "_Accessor__origin", origin)
        object.__setattr__(self, "_Accessor__flags", parse_flags(flags))
        object.__setattr__(self, "_Accessor__properties", {})
        object.__setattr__(self, "_Accessor__methods", {})

    def get_class_name(self) -> str:
        return f"{self.__klass.__module__}.{self.__klass.__qualname__}"

    def get_class(self) -> type:
        return self.__klass

    def get_origin(self) -> Optional[Any]:
        return self.__origin

    def get_flags(self) -> WrapFlags:
        return self.__flags

    def __property(self, name: str) -> PropertyHandle:
        properties: Dict[str, PropertyHandle] = self.__properties
        handle = properties.get(name)
        if handle is None:
            handle = find_property(self.__klass, name, self.__origin)
            if handle is None:
                raise UndefinedPropertyError(self.get_class_name(), name)
            log.debug(
                f"Resolved property '{name}' of {self.get_class_name()} "
                f"as '{handle.attr}' (static={handle.is_static})"
            )
            properties[name] = handle

        if not handle.is_static and self.__origin is None:
            raise UnboundMemberError(self.get_class_name(), name, "property")
        return handle

    def __method(self, name: str) -> MethodHandle:
        methods: Dict[str, MethodHandle] = self.__methods
        handle = methods.get(name)
        if handle is None:
            handle = find_method(self.__klass, name)
            if handle is None:
                raise UndefinedMethodError(self.get_class_name(), name)
            log.debug(
                f"Resolved method '{name}' of {self.get_class_name()} "
                f"as '{handle.attr}' (static={handle.is_static})"
            )
            methods[name] = handle

        if not handle.is_static and self.__origin is None:
            raise UnboundMemberError(self.get_class_name(), name, "method")
        return handle

    def get_direct(self, name: str) -> Any:
        handle = self.__property(name)
        target = self.__klass if handle.is_static else self.__origin
        return getattr(target, handle.attr)

    def set_direct(self, name: str, value: Any) -> None:
        handle = self.__property(name)
        # Class attributes are written where they are declared
        target = handle.owner if handle.is_static else self.__origin
        setattr(target, handle.attr, value)

    def get(self, name: str) -> Any:
        value = self.get_direct(name)
        if isinstance(value, _ARRAY_TYPES) and self.__flags & WrapFlags.ARRAY:
            return ArrayProp(self, name)
        if _is_plain_object(value) and self.__flags & WrapFlags.OBJECT:
            return Accessor(value, self.__flags)
        return value

    def set(self, name: str, value: Any) -> None:
        self.set_direct(name, unwrap(value))

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        method = self.__method(name)
        return method.bind(self.__klass, self.__origin)(*args, **kwargs)

    def has(self, name: str) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.__property(name)
        except MemberAccessError:
            return False
        return True

    def has_method(self, name: str) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.__method(name)
        except MemberAccessError:
            return False
        return True

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; never forward internals
        if name in _INTERNALS or is_dunder(name):
            raise AttributeError(name)

        try:
            return self.get(name)
        except UndefinedPropertyError as missing:
            try:
                method = self.__method(name)
            except UndefinedMethodError:
                raise missing from None
        return method.bind(self.__klass, self.__origin)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: Any) -> bool:
        return self.has(name)

    def __reduce__(self) -> Tuple[Any, ...]:
        # copy and pickle rebuild from the target, __setattr__ would forward slots
        target = self.__klass if self.__origin is None else self.__origin
        return (type(self), (target, self.__flags))

    def __dir__(self) -> List[str]:
        own = set(object.__dir__(self))
        return sorted(own | member_names(self.__klass, self.__origin))

    def __repr__(self) -> str:
        if self.__origin is None:
            return f"<Accessor: class {self.get_class_name()}>"
        return f"<Accessor: {self.get_class_name()} object>"
