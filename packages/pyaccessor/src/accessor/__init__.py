from .core import Accessor, access, unwrap
from .array import ArrayProp
from .flags import WrapFlags, parse_flags
from .exceptions import (
    AccessorError,
    InvalidTargetError,
    UnknownClassError,
    UnreflectableClassError,
    MemberAccessError,
    UndefinedPropertyError,
    UndefinedMethodError,
    UnboundMemberError,
)

__all__ = [
    "Accessor",
    "access",
    "unwrap",
    "ArrayProp",
    "WrapFlags",
    "parse_flags",
    "AccessorError",
    "InvalidTargetError",
    "UnknownClassError",
    "UnreflectableClassError",
    "MemberAccessError",
    "UndefinedPropertyError",
    "UndefinedMethodError",
    "UnboundMemberError",
]
