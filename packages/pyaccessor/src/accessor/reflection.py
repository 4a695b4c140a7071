import builtins
import functools
import inspect
import logging
import pkgutil
import types
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Set, Tuple, get_origin

from .exceptions import UnknownClassError, UnreflectableClassError

log = logging.getLogger(__name__)

# Builtin types store their classmethods (int.from_bytes) as descriptors
_CLASS_METHOD_TYPES = (classmethod, types.ClassMethodDescriptorType)


@dataclass(frozen=True)
class PropertyHandle:
    name: str  # The name the caller asked for
    attr: str  # The attribute actually stored, possibly mangled
    owner: type
    is_static: bool = False  # Class attribute rather than instance attribute


@dataclass(frozen=True)
class MethodHandle:
    name: str
    attr: str
    owner: type
    raw: Any  # The object found in owner.__dict__, not yet bound
    is_static: bool = False  # @staticmethod or @classmethod
    is_class: bool = False  # @classmethod

    def bind(self, klass: type, instance: Any = None) -> Any:
        return self.raw.__get__(None if self.is_static else instance, klass)


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def mangle(class_name: str, name: str) -> str:
    """
    Returns the name Python stores `__name` under inside class `class_name`.

    Follows the compiler's rule: leading underscores of the class name are
    stripped, and a class name made only of underscores disables mangling.
    """
    bare = name[2:] if name.startswith("__") else name
    stripped = class_name.lstrip("_")
    if not stripped:
        return f"__{bare}"
    return f"_{stripped}__{bare}"


def candidate_names(klass: type, name: str) -> List[str]:
    names = [name]
    # Dunders and single-underscore names are never mangled by Python
    if is_dunder(name) or (name.startswith("_") and not name.startswith("__")):
        return names
    if name in ("", "__"):
        return names

    for base in klass.__mro__:
        mangled = mangle(base.__name__, name)
        if mangled not in names:
            names.append(mangled)
    return names


def demangle(klass: type, attr: str) -> str:
    for base in klass.__mro__:
        stripped = base.__name__.lstrip("_")
        prefix = f"_{stripped}__"
        if stripped and attr.startswith(prefix) and not attr.endswith("__"):
            return attr[len(prefix) :]
    return attr


def resolve_class(path: str) -> type:
    """
    Resolves a class path such as 'pkg.mod.Class' or 'pkg.mod:Outer.Inner'.

    A bare name without any module part is looked up in builtins.
    """
    try:
        if path and "." not in path and ":" not in path:
            resolved = getattr(builtins, path)
        else:
            resolved = pkgutil.resolve_name(path)
    except (ImportError, AttributeError, ValueError) as e:
        raise UnknownClassError(path) from e

    if not inspect.isclass(resolved):
        raise UnreflectableClassError(path, resolved)
    log.debug(f"Resolved class path '{path}' to {resolved!r}")
    return resolved


def is_method_object(value: Any) -> bool:
    if inspect.isdatadescriptor(value) or isinstance(
        value, functools.cached_property
    ):
        return False
    return isinstance(value, (staticmethod, classmethod)) or inspect.isroutine(
        value
    )


def _is_instance_member(value: Any) -> bool:
    # property, __slots__ members, C-level getset descriptors
    return inspect.isdatadescriptor(value) or isinstance(
        value, functools.cached_property
    )


def _lookup_class_attr(klass: type, attr: str) -> Optional[Tuple[type, Any]]:
    for owner in klass.__mro__:
        namespace = vars(owner)
        if attr in namespace:
            return owner, namespace[attr]
    return None


def _declared_annotations(owner: type) -> Dict[str, Any]:
    try:
        return inspect.get_annotations(owner)
    except NameError:
        # Annotations referencing names that cannot be evaluated
        return dict(owner.__dict__.get("__annotations__", {}))


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _is_declared_field(klass: type, attr: str) -> bool:
    # Annotated names are per-instance fields unless marked ClassVar,
    # even when the class body assigns a default (dataclass style)
    for owner in klass.__mro__:
        annotations = _declared_annotations(owner)
        if attr in annotations:
            return not _is_classvar(annotations[attr])
    return False


def _instance_dict(instance: Any) -> Dict[str, Any]:
    namespace = getattr(instance, "__dict__", None)
    return namespace if isinstance(namespace, dict) else {}


def find_property(
    klass: type, name: str, instance: Any = None
) -> Optional[PropertyHandle]:
    instance_attrs = _instance_dict(instance) if instance is not None else {}

    for attr in candidate_names(klass, name):
        if attr in instance_attrs:
            return PropertyHandle(name, attr, klass, is_static=False)

        found = _lookup_class_attr(klass, attr)
        if found is not None:
            owner, value = found
            if is_method_object(value):
                continue
            is_static = not (
                _is_instance_member(value) or _is_declared_field(klass, attr)
            )
            return PropertyHandle(name, attr, owner, is_static=is_static)

        if _is_declared_field(klass, attr):
            return PropertyHandle(name, attr, klass, is_static=False)

    return None


def find_method(klass: type, name: str) -> Optional[MethodHandle]:
    for attr in candidate_names(klass, name):
        found = _lookup_class_attr(klass, attr)
        if found is None:
            continue
        owner, value = found
        if not is_method_object(value):
            continue
        return MethodHandle(
            name,
            attr,
            owner,
            value,
            is_static=isinstance(value, (staticmethod,) + _CLASS_METHOD_TYPES),
            is_class=isinstance(value, _CLASS_METHOD_TYPES),
        )
    return None


def member_names(klass: type, instance: Any = None) -> Set[str]:
    attrs: List[str] = []
    for owner in klass.__mro__:
        if owner is object:
            continue
        attrs.extend(vars(owner))
        attrs.extend(_declared_annotations(owner))
    if instance is not None:
        attrs.extend(_instance_dict(instance))
    return {demangle(klass, attr) for attr in attrs if not is_dunder(attr)}
