from typing import Any


class AccessorError(Exception):
    pass


class InvalidTargetError(AccessorError, TypeError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Argument 1 passed must be an object, a class or a class path, "
            f"{type(value).__name__} given"
        )


class UnknownClassError(AccessorError, LookupError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"An unknown class name was given: {path}")


class UnreflectableClassError(AccessorError, TypeError):
    def __init__(self, path: str, resolved: Any):
        self.path = path
        self.resolved = resolved
        super().__init__(
            f"Cannot access '{path}': it resolves to a "
            f"{type(resolved).__name__}, not a class"
        )


class MemberAccessError(AccessorError, AttributeError):
    def __init__(self, class_name: str, member: str, message: str):
        self.class_name = class_name
        self.member = member
        super().__init__(message)


class UndefinedPropertyError(MemberAccessError):
    def __init__(self, class_name: str, member: str):
        super().__init__(
            class_name, member, f"Undefined property: {class_name}.{member}"
        )


class UndefinedMethodError(MemberAccessError):
    def __init__(self, class_name: str, member: str):
        super().__init__(
            class_name, member, f"Undefined method: {class_name}.{member}()"
        )


class UnboundMemberError(MemberAccessError):
    def __init__(self, class_name: str, member: str, kind: str = "property"):
        self.kind = kind
        super().__init__(
            class_name,
            member,
            f"Accessor for which no object is given cannot access member "
            f"{kind} {class_name}.{member}",
        )
