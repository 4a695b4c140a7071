from typing import Any, Iterator, Optional, Protocol


class AccessorProtocol(Protocol):
    """
    Defines the contract for an Accessor.

    An Accessor wraps a single object (or a class, for class-level access only)
    and exposes its non-public members as if they were public.
    """

    def get_class_name(self) -> str:
        """
        Returns the qualified name of the wrapped class.
        Example: "my_app.models.User"
        """
        ...

    def get_class(self) -> type:
        """
        Returns the wrapped class object.
        """
        ...

    def get_origin(self) -> Optional[Any]:
        """
        Returns the wrapped instance, or None for a class-only accessor.
        """
        ...

    def get_direct(self, name: str) -> Any:
        """
        Reads a property without applying any wrapping.

        Raises:
            UndefinedPropertyError: The property cannot be resolved.
            UnboundMemberError: The property belongs to an instance but no
                instance is bound.
        """
        ...

    def set_direct(self, name: str, value: Any) -> None:
        """
        Writes a property as-is.
        """
        ...

    def get(self, name: str) -> Any:
        """
        Reads a property, wrapping array and object values according to the
        accessor's WrapFlags.
        """
        ...

    def set(self, name: str, value: Any) -> None:
        """
        Writes a property, unwrapping Accessor and ArrayProp values first.
        """
        ...

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Invokes a method and returns its result.

        Raises:
            UndefinedMethodError: The method cannot be resolved.
            UnboundMemberError: The method needs an instance but none is bound.
        """
        ...

    def has(self, name: str) -> bool:
        """
        Reports whether a property is resolvable. Never raises.
        """
        ...


class ArrayPropProtocol(Protocol):
    """
    Defines the contract for an array property view.

    The view addresses a property by name, so every operation works on the
    value currently held by the property.
    """

    def get_origin(self) -> Any:
        """
        Returns the array currently stored in the property.
        """
        ...

    def get_name(self) -> str:
        ...

    def get_accessor(self) -> AccessorProtocol:
        ...

    def __getitem__(self, key: Any) -> Any:
        ...

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Writes an item. Immutable arrays (tuples) are rebuilt and stored back
        into the property.
        """
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...
