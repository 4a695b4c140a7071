from .protocols import AccessorProtocol, ArrayPropProtocol

__all__ = ["AccessorProtocol", "ArrayPropProtocol"]
