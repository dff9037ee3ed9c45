from __future__ import annotations


class LazyWireError(Exception):
    """Represent a base class for all lazywire failures.

    Catch this type when you want to handle any lazywire error path without
    matching each concrete exception class individually.
    """


class ConstructionError(LazyWireError):
    """Signal that a provider failed while constructing a capability.

    Raised by ``LazyConsumer`` when invoking a provider raises. The original
    exception is chained as ``__cause__`` and the capability name is kept in
    ``capability``.
    """

    def __init__(self, capability: str) -> None:
        self.capability = capability
        super().__init__(f"Failed to construct {capability!r} from its provider")


class OperationError(LazyWireError):
    """Signal that a constructed capability failed while running its operation.

    Raised by ``LazyConsumer`` when ``bar()`` or ``baz()`` raises. The original
    exception is chained as ``__cause__``.
    """

    def __init__(self, capability: str, operation: str) -> None:
        self.capability = capability
        self.operation = operation
        super().__init__(f"Operation {capability}.{operation}() failed")
