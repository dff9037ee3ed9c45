from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Provider = Callable[[], T]
"""Zero-argument callable that builds an instance of ``T`` when invoked.

Any such callable is a provider, including a class whose constructor takes no
arguments. Every invocation runs the underlying constructor again.
"""

_NOT_EVALUATED: Any = object()


def provide(factory: Callable[..., T], /, *args: Any, **kwargs: Any) -> Provider[T]:
    """Bind constructor arguments into a provider without calling the factory.

    Examples:
        .. code-block:: python

            foo_provider = provide(Foo, emit=events.append)
            foo = foo_provider()  # Foo.__init__ runs here

    Args:
        factory: Callable that builds the instance.
        *args: Positional arguments forwarded on every invocation.
        **kwargs: Keyword arguments forwarded on every invocation.

    Returns:
        A provider that calls ``factory(*args, **kwargs)`` each time it is called.

    """
    if not args and not kwargs:
        return factory
    return functools.partial(factory, *args, **kwargs)


class CachedProvider(Generic[T]):
    """Memoize a provider so its instance is constructed at most once.

    The wrapped provider is not called until the first ``__call__``. If that
    evaluation raises, nothing is cached and the next call evaluates again.
    There is no locking: share a ``CachedProvider`` between threads only with
    external synchronization.
    """

    def __init__(self, provider: Provider[T]) -> None:
        self._provider = provider
        self._value: T = _NOT_EVALUATED

    @property
    def evaluated(self) -> bool:
        """Whether an instance is currently cached."""
        return self._value is not _NOT_EVALUATED

    def reset(self) -> None:
        """Drop the cached instance so the next call constructs a new one."""
        self._value = _NOT_EVALUATED

    def __call__(self) -> T:
        if self._value is _NOT_EVALUATED:
            self._value = self._provider()
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._provider!r}, evaluated={self.evaluated})"


def cached(provider: Provider[T]) -> CachedProvider[T]:
    """Wrap ``provider`` in a ``CachedProvider``."""
    return CachedProvider(provider)
