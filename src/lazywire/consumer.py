from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from lazywire.capabilities import Barable, Fooable
from lazywire.exceptions import ConstructionError, LazyWireError, OperationError
from lazywire.output import Emitter, Pause, no_pause, output_message
from lazywire.providers import Provider

T = TypeVar("T")


class LazyConsumer:
    """Hold one provider per capability and build each only when it is used.

    Neither provider is called by the constructor. Every method that needs a
    capability calls its provider again, so a ``LazyConsumer`` never reuses an
    instance unless the provider itself memoizes (see ``CachedProvider``).
    """

    def __init__(
        self,
        foo_provider: Provider[Fooable],
        bar_provider: Provider[Barable],
        *,
        emit: Emitter = output_message,
        pause: Pause = no_pause,
    ) -> None:
        self._foo_provider = foo_provider
        self._bar_provider = bar_provider
        self._emit = emit
        self._pause = pause

    def call_nothing(self) -> None:
        self._emit("\tneither foo nor bar had their methods called")

    def call_foo(self) -> None:
        self._emit("\tcalling foo now")
        self._run_foo()

    def call_bar(self) -> None:
        self._emit("\tcalling bar now")
        self._run_bar()

    def call_foo_and_bar(self) -> None:
        """Run foo, pause, then run bar; each is built right before its operation."""
        self._emit("\tcalling foo.Bar now")
        self._run_foo()

        self._pause()

        self._emit("\tcalling bar.Baz now")
        self._run_bar()

    def _run_foo(self) -> None:
        foo = _construct(self._foo_provider, capability="Fooable")
        _operate(foo.bar, capability="Fooable", operation="bar")

    def _run_bar(self) -> None:
        bar = _construct(self._bar_provider, capability="Barable")
        _operate(bar.baz, capability="Barable", operation="baz")


def _construct(provider: Provider[T], *, capability: str) -> T:
    try:
        return provider()
    except LazyWireError:
        raise
    except Exception as exc:
        raise ConstructionError(capability) from exc


def _operate(call: Callable[[], None], *, capability: str, operation: str) -> None:
    try:
        call()
    except LazyWireError:
        raise
    except Exception as exc:
        raise OperationError(capability, operation) from exc
