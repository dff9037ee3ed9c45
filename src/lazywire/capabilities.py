from __future__ import annotations

from typing import Protocol, runtime_checkable

from lazywire.output import Emitter, output_message


@runtime_checkable
class Fooable(Protocol):
    """Capability exposing the ``bar`` operation."""

    def bar(self) -> None: ...


@runtime_checkable
class Barable(Protocol):
    """Capability exposing the ``baz`` operation."""

    def baz(self) -> None: ...


class Foo:
    """``Fooable`` whose constructor announces itself.

    The constructor emits unconditionally, which makes the moment of
    construction visible to whoever reads the emitted lines.
    """

    def __init__(self, emit: Emitter = output_message) -> None:
        self._emit = emit
        self._emit("\tFoo constructor code")

    def bar(self) -> None:
        self._emit("\tFoo.Bar() method code")


class Bar:
    """``Barable`` whose constructor announces itself."""

    def __init__(self, emit: Emitter = output_message) -> None:
        self._emit = emit
        self._emit("\tBar constructor code")

    def baz(self) -> None:
        self._emit("\tBar.Baz() method code")
