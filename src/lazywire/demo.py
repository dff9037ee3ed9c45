"""Scenarios contrasting immediate construction with provider-deferred construction."""

from __future__ import annotations

from typing import Protocol

from lazywire.capabilities import Bar, Foo, Fooable
from lazywire.consumer import LazyConsumer
from lazywire.output import Emitter, Pause, no_pause, output_message
from lazywire.providers import Provider, provide


class DemoRunner(Protocol):
    def run(self) -> None: ...


class Demo:
    """Run the simple-instance scenario and then the expressions scenario.

    The driver never catches: the first failing step aborts everything after it.
    """

    def __init__(self, *, emit: Emitter = output_message, pause: Pause = no_pause) -> None:
        self._emit = emit
        self._pause = pause

    def run(self) -> None:
        self.simple_instance_demo()
        self.expressions_demo()

    def simple_instance_demo(self) -> None:
        self._emit("Running SimpleInstanceDemo...")
        self._emit("instantiating Foo now and calling Bar")
        foo: Fooable = Foo(self._emit)
        foo.bar()

        self._emit("creating expression variable")
        foo_provider: Provider[Fooable] = provide(Foo, self._emit)

        # Foo's constructor has not run for foo_provider yet.
        self._pause()

        self._emit("calling expression variable's Bar method")
        foo_provider().bar()

        self._emit("Voilà!")

    def expressions_demo(self) -> None:
        self._emit("Running ExpressionsDemo...")
        self._emit("new up the expressions demos")

        demo_none = self.new_consumer()
        demo_foo = self.new_consumer()
        demo_bar = self.new_consumer()
        demo_both = self.new_consumer()

        self._emit("call that doesn't call any of the expressions' methods")
        demo_none.call_nothing()

        self._emit("call that only calls Foo's method")
        demo_foo.call_foo()

        self._emit("call that only calls Bar's method")
        demo_bar.call_bar()

        self._emit("call that only calls both Foo's and Bar's methods")
        demo_both.call_foo_and_bar()

    def new_consumer(self) -> LazyConsumer:
        return LazyConsumer(
            provide(Foo, self._emit),
            provide(Bar, self._emit),
            emit=self._emit,
            pause=self._pause,
        )
