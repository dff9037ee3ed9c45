from __future__ import annotations

import pytest

from lazywire import ConstructionError, Demo, DemoRunner

SIMPLE_INSTANCE_LINES = [
    "Running SimpleInstanceDemo...",
    "instantiating Foo now and calling Bar",
    "\tFoo constructor code",
    "\tFoo.Bar() method code",
    "creating expression variable",
    "<pause>",
    "calling expression variable's Bar method",
    "\tFoo constructor code",
    "\tFoo.Bar() method code",
    "Voilà!",
]

EXPRESSIONS_LINES = [
    "Running ExpressionsDemo...",
    "new up the expressions demos",
    "call that doesn't call any of the expressions' methods",
    "\tneither foo nor bar had their methods called",
    "call that only calls Foo's method",
    "\tcalling foo now",
    "\tFoo constructor code",
    "\tFoo.Bar() method code",
    "call that only calls Bar's method",
    "\tcalling bar now",
    "\tBar constructor code",
    "\tBar.Baz() method code",
    "call that only calls both Foo's and Bar's methods",
    "\tcalling foo.Bar now",
    "\tFoo constructor code",
    "\tFoo.Bar() method code",
    "<pause>",
    "\tcalling bar.Baz now",
    "\tBar constructor code",
    "\tBar.Baz() method code",
]


@pytest.fixture()
def demo(messages: list[str]) -> Demo:
    return Demo(emit=messages.append, pause=lambda: messages.append("<pause>"))


def test_simple_instance_defers_provider_construction_past_pause(
    demo: Demo,
    messages: list[str],
) -> None:
    demo.simple_instance_demo()

    assert messages == SIMPLE_INSTANCE_LINES


def test_expressions_construct_only_what_each_consumer_uses(
    demo: Demo,
    messages: list[str],
) -> None:
    demo.expressions_demo()

    assert messages == EXPRESSIONS_LINES


def test_run_sequences_both_scenarios(demo: Demo, messages: list[str]) -> None:
    runner: DemoRunner = demo

    runner.run()

    assert messages == SIMPLE_INSTANCE_LINES + EXPRESSIONS_LINES


def test_new_consumer_constructs_nothing(demo: Demo, messages: list[str]) -> None:
    demo.new_consumer()

    assert messages == []


def test_default_pause_is_a_no_op(messages: list[str]) -> None:
    Demo(emit=messages.append).simple_instance_demo()

    assert "<pause>" not in messages
    assert messages[-1] == "Voilà!"


def test_run_aborts_remaining_steps_on_failure(messages: list[str]) -> None:
    def emit(message: str) -> None:
        if message == "\tBar constructor code":
            msg = "bar cannot be built"
            raise OSError(msg)
        messages.append(message)

    with pytest.raises(ConstructionError) as exc_info:
        Demo(emit=emit).run()

    assert exc_info.value.capability == "Barable"
    assert messages[-1] == "\tcalling bar now"
    assert "call that only calls both Foo's and Bar's methods" not in messages


def test_simple_instance_failure_skips_expressions(messages: list[str]) -> None:
    def pause() -> None:
        msg = "interrupted"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="interrupted"):
        Demo(emit=messages.append, pause=pause).run()

    assert messages[-1] == "creating expression variable"
    assert "Running ExpressionsDemo..." not in messages
