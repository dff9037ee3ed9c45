"""A consumer pays only for the capabilities it exercises.

Each ``LazyConsumer`` holds a ``Fooable`` provider and a ``Barable`` provider.
Only the methods that need a capability call its provider.
"""

from __future__ import annotations

from lazywire import Bar, Foo, LazyConsumer, provide


def _constructions(method_name: str) -> str:
    events: list[str] = []
    consumer = LazyConsumer(
        provide(Foo, events.append),
        provide(Bar, events.append),
        emit=events.append,
    )
    getattr(consumer, method_name)()
    built = [event.strip().split()[0] for event in events if event.endswith("constructor code")]
    return ",".join(built) or "none"


def main() -> None:
    print(f"call_nothing={_constructions('call_nothing')}")  # => call_nothing=none
    print(f"call_foo={_constructions('call_foo')}")  # => call_foo=Foo
    print(f"call_bar={_constructions('call_bar')}")  # => call_bar=Bar
    print(f"call_foo_and_bar={_constructions('call_foo_and_bar')}")  # => call_foo_and_bar=Foo,Bar


if __name__ == "__main__":
    main()
