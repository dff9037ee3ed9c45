"""Providers defer construction until they are called.

This topic demonstrates:

1. Building an instance immediately runs its constructor right away.
2. Creating a provider runs nothing.
3. Every provider call constructs a fresh instance.
"""

from __future__ import annotations

from lazywire import Foo, Fooable, Provider, provide


def main() -> None:
    events: list[str] = []

    foo = Foo(events.append)
    print(f"immediate_constructions={len(events)}")  # => immediate_constructions=1

    events.clear()
    foo_provider: Provider[Fooable] = provide(Foo, events.append)
    print(f"provider_created_constructions={len(events)}")  # => provider_created_constructions=0

    first = foo_provider()
    second = foo_provider()
    constructions = events.count("\tFoo constructor code")
    print(f"after_two_calls_constructions={constructions}")  # => after_two_calls_constructions=2
    print(f"same_identity={first is second}")  # => same_identity=False
    print(f"immediate_is_fooable={isinstance(foo, Fooable)}")  # => immediate_is_fooable=True


if __name__ == "__main__":
    main()
