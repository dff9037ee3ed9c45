"""Memoize a provider explicitly with ``cached``.

Plain providers construct on every call. Wrapping one in ``cached`` keeps the
construction lazy but runs it at most once.
"""

from __future__ import annotations

from lazywire import Foo, cached, provide


def main() -> None:
    events: list[str] = []
    foo_provider = cached(provide(Foo, events.append))

    print(f"evaluated_before_call={foo_provider.evaluated}")  # => evaluated_before_call=False

    first = foo_provider()
    second = foo_provider()
    third = foo_provider()

    print(f"constructions={len(events)}")  # => constructions=1
    print(f"same_identity={first is second is third}")  # => same_identity=True

    foo_provider.reset()
    foo_provider()
    print(f"constructions_after_reset={len(events)}")  # => constructions_after_reset=2


if __name__ == "__main__":
    main()
