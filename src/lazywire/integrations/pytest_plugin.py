"""Pytest fixtures for observing when providers construct their capabilities.

Enable with ``pytest_plugins = ["lazywire.integrations.pytest_plugin"]`` in a
``conftest.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from lazywire.capabilities import Barable, Fooable


class RecordingFoo:
    """``Fooable`` that records ``foo-ctor`` and ``foo-op`` into a shared log."""

    def __init__(self, log: list[str]) -> None:
        self._log = log
        self._log.append("foo-ctor")

    def bar(self) -> None:
        self._log.append("foo-op")


class RecordingBar:
    """``Barable`` that records ``bar-ctor`` and ``bar-op`` into a shared log."""

    def __init__(self, log: list[str]) -> None:
        self._log = log
        self._log.append("bar-ctor")

    def baz(self) -> None:
        self._log.append("bar-op")


@dataclass
class RecordingProviders:
    """Pair of providers writing into one ordered log."""

    log: list[str] = field(default_factory=list)

    def foo(self) -> Fooable:
        return RecordingFoo(self.log)

    def bar(self) -> Barable:
        return RecordingBar(self.log)

    def count(self, tag: str) -> int:
        return self.log.count(tag)


@pytest.fixture()
def event_log() -> list[str]:
    """Empty ordered log shared by instrumented capabilities."""
    return []


@pytest.fixture()
def recording_providers(event_log: list[str]) -> RecordingProviders:
    """Providers for ``Fooable`` and ``Barable`` that record into ``event_log``.

    Creating the fixture records nothing; entries appear only once
    ``recording_providers.foo()`` or ``recording_providers.bar()`` is called.
    """
    return RecordingProviders(log=event_log)
