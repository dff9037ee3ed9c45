"""Shared pytest fixtures for lazywire tests."""

from collections.abc import Iterator

import pytest

from lazywire.output import logger as demo_logger

pytest_plugins = ["lazywire.integrations.pytest_plugin"]


@pytest.fixture(autouse=True)
def _restore_demo_logger() -> Iterator[None]:
    """Undo handlers and settings installed by ``configure_output``."""
    handlers = list(demo_logger.handlers)
    level = demo_logger.level
    propagate = demo_logger.propagate
    yield
    for handler in list(demo_logger.handlers):
        if handler not in handlers:
            demo_logger.removeHandler(handler)
    demo_logger.setLevel(level)
    demo_logger.propagate = propagate


@pytest.fixture()
def messages() -> list[str]:
    """Collects emitted demonstration lines in order."""
    return []
