from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable

from lazywire.settings import DemoSettings

Emitter = Callable[[str], None]
Pause = Callable[[], None]

logger = logging.getLogger(__name__)

_installed_handler: logging.Handler | None = None
_MESSAGE_FORMAT = "%(asctime)s - %(message)s"


def output_message(message: str) -> None:
    """Emit one demonstration line through the ``lazywire.output`` logger."""
    logger.info(message)


def configure_output(settings: DemoSettings) -> logging.Handler:
    """Route demonstration lines to stdout prefixed with the current time.

    Calling this again replaces the handler installed by a previous call.

    Args:
        settings: Source of the timestamp format and log level.

    Returns:
        The installed handler.

    """
    global _installed_handler  # noqa: PLW0603
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_MESSAGE_FORMAT, datefmt=settings.time_format))
    logger.addHandler(handler)
    _installed_handler = handler
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return handler


def no_pause() -> None:
    """Pause hook that returns immediately."""


def countdown_pause(
    seconds: int,
    *,
    emit: Emitter = output_message,
    sleep: Callable[[float], None] = time.sleep,
) -> Pause:
    """Build a pause hook that blocks for ``seconds`` and counts them out.

    A zero-second countdown returns ``no_pause``.
    """
    if seconds <= 0:
        return no_pause

    def _pause() -> None:
        emit(f"sleeping for {seconds}s")
        for tick in range(1, seconds + 1):
            sleep(1)
            emit(str(tick))

    return _pause
