from __future__ import annotations

import logging

from lazywire.demo import Demo
from lazywire.exceptions import LazyWireError
from lazywire.output import configure_output, countdown_pause
from lazywire.settings import DemoSettings

logger = logging.getLogger(__name__)


def main(settings: DemoSettings | None = None) -> int:
    """Run the demonstration to completion and return the process exit code."""
    if settings is None:
        settings = DemoSettings()
    configure_output(settings)

    demo = Demo(pause=countdown_pause(settings.pause_seconds))
    try:
        demo.run()
    except LazyWireError:
        logger.exception("Demonstration aborted")
        return 1
    return 0


def main_entry() -> None:
    raise SystemExit(main())
