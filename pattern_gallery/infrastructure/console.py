"""Console Shell: prints narration to stdout and runs a demo as a process.

Invariants:
    - Lines reach stdout in the order they are said, one print per line
    - run_demo returns 0 on completion; errors always propagate
    - A PatternError is logged once at ERROR with its code and envelope before propagating
"""

import logging
from typing import Callable

from pattern_gallery.config import get_settings
from pattern_gallery.core.domain_types import PatternName
from pattern_gallery.core.errors import PatternError
from pattern_gallery.core.narration import Narrator
from pattern_gallery.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


class ConsoleNarrator:
    """Narrator that prints every line immediately."""

    def say(self, line: str = "") -> None:
        print(line, flush=True)


def run_demo(pattern: PatternName, demo: Callable[[Narrator], None]) -> int:
    """Configure logging from settings, run `demo` against stdout, return exit status."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Running {pattern.value} demo", extra={"pattern": pattern.value})
    try:
        demo(ConsoleNarrator())
    except PatternError as exc:
        logger.error(
            f"PatternError: {exc.message}",
            extra={
                "pattern": pattern.value,
                "error_code": exc.code,
                "error": exc.to_dict()["error"],
            },
        )
        raise
    logger.info(f"Finished {pattern.value} demo", extra={"pattern": pattern.value})
    return 0
