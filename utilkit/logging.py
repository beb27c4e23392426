"""Console logging for utilkit.

The library itself only emits records through ``logging.getLogger(__name__)``
and installs no handlers. Applications and test sessions that want to see
those records call :func:`configure_logging`, which attaches a Rich console
handler to the ``utilkit`` logger.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "utilkit"

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Prefix records from other packages with their top-level logger name.

    ``urllib3.connectionpool`` becomes ``[urllib3]``. Records from ``project``
    or its children get an empty prefix. Records are never dropped.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        root = record.name.split(".", 1)[0]
        record.prefix = "" if root == self.project else f"[{root}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Disable to get plain output.

    Returns:
        RichHandler: handler ready to attach to a logger.
    """
    color_system: Optional[ColorSystem] = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Attach a console handler to the ``utilkit`` logger.

    Calling it again swaps the handler installed by the previous call rather
    than stacking a second one.
    """
    logger = logging.getLogger(PROJECT_PREFIX)

    for existing in list(logger.handlers):
        if getattr(existing, "_utilkit_console", False):
            logger.removeHandler(existing)

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    handler._utilkit_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug_mode else level)

    logger.debug("Console logging configured at %s", logging.getLevelName(handler.level))
    return handler
