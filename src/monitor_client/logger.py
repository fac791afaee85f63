import logging
import os
import sys
from typing import Optional, Union

from rich.logging import RichHandler


def is_rich_enabled() -> bool:
    """Check if Rich log output is requested through the environment."""
    return os.environ.get("MONITOR_RICH_UI", "false").lower() in ("true", "1", "yes")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    stream=sys.stdout,
    fmt: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
):
    """
    Sets up the root logger with a stream handler and basic formatting.
    Uses a Rich handler when MONITOR_RICH_UI is enabled, otherwise standard logging.
    Does nothing if handlers are already configured.
    Configures `logger` instead of the root logger when one is given.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logger if logger is not None else logging.getLogger()
    if not root_logger.hasHandlers():
        if is_rich_enabled():
            handler = RichHandler(rich_tracebacks=True, show_path=False)
        else:
            if fmt is None:
                if level == logging.DEBUG:
                    fmt = "%(asctime)s | %(levelname)-5s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
                else:
                    # Default format for INFO level and above
                    fmt = "%(asctime)s | %(levelname)-5s | %(message)s"

            handler = logging.StreamHandler(stream)
            handler.setFormatter(logging.Formatter(fmt))

        root_logger.setLevel(level)
        root_logger.addHandler(handler)

    # Optionally allow log level override via env var
    env_level = os.environ.get("LOG_LEVEL")
    if env_level:
        root_logger.setLevel(env_level.upper())
