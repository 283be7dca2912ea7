"""
Logging setup for dharma.

Library modules log through `logging.getLogger(__name__)`; only the
command-line entry point configures handlers.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """Configure root logging for command-line use.

    Args:
        verbose: Enable DEBUG output
        level: Level name used when not verbose, normally
            Settings.log_level (WARNING); INFO when omitted
    """
    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
