"""Logging setup shared by scripts embedding the page widgets."""

import logging
import sys


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with the project's standard format on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
