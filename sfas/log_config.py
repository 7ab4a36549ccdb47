"""Root logger setup for ``sfas-server`` and ``sfas-sidecar``.

Log records always go to stderr. The sidecar answers requests on
stdout, so a stray log line there would corrupt the reply stream.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def resolve_level(level: str, *, verbose: bool = False) -> int:
    """Turn a configured level name such as ``"warning"`` into a level number.

    Raises:
        ValueError: If ``level`` names no standard logging level.
    """
    if verbose:
        return logging.DEBUG
    number = logging.getLevelName(level.strip().upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def setup(*, verbose: bool = False, level: str = "INFO") -> int:
    """Send records at ``level`` and above to stderr.

    Args:
        verbose: Log everything down to DEBUG, ignoring ``level``.
        level: Level name from ``SFAS_LOG_LEVEL``.

    Returns:
        The level the root logger was configured with.
    """
    number = resolve_level(level, verbose=verbose)
    logging.basicConfig(
        level=number, format=LOG_FORMAT, datefmt=DATE_FORMAT, stream=sys.stderr
    )
    return number
