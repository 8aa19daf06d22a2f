"""Build timestamp lookup for the buildinfo endpoint.

There is no build pipeline injecting a real build date, so the modification
time of the running executable stands in for it.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

TIMESTAMP_FORMAT = "%Y%m%d-%H:%M:%S"


def resolve_build_timestamp(logger: logging.Logger, executable: str | None = None) -> str:
    """Return the executable's modification time as ``YYYYMMDD-HH:MM:SS``.

    Args:
        logger: Logger receiving the error record when the lookup fails.
        executable: Path to stat. Defaults to the path the process was
            invoked with (``sys.argv[0]``).

    Returns:
        The formatted mtime in local time, or the current local time if the
        file cannot be stat'ed. Never raises.
    """
    if executable is not None:
        path = executable
    else:
        # An empty argv leaves nothing to stat; the OSError branch covers "".
        path = sys.argv[0] if sys.argv else ""
    try:
        mtime = os.stat(path).st_mtime
    except OSError as exc:
        logger.error("Failed to get binary creation timestamp, using now(): %s", exc)
        return datetime.now().strftime(TIMESTAMP_FORMAT)

    return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)
