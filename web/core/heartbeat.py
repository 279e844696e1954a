"""Liveness probe support.

Kubernetes-style liveness checks look for a recently touched file; the
heartbeat keeps that file fresh for as long as the event loop is healthy.
"""

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def touch_liveness_file(path: Path) -> bool:
    """Create (or truncate) the liveness file. Returns False on failure."""
    try:
        Path(path).write_bytes(b"")
    except OSError:
        logger.warning("Unable to write file for liveness check!")
        return False
    return True


async def heartbeat(path: Path, interval: float) -> None:
    """Touch ``path`` every ``interval`` seconds until cancelled.

    A failed write is logged and retried on the next tick; it never stops
    the loop.
    """
    logger.info(f"Liveness heartbeat writing {path} every {interval}s")
    while True:
        await asyncio.sleep(interval)
        touch_liveness_file(path)
