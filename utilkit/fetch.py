from __future__ import annotations

import asyncio
import logging
from typing import List

from .errors import ErrorKind
from .models import Err, Ok, Result

logger = logging.getLogger(__name__)

SAMPLE_DATA = (1, 2, 3)


async def fetch_data(succeed: bool, delay: float = 0.0) -> Result[List[int]]:
    """Simulate a remote call that resolves with ``SAMPLE_DATA`` or fails."""
    await asyncio.sleep(delay)

    if not succeed:
        logger.debug("Simulated fetch failed")
        return Err(kind=ErrorKind.FETCH_FAILED, message="Fetch failed")

    return Ok(value=list(SAMPLE_DATA))
