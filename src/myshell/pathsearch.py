"""Resolve command names against the directories of the search path."""

import logging
import os
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def resolve(name: str, search_path: Iterable[str]) -> str | None:
    """Return the first ``dir/name`` that exists, in search path order.

    Only existence is checked, not the executable bit.
    """
    if not name:
        return None
    for directory in search_path:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            logger.debug("resolved %s to %s", name, candidate)
            return candidate
    logger.debug("%s not found on search path", name)
    return None
