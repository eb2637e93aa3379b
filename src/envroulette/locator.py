"""
Locator: find which environment file to check.

Only the given directory is searched (no walking up to parents) and the
first candidate that exists wins. Files are never merged.
"""

import logging
import os
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

# Priority order matters: the first existing file is the one checked.
CANDIDATE_FILES = (".env", ".env.local", ".env.development", ".env.production")


def find_config_file(
    candidates: Sequence[str] = CANDIDATE_FILES,
    directory: Optional[str] = None,
) -> Optional[str]:
    """
    Return the first candidate that is a regular file in `directory`.

    Args:
        candidates: File names to try, highest priority first
        directory: Directory to search (defaults to the working directory)

    Returns:
        The matching file name as given in `candidates`, or None when no
        candidate exists. None is a normal outcome, not an error.
    """
    base = directory if directory is not None else os.getcwd()

    for name in candidates:
        path = os.path.join(base, name)
        if os.path.isfile(path):
            logger.debug("Found candidate %s in %s", name, base)
            return name
        logger.debug("Candidate %s not present in %s", name, base)

    return None


__all__ = ["CANDIDATE_FILES", "find_config_file"]
