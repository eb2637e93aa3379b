"""
EnvChecker: run the whole pipeline.

    Locate → Read → Parse (+ Analyze) → Report

This module only produces Report objects. Printing and exit codes belong
to the CLI.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from envroulette.env_parser import parse_env_file
from envroulette.locator import CANDIDATE_FILES, find_config_file
from envroulette.model import Report

logger = logging.getLogger(__name__)


def check_file(filepath: Union[str, Path]) -> Report:
    """
    Check an explicit environment file.

    Raises:
        EnvReadError: If the file cannot be read
    """
    variables, issues = parse_env_file(filepath)
    return Report(source=os.path.basename(str(filepath)), variables=variables, issues=issues)


def check(
    directory: Optional[str] = None,
    candidates: Sequence[str] = CANDIDATE_FILES,
) -> Optional[Report]:
    """
    Locate the environment file in `directory` and check it.

    Returns:
        Report, or None when no candidate file exists

    Raises:
        EnvReadError: If the located file cannot be read
    """
    name = find_config_file(candidates, directory=directory)
    if name is None:
        logger.debug("No candidate file found among %s", ", ".join(candidates))
        return None

    base = directory if directory is not None else os.getcwd()
    return check_file(os.path.join(base, name))


__all__ = ["check", "check_file"]
