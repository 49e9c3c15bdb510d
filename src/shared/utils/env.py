"""Loading of ``.env`` files for local runs and scripts."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _candidate_files(env_file: Optional[str]) -> list[Path]:
    if env_file:
        return [Path(env_file)]
    # Outermost directory first.
    cwd = Path.cwd()
    return [directory / ".env" for directory in [*reversed(cwd.parents), cwd]]


def load_env(env_file: Optional[str] = None, override: bool = False) -> None:
    """Load variables from ``env_file`` or from ``.env`` files up the cwd tree.

    Variables already present in the process environment are kept unless
    ``override`` is set.
    """
    found = [path for path in _candidate_files(env_file) if path.is_file()]
    if not found:
        logger.debug("No .env file found, using system environment")
        return

    for path in found:
        load_dotenv(path, override=override)
        logger.debug("Loaded environment from %s", path)
