"""Input file discovery for Person export files."""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Sequence

from errors import ConfigurationError

PERSON_EXPORT_PATTERN = "*Person-export.json"

LOGGER = logging.getLogger(__name__)


def find_files_to_process(paths: Sequence[str], cwd: str | None = None) -> list[str]:
    """Return the files to scan.

    Explicit paths are returned verbatim, without checking that they exist.
    With no paths, the working directory (or ``cwd``) is globbed for
    ``*Person-export.json``. Raises ConfigurationError when the result is empty.
    """
    if paths:
        return list(paths)

    LOGGER.info(
        "No file names provided, trying to find files ending with Person-export.json "
        "in current working directory."
    )
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError as exc:
            raise ConfigurationError(f"Error getting working directory: {exc}") from exc

    pattern = os.path.join(glob.escape(cwd), PERSON_EXPORT_PATTERN)
    matches = sorted(path for path in glob.glob(pattern) if os.path.isfile(path))
    if not matches:
        raise ConfigurationError("Could not find any files to process.")

    LOGGER.info("Found %s file(s) matching %s in %s", len(matches), PERSON_EXPORT_PATTERN, cwd)
    return matches
