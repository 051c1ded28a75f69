"""Locating the mtn executable."""

import logging
import os
from pathlib import Path
from typing import List, Optional

MTN_EXECUTABLE = "mtn"

logger = logging.getLogger(__name__)


def candidate_paths() -> List[str]:
    """Places where mtn is looked for, in order.

    The first entry is `bin/mtn` at the project root, which only means
    something for a source checkout or an editable install. From a wheel it
    points under site-packages' parent and simply won't exist; `./bin/mtn`
    relative to the working directory covers bundled binaries there.
    """
    project_root = Path(__file__).resolve().parents[3]
    return [
        str(project_root / "bin" / MTN_EXECUTABLE),
        f"/usr/local/bin/{MTN_EXECUTABLE}",
        f"/usr/bin/{MTN_EXECUTABLE}",
        os.path.join(".", "bin", MTN_EXECUTABLE),
        MTN_EXECUTABLE,
    ]


def locate_mtn(explicit_path: Optional[str] = None) -> str:
    """Resolve the mtn executable to use.

    An explicit path always wins. Otherwise the first candidate that exists on
    disk is returned, falling back to the bare name so that the OS resolves it
    from PATH at launch time. Nothing is reported here: a missing binary shows
    up as a launch failure later.
    """
    if explicit_path:
        return explicit_path

    for path in candidate_paths():
        if os.path.exists(path):
            logger.debug(f"Found mtn at {path}")
            return path

    return MTN_EXECUTABLE
