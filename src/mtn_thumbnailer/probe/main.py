"""Probes that ask mtn about itself or about a video without rendering anything."""

import logging
import subprocess
from typing import List, Optional

from mtn_thumbnailer.models.results import VideoMetadata
from mtn_thumbnailer.parsing.output import UNKNOWN_VERSION, parse_metadata, parse_version

# mtn exits with 255 when it runs fine but gets no input file
AVAILABLE_EXIT_CODES = (0, 1, 255)

logger = logging.getLogger(__name__)


def run_mtn(mtn_path: str, args: List[str], timeout: Optional[float] = None) -> subprocess.CompletedProcess:
    """Run mtn to completion and capture its output as text.

    Raises:
        OSError: If mtn can't be launched.
        subprocess.TimeoutExpired: If a timeout was given and exceeded.
    """
    cmd = [mtn_path, *args]
    logger.debug(f"Running: {' '.join(cmd)}")
    return subprocess.run(
        cmd, capture_output=True, text=True, errors="replace", timeout=timeout, check=False,
    )


def get_video_metadata(mtn_path: str, video_path: str, timeout: Optional[float] = None) -> VideoMetadata:
    """Read duration, dimensions, codecs and so on from `mtn -v -i`.

    Returns an empty VideoMetadata if mtn can't be run.
    """
    try:
        result = run_mtn(mtn_path, ["-v", "-i", video_path], timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning(f"Could not read metadata of {video_path}: {e}")
        return VideoMetadata()

    return parse_metadata(result.stderr)


def check_availability(mtn_path: str, timeout: Optional[float] = None) -> bool:
    """Return True if mtn can be launched and answers the version query."""
    try:
        result = run_mtn(mtn_path, ["-v"], timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"mtn not available at {mtn_path}: {e}")
        return False

    return result.returncode in AVAILABLE_EXIT_CODES


def get_version(mtn_path: str, timeout: Optional[float] = None) -> str:
    """Return mtn's version from its banner, or "unknown"."""
    try:
        result = run_mtn(mtn_path, ["-v"], timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Could not query mtn version: {e}")
        return UNKNOWN_VERSION

    return parse_version(result.stderr)
