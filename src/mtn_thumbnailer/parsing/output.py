"""Scrapers for mtn's human-readable output.

mtn has no machine-readable output mode, so everything here is best-effort
pattern matching. A pattern that doesn't match means "nothing found", never an
error.
"""

import re
from typing import List

from mtn_thumbnailer.models.results import ThumbnailProgress, VideoMetadata

UNKNOWN_VERSION = "unknown"

SHOT_PATTERN: re.Pattern[str] = re.compile(r"shot (\d+):")
TIME_PATTERN: re.Pattern[str] = re.compile(r"(\d+\.\d+) s.*?(\d+\.\d+) shots/s")
VERSION_PATTERN: re.Pattern[str] = re.compile(r"Movie Thumbnailer \(mtn\) ([\d.]+)")

DURATION_PATTERN: re.Pattern[str] = re.compile(r"duration: (\d+\.\d+) s")
SIZE_PATTERN: re.Pattern[str] = re.compile(r"Size: (\d+) bytes")
DIMENSIONS_PATTERN: re.Pattern[str] = re.compile(r"Video:.*?, (\d+)x(\d+)")
CODEC_PATTERN: re.Pattern[str] = re.compile(r"Video: ([^,]+)")
AUDIO_CODEC_PATTERN: re.Pattern[str] = re.compile(r"Audio: ([^,]+)")
FPS_PATTERN: re.Pattern[str] = re.compile(r"(\d+\.\d+) fps")
BITRATE_PATTERN: re.Pattern[str] = re.compile(r"bitrate: (\d+) kb/s")


def parse_progress(chunk: str) -> List[ThumbnailProgress]:
    """Turn a chunk of mtn stdout into progress events.

    Each pattern yields at most one event per chunk, so a chunk gives zero,
    one or two events.
    """
    events: List[ThumbnailProgress] = []

    shot_match = SHOT_PATTERN.search(chunk)
    if shot_match:
        current_shot = int(shot_match.group(1))
        events.append(ThumbnailProgress(current_shot=current_shot, total_shots=current_shot + 1))

    time_match = TIME_PATTERN.search(chunk)
    if time_match:
        events.append(ThumbnailProgress(current_shot=0, total_shots=0, current_time=float(time_match.group(1))))

    return events


def parse_metadata(output: str) -> VideoMetadata:
    """Extract video metadata from the verbose output of `mtn -v -i`."""
    metadata = VideoMetadata()

    match = DURATION_PATTERN.search(output)
    if match:
        metadata.duration = float(match.group(1))

    match = SIZE_PATTERN.search(output)
    if match:
        metadata.size = int(match.group(1))

    match = DIMENSIONS_PATTERN.search(output)
    if match:
        metadata.width = int(match.group(1))
        metadata.height = int(match.group(2))

    match = CODEC_PATTERN.search(output)
    if match:
        metadata.codec = match.group(1).strip()

    match = AUDIO_CODEC_PATTERN.search(output)
    if match:
        metadata.audio_codec = match.group(1).strip()

    match = FPS_PATTERN.search(output)
    if match:
        metadata.frame_rate = float(match.group(1))

    match = BITRATE_PATTERN.search(output)
    if match:
        metadata.bitrate = int(match.group(1))

    return metadata


def parse_version(output: str) -> str:
    """Pull the version out of mtn's banner, or return "unknown"."""
    match = VERSION_PATTERN.search(output)
    return match.group(1) if match else UNKNOWN_VERSION
