"""Work out where mtn puts its output files."""

import glob
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from mtn_thumbnailer.models.options import ThumbnailOptions

DEFAULT_OUTPUT_SUFFIX = "_s.jpg"
COVER_SUFFIX = "_cover.jpg"


@dataclass
class OutputPaths:
    """Paths of the files an mtn run produced (or is expected to produce)."""
    output_path: str
    info_path: Optional[str] = None
    cover_path: Optional[str] = None
    web_vtt_path: Optional[str] = None
    individual_shots: Optional[List[str]] = None


def output_base(video_path: str, options: ThumbnailOptions) -> str:
    """Base path shared by every output file of a video, without any suffix."""
    base = video_path
    if options.output_dir:
        base = os.path.join(options.output_dir, os.path.basename(video_path))

    if not options.use_full_filename:
        last_dot = base.rfind(".")
        if last_dot > 0:
            base = base[:last_dot]

    return base


def shot_candidates(base: str, options: ThumbnailOptions) -> List[str]:
    """Files next to the base that look like individual shots of this video.

    mtn names shots after the base with a timestamp appended, so this is
    `<base>_*<ext>`. Anything ending with the output suffix is a contact sheet,
    either this video's or a neighbour's such as `clip_2_s.jpg`, and is skipped.
    """
    base_path = Path(base)
    output_suffix = options.output_suffix or DEFAULT_OUTPUT_SUFFIX
    extension = Path(output_suffix).suffix
    if not base_path.parent.is_dir():
        return []

    return [
        str(candidate)
        for candidate in base_path.parent.glob(f"{glob.escape(base_path.name)}_*{extension}")
        if candidate.is_file() and not candidate.name.endswith(output_suffix)
    ]


def snapshot_individual_shots(video_path: str, options: ThumbnailOptions) -> Dict[str, int]:
    """Record modification times of shot-like files before mtn runs."""
    base = output_base(video_path, options)
    return {path: os.stat(path).st_mtime_ns for path in shot_candidates(base, options)}


def find_individual_shots(
    base: str,
    options: ThumbnailOptions,
    exclude: List[str],
    previous: Optional[Dict[str, int]] = None,
) -> List[str]:
    """List the individual shot images written next to the contact sheet.

    With a snapshot from before the run, only files that are new or were
    rewritten since then count.
    """
    shots = []
    for path in shot_candidates(base, options):
        if path in exclude:
            continue
        if previous is not None and previous.get(path) == os.stat(path).st_mtime_ns:
            continue
        shots.append(path)
    return sorted(shots)


def resolve_output_paths(
    video_path: str,
    options: ThumbnailOptions,
    previous_shots: Optional[Dict[str, int]] = None,
) -> OutputPaths:
    """Compute the contact sheet path and look up optional side files.

    The contact sheet path is derived, whether or not the file exists. Info,
    cover, WebVTT and individual shot files are only reported when they are
    actually on disk, since mtn decides on its own whether to write them.
    previous_shots is a snapshot_individual_shots() result taken before the run.
    """
    base = output_base(video_path, options)
    paths = OutputPaths(output_path=base + (options.output_suffix or DEFAULT_OUTPUT_SUFFIX))

    if options.info_suffix:
        info_path = base + options.info_suffix
        if os.path.exists(info_path):
            paths.info_path = info_path

    if options.extract_cover:
        cover_path = base + COVER_SUFFIX
        if os.path.exists(cover_path):
            paths.cover_path = cover_path

    if options.web_vtt and os.path.exists(options.web_vtt):
        paths.web_vtt_path = options.web_vtt

    if options.save_individual is not None and options.save_individual.codes():
        known = [p for p in (paths.output_path, paths.info_path, paths.cover_path) if p]
        paths.individual_shots = find_individual_shots(base, options, known, previous_shots)

    return paths
