"""Shared fixtures: a fake mtn executable driven by shell scripts."""

import shlex
import stat
from pathlib import Path

import pytest


@pytest.fixture
def fake_mtn(tmp_path: Path):
    """Return a factory writing an executable that behaves like mtn.

    The script prints the given stdout/stderr, runs an optional shell snippet,
    records its arguments one per line in `<script>.args` and exits with the
    given code.
    """
    counter = 0

    def factory(stdout: str = "", stderr: str = "", exit_code: int = 0, script: str = "") -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / f"mtn{counter}"
        args_file = path.with_suffix(".args")
        path.write_text(
            "#!/bin/sh\n"
            f"printf '%s\\n' \"$@\" > {shlex.quote(str(args_file))}\n"
            f"{script}\n"
            f"printf '%s' {shlex.quote(stdout)}\n"
            f"printf '%s' {shlex.quote(stderr)} >&2\n"
            f"exit {exit_code}\n"
        )
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return factory


@pytest.fixture
def recorded_args():
    """Read back the arguments a fake mtn was last called with."""
    def read(mtn: Path) -> list[str]:
        return mtn.with_suffix(".args").read_text().splitlines()

    return read


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """An input file standing in for a video; mtn is faked so content doesn't matter."""
    path = tmp_path / "videos" / "clip.mp4"
    path.parent.mkdir()
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path
