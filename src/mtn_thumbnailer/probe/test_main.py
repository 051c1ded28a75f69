"""Tests for the mtn probes, with mtn replaced by a shell script."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from mtn_thumbnailer.cli import app
from mtn_thumbnailer.models.results import VideoMetadata
from mtn_thumbnailer.probe.main import check_availability, get_version, get_video_metadata
from mtn_thumbnailer.thumbnail.main import MtnThumbnailer

runner = CliRunner()

BANNER = "Movie Thumbnailer (mtn) 3.4.2\nCompiled with: Lavc60.31.102\n"


@pytest.mark.parametrize("exit_code", [0, 1, 255])
def test_available_exit_codes(fake_mtn, exit_code: int):
    assert check_availability(str(fake_mtn(exit_code=exit_code)))


@pytest.mark.parametrize("exit_code", [2, 127])
def test_unavailable_exit_codes(fake_mtn, exit_code: int):
    assert not check_availability(str(fake_mtn(exit_code=exit_code)))


def test_unavailable_when_missing(tmp_path: Path):
    assert not check_availability(str(tmp_path / "no-such-mtn"))


def test_availability_asks_for_version(fake_mtn, recorded_args):
    mtn = fake_mtn(exit_code=255)
    check_availability(str(mtn))
    assert recorded_args(mtn) == ["-v"]


def test_version_from_banner(fake_mtn):
    assert get_version(str(fake_mtn(stderr=BANNER, exit_code=255))) == "3.4.2"


def test_version_only_read_from_stderr(fake_mtn):
    assert get_version(str(fake_mtn(stdout=BANNER))) == "unknown"


def test_version_unknown_when_missing(tmp_path: Path):
    assert get_version(str(tmp_path / "no-such-mtn")) == "unknown"


def test_metadata(fake_mtn, recorded_args, video_file: Path):
    mtn = fake_mtn(stderr=BANNER + "  Stream #0:0: Video: vp9, yuv420p, 640x360, 25.00 fps\nduration: 10.50 s\n")

    metadata = get_video_metadata(str(mtn), str(video_file))

    assert metadata == VideoMetadata(duration=10.5, width=640, height=360, codec="vp9", frame_rate=25.0)
    assert recorded_args(mtn) == ["-v", "-i", str(video_file)]


def test_metadata_empty_when_mtn_missing(tmp_path: Path, video_file: Path):
    assert get_video_metadata(str(tmp_path / "no-such-mtn"), str(video_file)) == VideoMetadata()


def test_thumbnailer_delegates_to_probes(fake_mtn, video_file: Path):
    thumbnailer = MtnThumbnailer(str(fake_mtn(stderr=BANNER + "Size: 2048 bytes\n", exit_code=255)))
    assert thumbnailer.check_availability()
    assert thumbnailer.get_version() == "3.4.2"
    assert thumbnailer.get_video_metadata(str(video_file)).size == 2048


def test_cli_info(fake_mtn, video_file: Path):
    mtn = fake_mtn(stderr="Size: 2048 bytes\nbitrate: 900 kb/s\n")
    result = runner.invoke(app, ["info", str(video_file), "--mtn-path", str(mtn)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"size": 2048, "bitrate": 900}


def test_cli_info_missing_video(fake_mtn, tmp_path: Path):
    result = runner.invoke(app, ["info", str(tmp_path / "missing.mp4"), "--mtn-path", str(fake_mtn())])
    assert result.exit_code == 50


def test_cli_check(fake_mtn):
    result = runner.invoke(app, ["check", "--mtn-path", str(fake_mtn(stderr=BANNER, exit_code=255))])
    assert result.exit_code == 0, result.output
    assert "3.4.2" in result.output


def test_cli_check_unavailable(tmp_path: Path):
    result = runner.invoke(app, ["check", "--mtn-path", str(tmp_path / "no-such-mtn")])
    assert result.exit_code == 1
