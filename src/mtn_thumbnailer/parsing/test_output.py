"""Tests for scraping mtn's text output."""

from mtn_thumbnailer.models.results import VideoMetadata
from mtn_thumbnailer.parsing.output import parse_metadata, parse_progress, parse_version

VERBOSE_OUTPUT = """\
Movie Thumbnailer (mtn) 3.4.2
Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'clip.mp4':
  Duration: 00:01:00.00, start: 0.000000, bitrate: 1205 kb/s
    Stream #0:0(und): Video: h264, yuv420p, 1280x720, 1070 kb/s, 29.97 fps, 29.97 tbr
    Stream #0:1(und): Audio: aac, 44100 Hz, stereo, fltp, 128 kb/s
Size: 9437184 bytes
duration: 60.00 s
"""


def test_shot_marker_gives_one_event():
    events = parse_progress("shot 3: 00:00:12")
    assert len(events) == 1
    assert events[0].current_shot == 3
    assert events[0].total_shots == 4
    assert events[0].percentage == 0
    assert events[0].current_time is None


def test_time_marker_gives_one_event():
    events = parse_progress("12.5 s elapsed, 4.0 shots/s")
    assert len(events) == 1
    assert events[0].current_time == 12.5
    assert events[0].current_shot == 0
    assert events[0].total_shots == 0


def test_chunk_with_both_markers_gives_two_events():
    events = parse_progress("shot 7: done\n3.25 s, 2.0 shots/s\n")
    assert [event.current_shot for event in events] == [7, 0]
    assert events[1].current_time == 3.25


def test_only_first_shot_marker_in_a_chunk_counts():
    events = parse_progress("shot 1: a\nshot 2: b\n")
    assert len(events) == 1
    assert events[0].current_shot == 1


def test_unrelated_text_gives_no_events():
    assert parse_progress("opening file clip.mp4\n") == []
    assert parse_progress("") == []


def test_metadata_fields_are_extracted():
    metadata = parse_metadata(VERBOSE_OUTPUT)
    assert metadata.duration == 60.0
    assert metadata.size == 9437184
    assert metadata.width == 1280
    assert metadata.height == 720
    assert metadata.codec == "h264"
    assert metadata.audio_codec == "aac"
    assert metadata.frame_rate == 29.97
    assert metadata.bitrate == 1205


def test_missing_metadata_fields_stay_unset():
    metadata = parse_metadata("Size: 1024 bytes\n")
    assert metadata.size == 1024
    assert metadata.duration is None
    assert metadata.width is None
    assert metadata.codec is None
    assert metadata.bitrate is None


def test_metadata_of_empty_output_is_empty():
    assert parse_metadata("") == VideoMetadata()


def test_version_from_banner():
    assert parse_version(VERBOSE_OUTPUT) == "3.4.2"


def test_version_without_banner_is_unknown():
    assert parse_version("mtn: command failed\n") == "unknown"
