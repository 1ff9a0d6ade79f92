"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from smf_builders import (
    build_smf,
    channel,
    end_of_track,
    meta,
    running,
    track_chunk,
    track_name,
)


@pytest.fixture
def minimal_smf():
    """Format 1 file with three tracks holding only end-of-track (different deltas)."""
    return build_smf(
        track_chunk(end_of_track(0)),
        track_chunk(end_of_track(1)),
        track_chunk(end_of_track(2)),
        format=1,
        division=480,
    )


@pytest.fixture
def song_smf():
    """Conductor track plus three named instrument tracks of different lengths."""
    conductor = track_chunk(
        track_name("Conductor"),
        meta(0, 0x51, bytes([0x07, 0xA1, 0x20])),
        meta(0, 0x58, bytes([4, 2, 24, 8])),
        end_of_track(),
    )
    piano = track_chunk(
        track_name("Piano"),
        channel(0, 0xC0, 0),
        channel(0, 0x90, 60, 100),
        running(240, 64, 100),
        running(240, 60, 0),
        running(0, 64, 0),
        end_of_track(),
    )
    bass = track_chunk(
        track_name("Bass"),
        channel(0, 0x91, 36, 90),
        channel(480, 0x81, 36, 0),
        end_of_track(),
    )
    drums = track_chunk(
        track_name("Drums"),
        channel(0, 0xB9, 7, 100),
        channel(0, 0x99, 36, 127),
        running(120, 36, 0),
        channel(0, 0xE9, 0x00, 0x40),
        end_of_track(),
    )
    return build_smf(conductor, piano, bass, drums, format=1, division=480)


@pytest.fixture
def song_file(tmp_path, song_smf):
    """Write the song fixture to a temporary .mid file."""
    path = tmp_path / "song.mid"
    path.write_bytes(song_smf)
    return path
