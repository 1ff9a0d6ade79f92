"""Tests for the track swap converter."""

import io

import pytest

from smftool.converters.track_swap import (
    TrackSwapper,
    default_output_path,
    swap_track_bytes,
    swap_track_file,
    swap_tracks,
    swapped_spans,
)
from smftool.formats.smf.reader import decode_bytes
from smftool.utils.validation import InvalidTrackIndex, MalformedHeader, TrackBoundaryViolation

from smf_builders import build_smf, channel, end_of_track, track_chunk, track_name


def swap(data: bytes, a: int, b: int) -> bytes:
    return swap_track_bytes(data, decode_bytes(data), a, b)


class TestSwapTrackBytes:
    """Test cases for byte-range track swapping."""

    def test_minimal_example(self, minimal_smf):
        """Test swapping tracks 1 and 2 of three trivial tracks."""
        chunks = [minimal_smf[14 + i * 12 : 26 + i * 12] for i in range(3)]
        result = swap(minimal_smf, 1, 2)

        assert result[:14] == minimal_smf[:14]
        assert result[14:26] == chunks[0]
        assert result[26:38] == chunks[2]
        assert result[38:50] == chunks[1]
        assert len(result) == len(minimal_smf)

    def test_swap_different_lengths(self, song_smf):
        result = swap(song_smf, 1, 3)
        smf = decode_bytes(result)

        assert len(result) == len(song_smf)
        assert [t.name for t in smf.tracks] == ["Conductor", "Drums", "Bass", "Piano"]

    def test_swapped_chunks_are_verbatim(self, song_smf):
        original = decode_bytes(song_smf)
        spans = original.track_spans()
        result = swap(song_smf, 1, 2)
        new_spans = decode_bytes(result).track_spans()

        piano = song_smf[spans[1][0] : spans[1][1]]
        bass = song_smf[spans[2][0] : spans[2][1]]
        assert result[new_spans[1][0] : new_spans[1][1]] == bass
        assert result[new_spans[2][0] : new_spans[2][1]] == piano
        assert result[new_spans[3][0] :] == song_smf[spans[3][0] :]

    def test_swap_involution(self, song_smf):
        for a, b in [(1, 2), (1, 3), (2, 3), (0, 3)]:
            assert swap(swap(song_smf, a, b), a, b) == song_smf

    def test_swap_is_symmetric(self, song_smf):
        assert swap(song_smf, 1, 3) == swap(song_smf, 3, 1)

    def test_swap_identity(self, song_smf):
        for a in range(4):
            assert swap(song_smf, a, a) == song_smf

    def test_running_status_preserved(self, song_smf):
        """Test that tracks keep their compact running status encoding."""
        result = decode_bytes(swap(song_smf, 1, 2))
        piano = result.tracks[2]

        assert piano.name == "Piano"
        assert sum(e.running_status for e in piano.events) == 3

    @pytest.mark.parametrize("a, b", [(4, 1), (1, 4), (-1, 1), (1, -1), (10, 10)])
    def test_invalid_index(self, song_smf, a, b):
        with pytest.raises(InvalidTrackIndex, match="invalid track index"):
            swap(song_smf, a, b)

    def test_spans_validation(self, song_smf):
        smf = decode_bytes(song_smf)

        with pytest.raises(InvalidTrackIndex) as exc_info:
            swapped_spans(smf, 1, 7)

        assert exc_info.value.index == 7

    def test_trailing_data_dropped(self, minimal_smf):
        """Test that bytes after the last track are not carried over."""
        result = swap(minimal_smf + b"\x00\x00\x00", 1, 2)

        assert len(result) == len(minimal_smf)


class TestSwapTracksStream:
    """Test cases for the stream entry point."""

    def test_swap_streams(self, song_smf):
        dst = io.BytesIO()
        swap_tracks(dst, io.BytesIO(song_smf), 2, 3)

        assert dst.getvalue() == swap(song_smf, 2, 3)

    def test_nothing_written_on_invalid_index(self, song_smf):
        dst = io.BytesIO()

        with pytest.raises(InvalidTrackIndex):
            swap_tracks(dst, io.BytesIO(song_smf), 1, 9)

        assert dst.getvalue() == b""

    def test_nothing_written_on_invalid_file(self):
        dst = io.BytesIO()

        with pytest.raises(MalformedHeader):
            swap_tracks(dst, io.BytesIO(b"not a midi file"), 1, 2)

        assert dst.getvalue() == b""

    def test_strict_mode(self):
        data = build_smf(
            track_chunk(end_of_track()),
            track_chunk(track_name("A"), channel(0, 0x90, 60, 100)),
            track_chunk(track_name("B"), end_of_track()),
        )

        swap_tracks(io.BytesIO(), io.BytesIO(data), 1, 2)
        with pytest.raises(TrackBoundaryViolation):
            swap_tracks(io.BytesIO(), io.BytesIO(data), 1, 2, strict=True)


class TestTrackSwapper:
    """Test cases for file-level swapping."""

    def test_default_output_path(self, tmp_path):
        assert default_output_path(tmp_path / "song.mid", 1, 3) == tmp_path / "song_swap_1_3.mid"
        assert default_output_path("a/b.c.midi", 2, 4).name == "b.c_swap_2_4.midi"
        assert default_output_path("noext", 1, 2).name == "noext_swap_1_2"

    def test_swap_file_default_name(self, song_file, song_smf):
        output = TrackSwapper().swap_file(song_file, 1, 2)

        assert output == song_file.parent / "song_swap_1_2.mid"
        assert output.read_bytes() == swap(song_smf, 1, 2)
        assert song_file.read_bytes() == song_smf

    def test_swap_file_explicit_output(self, song_file, tmp_path):
        target = tmp_path / "out" / "swapped.mid"
        output = swap_track_file(song_file, 3, 1, target)

        assert output == target
        assert [t.name for t in decode_bytes(target.read_bytes()).tracks][1] == "Drums"

    def test_failed_swap_leaves_no_file(self, song_file):
        with pytest.raises(InvalidTrackIndex):
            TrackSwapper().swap_file(song_file, 1, 8)

        assert sorted(p.name for p in song_file.parent.iterdir()) == ["song.mid"]

    def test_failed_swap_keeps_existing_output(self, song_file, tmp_path):
        target = tmp_path / "existing.mid"
        target.write_bytes(b"previous")

        with pytest.raises(InvalidTrackIndex):
            TrackSwapper().swap_file(song_file, 0, 8, target)

        assert target.read_bytes() == b"previous"

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TrackSwapper().swap_file(tmp_path / "missing.mid", 1, 2)
