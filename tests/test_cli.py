"""Tests for the smftool command line interface."""

from typer.testing import CliRunner

from cli.app import app
from smftool.formats.smf.reader import decode_bytes

from smf_builders import build_smf, end_of_track, meta, track_chunk, track_name

runner = CliRunner()


def flat(output: str) -> str:
    """Collapse whitespace so wrapped console lines compare as one."""
    return " ".join(output.split())


class TestListCommand:
    def test_list_tracks(self, song_file):
        result = runner.invoke(app, ["list", str(song_file)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == ["[1] Piano", "[2] Bass", "[3] Drums"]

    def test_list_track_without_second_event(self, tmp_path):
        path = tmp_path / "bare.mid"
        path.write_bytes(
            build_smf(
                track_chunk(end_of_track()),
                track_chunk(end_of_track()),
                track_chunk(track_name("Lead"), end_of_track()),
            )
        )
        result = runner.invoke(app, ["list", str(path)])

        assert result.exit_code == 0
        assert [line.rstrip() for line in result.output.splitlines()] == ["[1]", "[2] Lead"]

    def test_list_second_event_not_a_name(self, tmp_path):
        """Test that the listing shows whatever the second event holds."""
        path = tmp_path / "marker.mid"
        path.write_bytes(
            build_smf(
                track_chunk(end_of_track()),
                track_chunk(track_name("Ignored"), track_name("[Verse]"), end_of_track()),
            )
        )
        result = runner.invoke(app, ["list", str(path)])

        assert result.output.splitlines() == ["[1] [Verse]"]

    def test_list_missing_file(self, tmp_path):
        result = runner.invoke(app, ["list", str(tmp_path / "missing.mid")])

        assert result.exit_code == 1
        assert "not found" in flat(result.output)

    def test_list_long_name_on_one_line(self, tmp_path):
        path = tmp_path / "long.mid"
        path.write_bytes(
            build_smf(
                track_chunk(end_of_track()),
                track_chunk(meta(0, 0x01, b"x"), track_name("N" * 120), end_of_track()),
            )
        )
        result = runner.invoke(app, ["list", str(path)])

        assert result.exit_code == 0
        assert result.output == "[1] " + "N" * 120 + "\n"

    def test_list_invalid_file(self, tmp_path):
        path = tmp_path / "bad.mid"
        path.write_bytes(b"MThd\x00\x00\x00\x06\x00\x01\x00\x01\x80\x00")
        result = runner.invoke(app, ["list", str(path)])

        assert result.exit_code == 1
        assert "unsupported timing" in flat(result.output)


class TestSwapCommand:
    def test_swap_default_output(self, song_file):
        result = runner.invoke(app, ["swap", str(song_file), "1", "2"])

        assert result.exit_code == 0
        output = song_file.parent / "song_swap_1_2.mid"
        assert output.exists()
        names = [t.name for t in decode_bytes(output.read_bytes()).tracks]
        assert names == ["Conductor", "Bass", "Piano", "Drums"]

    def test_swap_output_option(self, song_file, tmp_path):
        target = tmp_path / "reordered.mid"
        result = runner.invoke(app, ["swap", str(song_file), "3", "1", "-o", str(target)])

        assert result.exit_code == 0
        assert target.exists()

    def test_swap_conductor_rejected(self, song_file):
        result = runner.invoke(app, ["swap", str(song_file), "0", "2"])

        assert result.exit_code == 1
        assert not (song_file.parent / "song_swap_0_2.mid").exists()

    def test_swap_index_out_of_range(self, song_file):
        result = runner.invoke(app, ["swap", str(song_file), "1", "4"])

        assert result.exit_code == 1
        assert "invalid track index" in flat(result.output)
        assert not (song_file.parent / "song_swap_1_4.mid").exists()

    def test_swap_write_error(self, song_file, tmp_path):
        target = tmp_path / "taken"
        target.mkdir()
        result = runner.invoke(app, ["swap", str(song_file), "1", "2", "-o", str(target)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert target.is_dir()

    def test_swap_missing_file(self, tmp_path):
        result = runner.invoke(app, ["swap", str(tmp_path / "missing.mid"), "1", "2"])

        assert result.exit_code == 1


class TestInspectionCommands:
    def test_info(self, song_file):
        result = runner.invoke(app, ["info", str(song_file)])

        assert result.exit_code == 0
        assert "MIDI File Info" in result.output
        assert "480 ticks per quarter note" in result.output
        assert "Piano" in result.output

    def test_info_strict_failure(self, tmp_path):
        path = tmp_path / "no_eot.mid"
        path.write_bytes(build_smf(track_chunk(track_name("Solo"))))

        assert runner.invoke(app, ["info", str(path)]).exit_code == 0
        assert runner.invoke(app, ["info", str(path), "--strict"]).exit_code == 1

    def test_events(self, song_file):
        result = runner.invoke(app, ["events", str(song_file), "1", "--all"])

        assert result.exit_code == 0
        assert "note_on" in result.output
        assert "end_of_track" in result.output

    def test_info_bracketed_names(self, tmp_path):
        path = tmp_path / "brackets.mid"
        path.write_bytes(
            build_smf(
                track_chunk(track_name("[Drums]"), end_of_track()),
                track_chunk(track_name("[/x] Lead"), end_of_track()),
            )
        )
        result = runner.invoke(app, ["info", str(path)])

        assert result.exit_code == 0
        assert "[Drums]" in result.output
        assert "[/x] Lead" in result.output

    def test_events_bracketed_text(self, tmp_path):
        path = tmp_path / "brackets.mid"
        path.write_bytes(
            build_smf(
                track_chunk(end_of_track()),
                track_chunk(track_name("[/x]"), meta(0, 0x06, b"[bold]"), end_of_track()),
            )
        )
        result = runner.invoke(app, ["events", str(path), "1"])

        assert result.exit_code == 0
        assert "'[/x]'" in result.output
        assert "'[bold]'" in result.output

    def test_events_invalid_track(self, song_file):
        result = runner.invoke(app, ["events", str(song_file), "9"])

        assert result.exit_code == 1

    def test_dump(self, song_file):
        result = runner.invoke(app, ["dump", str(song_file), "2"])

        assert result.exit_code == 0
        assert "4D 54 72 6B" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "smftool" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "version" in result.output
