"""
Converters that rewrite Standard MIDI Files.

Example:
    from smftool.converters import swap_track_file

    # Exchange tracks 1 and 2, writing song_swap_1_2.mid
    swap_track_file("song.mid", 1, 2)
"""

from smftool.converters.track_swap import (
    TrackSwapper,
    default_output_path,
    swap_track_bytes,
    swap_track_file,
    swap_tracks,
)

__all__ = [
    "TrackSwapper",
    "default_output_path",
    "swap_track_bytes",
    "swap_track_file",
    "swap_tracks",
]
