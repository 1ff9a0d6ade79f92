"""
smftool - Standard MIDI File decoder and track swapper.

This library provides tools to:
- Decode .mid files into a read-only document model
- Swap two tracks of a file without re-encoding any events

Example usage:
    from smftool import SMFReader, swap_track_file

    # Decode a file
    smf = SMFReader.read("song.mid")
    for track in smf.tracks:
        print(track.name, len(track.events))

    # Exchange tracks 1 and 2
    swap_track_file("song.mid", 1, 2, "swapped.mid")
"""

__version__ = "0.1.0"
__author__ = "smftool Contributors"

from smftool.formats.smf.decoder import decode
from smftool.formats.smf.reader import SMFReader, decode_bytes
from smftool.converters.track_swap import swap_track_file, swap_tracks
from smftool.models.event import ChannelMessage, Event, EventKind, MetaType
from smftool.models.smf import SMF, SMFHeader
from smftool.models.track import Track, TrackHeader
from smftool.utils.validation import SMFError

__all__ = [
    "SMFReader",
    "decode",
    "decode_bytes",
    "swap_track_file",
    "swap_tracks",
    "ChannelMessage",
    "Event",
    "EventKind",
    "MetaType",
    "SMF",
    "SMFHeader",
    "Track",
    "TrackHeader",
    "SMFError",
]
