"""Data models for decoded Standard MIDI Files."""

from smftool.models.event import ChannelMessage, Event, EventKind, MetaType
from smftool.models.track import Track, TrackHeader
from smftool.models.smf import SMF, SMFHeader

__all__ = [
    "ChannelMessage",
    "Event",
    "EventKind",
    "MetaType",
    "Track",
    "TrackHeader",
    "SMF",
    "SMFHeader",
]
