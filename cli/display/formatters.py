"""
Display formatting utilities for CLI output.

Provides byte previews, event summaries and other formatting helpers.
"""

from typing import List

from smftool.models.event import ChannelMessage, Event, MetaType

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Meta events whose payload is text
TEXT_META_TYPES = {
    MetaType.TEXT,
    MetaType.COPYRIGHT_NOTICE,
    MetaType.TRACK_NAME,
    MetaType.INSTRUMENT_NAME,
    MetaType.LYRIC,
    MetaType.MARKER,
    MetaType.CUE_POINT,
}


def hex_bytes(data: bytes, limit: int = 16) -> str:
    """
    Format bytes as space separated hex.

    Returns:
        String like "FF 2F 00", with "..." appended when truncated
    """
    text = " ".join(f"{b:02X}" for b in data[:limit])
    if len(data) > limit:
        text += " ..."
    return text


def note_name(note: int) -> str:
    """Convert MIDI note number to name (60 = C4)."""
    return f"{NOTE_NAMES[note % 12]}{note // 12 - 1}"


def format_channels(channels: List[int]) -> str:
    """Format 0-based channel numbers as 1-based display numbers."""
    if not channels:
        return "-"
    return ",".join(str(ch + 1) for ch in channels)


def format_tempo(data: bytes) -> str:
    """Format a set-tempo payload (microseconds per quarter) as BPM."""
    if len(data) != 3:
        return hex_bytes(data)
    usec = int.from_bytes(data, "big")
    if usec == 0:
        return "0 us/qn"
    return f"{60_000_000 / usec:.2f} BPM ({usec} us/qn)"


def format_event_data(event: Event) -> str:
    """
    Summarize an event's payload for table display.

    Args:
        event: Decoded event

    Returns:
        Short human readable description
    """
    if event.is_meta:
        if event.meta_type in TEXT_META_TYPES:
            return repr(event.text())
        if event.meta_type == MetaType.SET_TEMPO:
            return format_tempo(event.data)
        if event.meta_type == MetaType.TIME_SIGNATURE and len(event.data) >= 2:
            return f"{event.data[0]}/{2 ** event.data[1]}"
        return hex_bytes(event.data)

    if event.is_sysex:
        return f"{len(event.data)} bytes: {hex_bytes(event.data, limit=8)}"

    message = event.message
    data = event.data
    if message in (ChannelMessage.NOTE_ON, ChannelMessage.NOTE_OFF) and len(data) == 2:
        return f"{note_name(data[0])} vel {data[1]}"
    if message == ChannelMessage.CONTROLLER and len(data) == 2:
        return f"CC{data[0]} = {data[1]}"
    if message == ChannelMessage.PITCH_BEND and len(data) == 2:
        return f"{(data[0] | (data[1] << 7)) - 8192:+d}"
    return hex_bytes(data)


def format_listing_name(data: bytes) -> str:
    """Decode raw payload bytes for the track listing."""
    return data.decode("latin-1", errors="replace")
