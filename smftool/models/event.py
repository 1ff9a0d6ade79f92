"""
MIDI event data models.

An SMF track is a sequence of events, each one of three kinds:

- Meta events (status 0xFF): type byte, VLQ length, payload
- System exclusive events (status 0xF0 or 0xF7): VLQ length, payload
- Channel events (status 0x80-0xEF): 1 or 2 data bytes
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class EventKind(Enum):
    """Top-level event classification."""

    META = "meta"
    SYSEX = "sysex"
    CHANNEL = "channel"


class ChannelMessage(IntEnum):
    """Channel message types (high nibble of the status byte)."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    KEY_PRESSURE = 0xA0
    CONTROLLER = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0

    @property
    def data_size(self) -> int:
        """Number of data bytes following the status byte."""
        return CHANNEL_DATA_SIZES[self]


# Data bytes per channel message type
CHANNEL_DATA_SIZES = {
    ChannelMessage.NOTE_OFF: 2,
    ChannelMessage.NOTE_ON: 2,
    ChannelMessage.KEY_PRESSURE: 2,
    ChannelMessage.CONTROLLER: 2,
    ChannelMessage.PROGRAM_CHANGE: 1,
    ChannelMessage.CHANNEL_PRESSURE: 1,
    ChannelMessage.PITCH_BEND: 2,
}

# Data bytes assumed for status bytes that are not channel messages
# (system common/realtime bytes have no place in a file but are skipped)
UNKNOWN_DATA_SIZE = 1


class MetaType(IntEnum):
    """Well-known meta event types."""

    SEQUENCE_NUMBER = 0x00
    TEXT = 0x01
    COPYRIGHT_NOTICE = 0x02
    TRACK_NAME = 0x03
    INSTRUMENT_NAME = 0x04
    LYRIC = 0x05
    MARKER = 0x06
    CUE_POINT = 0x07
    CHANNEL_PREFIX = 0x20
    END_OF_TRACK = 0x2F
    SET_TEMPO = 0x51
    SMPTE_OFFSET = 0x54
    TIME_SIGNATURE = 0x58
    KEY_SIGNATURE = 0x59
    SEQUENCER_SPECIFIC = 0x7F


META_STATUS = 0xFF
SYSEX_STATUS = 0xF0
SYSEX_ESCAPE_STATUS = 0xF7


@dataclass(frozen=True)
class Event:
    """
    A single decoded track event.

    Attributes:
        kind: Meta, system exclusive or channel event
        status: Status byte in effect (0xFF for meta, 0xF0/0xF7 for sysex,
            the channel status byte otherwise, also when it was omitted)
        delta: Ticks since the previous event in the track
        length: Raw bytes consumed, including delta-time and status byte
        data: Payload bytes (channel data bytes, or meta/sysex body)
        offset: Position of the event within the track data
        meta_type: Meta event type byte (meta events only)
        running_status: True if the status byte was omitted
    """

    kind: EventKind
    status: int
    delta: int
    length: int
    data: bytes
    offset: int = 0
    meta_type: Optional[int] = None
    running_status: bool = False

    @property
    def is_meta(self) -> bool:
        return self.kind is EventKind.META

    @property
    def is_sysex(self) -> bool:
        return self.kind is EventKind.SYSEX

    @property
    def is_channel(self) -> bool:
        return self.kind is EventKind.CHANNEL

    @property
    def is_end_of_track(self) -> bool:
        return self.is_meta and self.meta_type == MetaType.END_OF_TRACK

    @property
    def message(self) -> Optional[ChannelMessage]:
        """Channel message type, or None for meta/sysex and unknown status bytes."""
        if not self.is_channel or self.status >= 0xF0:
            return None
        return ChannelMessage(self.status & 0xF0)

    @property
    def channel(self) -> Optional[int]:
        """Channel number 0-15 for channel events."""
        if not self.is_channel:
            return None
        return self.status & 0x0F

    @property
    def end(self) -> int:
        """Offset just past the event within the track data."""
        return self.offset + self.length

    @property
    def type_name(self) -> str:
        """Human readable event type, e.g. 'note_on' or 'track_name'."""
        if self.is_meta:
            try:
                return MetaType(self.meta_type).name.lower()
            except ValueError:
                return f"meta_0x{self.meta_type:02x}"
        if self.is_sysex:
            return "sysex" if self.status == SYSEX_STATUS else "sysex_escape"
        message = self.message
        if message is None:
            return f"status_0x{self.status:02x}"
        return message.name.lower()

    def text(self, encoding: str = "latin-1") -> str:
        """Decode the payload as text (for text-like meta events)."""
        return self.data.decode(encoding, errors="replace")
