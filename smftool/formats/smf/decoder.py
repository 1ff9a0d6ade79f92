"""
Standard MIDI File decoder.

Decodes the header chunk and track chunks of an SMF into the read-only
document model.

File Structure:
    0x00-0x03: "MThd"
    0x04-0x07: Header size (big-endian, always 6)
    0x08-0x09: Format
    0x0A-0x0B: Number of tracks
    0x0C-0x0D: Division (ticks per quarter note, top bit clear)
    0x0E-...:  Track chunks, back to back:
               "MTrk", big-endian length, then `length` bytes of events

Event Structure:
    <delta-time VLQ> <status>? <data...>

    The status byte may be omitted ("running status") when it equals the
    status of the last channel event in the same track.
"""

import logging
import struct
from typing import BinaryIO, List, Optional

from smftool.models.event import (
    CHANNEL_DATA_SIZES,
    META_STATUS,
    SYSEX_ESCAPE_STATUS,
    SYSEX_STATUS,
    UNKNOWN_DATA_SIZE,
    ChannelMessage,
    Event,
    EventKind,
)
from smftool.models.smf import HEADER_LENGTH, SMF, SMFHeader
from smftool.models.track import TRACK_HEADER_LENGTH, Track, TrackHeader
from smftool.utils.validation import (
    InvalidRunningStatus,
    MalformedHeader,
    MalformedTrackHeader,
    SMFError,
    TrackBoundaryViolation,
    TruncatedTrack,
    UnsupportedTiming,
)
from smftool.utils.vlq import decode_vlq

logger = logging.getLogger(__name__)

HEADER_STRUCT = struct.Struct(">4sLHHH")
TRACK_HEADER_STRUCT = struct.Struct(">4sL")


def read_header(stream: BinaryIO) -> SMFHeader:
    """
    Read and validate the 14-byte file header.

    Args:
        stream: Binary stream positioned at the start of the file

    Returns:
        Parsed header

    Raises:
        MalformedHeader: If the header is short or the magic is not "MThd"
        UnsupportedTiming: If the division uses SMPTE timing
    """
    data = stream.read(HEADER_LENGTH)
    if len(data) < HEADER_LENGTH:
        raise MalformedHeader(
            f"malformed header: expected {HEADER_LENGTH} bytes, got {len(data)}", offset=0
        )

    header = SMFHeader(*HEADER_STRUCT.unpack(data))

    if not header.is_valid():
        raise MalformedHeader(f"malformed header: not found 'MThd' (got {header.magic!r})", offset=0)

    if header.is_smpte:
        raise UnsupportedTiming(
            f"unsupported timing format: SMPTE division 0x{header.division:04X}", offset=0x0C
        )

    logger.debug(
        "Header: format=%d tracks=%d division=%d",
        header.format,
        header.num_tracks,
        header.division,
    )
    return header


def _byte_at(buf: bytes, pos: int) -> int:
    """Return buf[pos], treating a read past the end as a track overrun."""
    if pos >= len(buf):
        raise TrackBoundaryViolation("unexpected end of track", offset=pos)
    return buf[pos]


def parse_event(buf: bytes, offset: int, previous: Optional[Event] = None) -> Event:
    """
    Decode one event starting at ``offset``.

    Args:
        buf: Track event data
        offset: Position of the event's delta-time
        previous: Last channel event in the track, used to resolve running
            status (None for the first event or after running status was
            cancelled)

    Returns:
        Decoded event; ``event.length`` is the number of bytes consumed

    Raises:
        InvalidVariableLength: If a delta-time or length field is invalid
        InvalidRunningStatus: If the status byte is omitted with nothing to reuse
        TrackBoundaryViolation: If the buffer ends before the status byte
    """
    pos = offset

    delta, n = decode_vlq(buf, pos)
    pos += n

    status = _byte_at(buf, pos)
    running = False

    if status & 0x80 == 0:
        # Running status: this byte is the first data byte
        if previous is None or previous.message is None:
            raise InvalidRunningStatus("invalid running status", offset=pos)
        status = previous.status
        running = True
    else:
        pos += 1

    if status == META_STATUS:
        meta_type = _byte_at(buf, pos)
        pos += 1
        size, n = decode_vlq(buf, pos)
        pos += n
        return Event(
            kind=EventKind.META,
            status=status,
            delta=delta,
            length=pos + size - offset,
            data=bytes(buf[pos : pos + size]),
            offset=offset,
            meta_type=meta_type,
        )

    if status in (SYSEX_STATUS, SYSEX_ESCAPE_STATUS):
        size, n = decode_vlq(buf, pos)
        pos += n
        return Event(
            kind=EventKind.SYSEX,
            status=status,
            delta=delta,
            length=pos + size - offset,
            data=bytes(buf[pos : pos + size]),
            offset=offset,
        )

    if status < 0xF0:
        size = CHANNEL_DATA_SIZES[ChannelMessage(status & 0xF0)]
    else:
        size = UNKNOWN_DATA_SIZE

    return Event(
        kind=EventKind.CHANNEL,
        status=status,
        delta=delta,
        length=pos + size - offset,
        data=bytes(buf[pos : pos + size]),
        offset=offset,
        running_status=running,
    )


def parse_events(buf: bytes, strict: bool = False) -> List[Event]:
    """
    Decode all events of one track's data area.

    Args:
        buf: Exactly the track's declared event data
        strict: Also require the last event to be end-of-track

    Returns:
        Events in order; their lengths sum to ``len(buf)``

    Raises:
        TrackBoundaryViolation: If an event overruns the data, end-of-track
            appears before the end, or (strict) the track does not end with
            end-of-track
    """
    events: List[Event] = []
    running: Optional[Event] = None
    pos, end = 0, len(buf)

    while pos < end:
        event = parse_event(buf, pos, running)

        pos += event.length
        if pos > end:
            raise TrackBoundaryViolation("unexpected end of track", offset=event.offset)
        if event.is_end_of_track and pos != end:
            raise TrackBoundaryViolation("end-of-track before chunk boundary", offset=event.offset)

        if event.message is not None:
            running = event
        elif not event.is_meta:
            # Sysex and system bytes cancel running status
            running = None

        events.append(event)

    if strict and not (events and events[-1].is_end_of_track):
        raise TrackBoundaryViolation("missing end-of-track at chunk boundary", offset=end)

    return events


def read_track(stream: BinaryIO, strict: bool = False, index: Optional[int] = None) -> Track:
    """
    Read one track chunk.

    Args:
        stream: Binary stream positioned at a track chunk header
        strict: Require the track to end with an end-of-track event
        index: Track index, attached to errors for context

    Returns:
        Decoded track

    Raises:
        MalformedTrackHeader: If the chunk header is short or not "MTrk"
        TruncatedTrack: If fewer bytes remain than the declared length
        TrackBoundaryViolation: If events do not fit the chunk exactly
    """
    data = stream.read(TRACK_HEADER_LENGTH)
    if len(data) < TRACK_HEADER_LENGTH:
        raise MalformedTrackHeader(
            f"malformed track header: expected {TRACK_HEADER_LENGTH} bytes, got {len(data)}",
            index=index,
        )

    header = TrackHeader(*TRACK_HEADER_STRUCT.unpack(data))
    if not header.is_valid():
        raise MalformedTrackHeader(
            f"malformed track header: not found 'MTrk' (got {header.magic!r})", index=index
        )

    buf = stream.read(header.length)
    if len(buf) < header.length:
        raise TruncatedTrack(
            f"truncated track: declared {header.length} bytes, got {len(buf)}", index=index
        )

    try:
        events = parse_events(buf, strict=strict)
    except SMFError as e:
        if e.index is None:
            e.index = index
        raise

    logger.debug("Track %s: %d bytes, %d events", index, header.length, len(events))
    return Track(header=header, events=tuple(events))


def read_tracks(stream: BinaryIO, count: int, strict: bool = False) -> List[Track]:
    """Read ``count`` consecutive track chunks."""
    return [read_track(stream, strict=strict, index=i) for i in range(count)]


def decode(stream: BinaryIO, strict: bool = False) -> SMF:
    """
    Decode a complete Standard MIDI File from a stream.

    Args:
        stream: Binary stream positioned at the start of the file
        strict: Require every track to end with an end-of-track event

    Returns:
        Decoded document

    Raises:
        SMFError: On the first problem found; nothing is returned partially
    """
    header = read_header(stream)
    tracks = read_tracks(stream, header.num_tracks, strict=strict)
    return SMF(header=header, tracks=tuple(tracks))
