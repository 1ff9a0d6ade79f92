"""
Track chunk data models.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from smftool.models.event import Event, MetaType

TRACK_MAGIC = b"MTrk"
TRACK_HEADER_LENGTH = 8


@dataclass(frozen=True)
class TrackHeader:
    """
    Track chunk header.

    Attributes:
        magic: Chunk identifier, always b"MTrk"
        length: Declared number of event data bytes
    """

    magic: bytes
    length: int

    def is_valid(self) -> bool:
        return self.magic == TRACK_MAGIC


@dataclass(frozen=True)
class Track:
    """
    A decoded track chunk.

    Attributes:
        header: Chunk header
        events: Events in file order
    """

    header: TrackHeader
    events: Tuple[Event, ...] = field(default_factory=tuple)

    @property
    def length(self) -> int:
        """Declared event data length."""
        return self.header.length

    @property
    def chunk_size(self) -> int:
        """Bytes occupied by the whole chunk, header included."""
        return TRACK_HEADER_LENGTH + self.header.length

    @property
    def has_end_of_track(self) -> bool:
        return bool(self.events) and self.events[-1].is_end_of_track

    @property
    def name(self) -> Optional[str]:
        """Text of the first track-name meta event, if any."""
        for event in self.events:
            if event.is_meta and event.meta_type == MetaType.TRACK_NAME:
                return event.text()
        return None

    @property
    def channels(self) -> List[int]:
        """Sorted channel numbers used by channel events."""
        return sorted({e.channel for e in self.events if e.message is not None})

    @property
    def duration(self) -> int:
        """Total ticks covered by the track's delta-times."""
        return sum(e.delta for e in self.events)

    def __len__(self) -> int:
        return len(self.events)
