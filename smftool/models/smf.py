"""
Standard MIDI File document model.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from smftool.models.track import Track

HEADER_MAGIC = b"MThd"
HEADER_LENGTH = 14
HEADER_CHUNK_SIZE = 6


@dataclass(frozen=True)
class SMFHeader:
    """
    File header chunk.

    Attributes:
        magic: Chunk identifier, always b"MThd"
        size: Header data size, always 6
        format: File format (0, 1 or 2)
        num_tracks: Number of track chunks that follow
        division: Ticks per quarter note (top bit clear)
    """

    magic: bytes
    size: int
    format: int
    num_tracks: int
    division: int

    def is_valid(self) -> bool:
        return self.magic == HEADER_MAGIC

    @property
    def is_smpte(self) -> bool:
        return bool(self.division & 0x8000)

    @property
    def ticks_per_quarter(self) -> int:
        return self.division & 0x7FFF


@dataclass(frozen=True)
class SMF:
    """
    A decoded Standard MIDI File.

    Track order is significant: a track's index is its identity.

    Attributes:
        header: File header
        tracks: Tracks in file order
    """

    header: SMFHeader
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def track_spans(self) -> List[Tuple[int, int]]:
        """
        Compute the byte range of every track chunk in the source file.

        Tracks are laid out back to back right after the 14-byte header,
        each taking 8 header bytes plus its declared length.

        Returns:
            List of (start, end) offsets, one per track
        """
        spans = []
        start = HEADER_LENGTH
        for track in self.tracks:
            end = start + track.chunk_size
            spans.append((start, end))
            start = end
        return spans

    @property
    def total_size(self) -> int:
        """Bytes covered by the header and all track chunks."""
        return HEADER_LENGTH + sum(t.chunk_size for t in self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)
