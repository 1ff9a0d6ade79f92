"""
Error types and validation helpers for Standard MIDI File data.

Every decoding problem raises a subclass of :class:`SMFError`. Errors carry
the byte offset (or track index) where the problem was found so callers can
report it.
"""

from typing import Optional


class SMFError(ValueError):
    """Base class for all SMF decoding and rewriting errors."""

    def __init__(self, message: str, offset: Optional[int] = None, index: Optional[int] = None):
        self.offset = offset
        self.index = index
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        context = []
        if self.index is not None:
            context.append(f"track {self.index}")
        if self.offset is not None:
            context.append(f"offset 0x{self.offset:X}")
        if context:
            return f"{message} ({', '.join(context)})"
        return message


class MalformedHeader(SMFError):
    """Missing or short file header, or wrong 'MThd' magic."""


class UnsupportedTiming(SMFError):
    """Division field uses SMPTE timing (top bit set)."""


class MalformedTrackHeader(SMFError):
    """Missing or short track chunk header, or wrong 'MTrk' magic."""


class TruncatedTrack(SMFError):
    """Fewer bytes available than the track's declared length."""


class InvalidVariableLength(SMFError):
    """Variable-length quantity not terminated within 4 bytes."""


class InvalidRunningStatus(SMFError):
    """Running status used with no channel status to reuse."""


class TrackBoundaryViolation(SMFError):
    """Events overrun the track chunk, or end-of-track comes too early."""


class InvalidTrackIndex(SMFError):
    """Track index outside the document's track range."""


def validate_track_index(index: int, num_tracks: int) -> None:
    """
    Validate a 0-based track index.

    Args:
        index: Track index
        num_tracks: Number of tracks in the document

    Raises:
        InvalidTrackIndex: If index is negative or not below num_tracks
    """
    if not 0 <= index < num_tracks:
        raise InvalidTrackIndex(
            f"invalid track index: file has {num_tracks} tracks", index=index
        )

