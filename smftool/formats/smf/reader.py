"""
Standard MIDI File reader.

Reads .mid files from disk or memory and decodes them into SMF documents.
"""

import io
from pathlib import Path
from typing import Union

from smftool.formats.smf.decoder import HEADER_STRUCT, decode
from smftool.models.smf import HEADER_LENGTH, HEADER_MAGIC, SMF


class SMFReader:
    """
    Reader for Standard MIDI Files.

    Example:
        smf = SMFReader.read("song.mid")
        print(f"Format {smf.header.format}, {len(smf.tracks)} tracks")
    """

    HEADER_MAGIC = HEADER_MAGIC
    HEADER_LENGTH = HEADER_LENGTH

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path], strict: bool = False) -> SMF:
        """
        Read a MIDI file and return the decoded document.

        Args:
            filepath: Path to .mid file
            strict: Require every track to end with end-of-track

        Returns:
            Decoded SMF
        """
        reader = cls(strict=strict)
        return reader.parse_file(filepath)

    @property
    def raw_data(self) -> bytes:
        """Bytes of the last parsed file."""
        return self._raw_data

    def parse_file(self, filepath: Union[str, Path]) -> SMF:
        """
        Parse a MIDI file.

        Args:
            filepath: Path to .mid file

        Returns:
            Decoded SMF
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> SMF:
        """
        Parse MIDI data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Decoded SMF
        """
        self._raw_data = bytes(data)
        return decode(io.BytesIO(self._raw_data), strict=self.strict)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with an SMF header.

        Args:
            filepath: Path to check

        Returns:
            True if the file begins with "MThd"
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        with open(filepath, "rb") as f:
            magic = f.read(4)

        return magic == cls.HEADER_MAGIC

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a MIDI file without decoding tracks.

        Args:
            filepath: Path to .mid file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
        }

        if len(data) >= cls.HEADER_LENGTH:
            magic, size, fmt, num_tracks, division = HEADER_STRUCT.unpack(data[: cls.HEADER_LENGTH])
            info.update(
                {
                    "valid": magic == cls.HEADER_MAGIC,
                    "format": fmt,
                    "num_tracks": num_tracks,
                    "division": division,
                    "smpte": bool(division & 0x8000),
                }
            )

        return info


def decode_bytes(data: bytes, strict: bool = False) -> SMF:
    """Decode an in-memory MIDI file."""
    return SMFReader(strict=strict).parse_bytes(data)
