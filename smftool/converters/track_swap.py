"""
Track swap converter.

Exchanges two track chunks of a Standard MIDI File.

The swap is a byte-range transplant: the decoded document is only used to
locate each track chunk in the original buffer. The chunks themselves are
copied verbatim, so every track keeps its exact original encoding
(running status, VLQ padding, unusual meta events and so on).

The process:
1. Read the whole input into memory
2. Decode it to validate the structure and learn the track lengths
3. Compute each track chunk's (start, end) span after the 14-byte header
4. Exchange the spans of the two tracks
5. Write the header followed by every span in the new order
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from smftool.formats.smf.reader import decode_bytes
from smftool.models.smf import HEADER_LENGTH, SMF
from smftool.utils.validation import validate_track_index

logger = logging.getLogger(__name__)


def swapped_spans(smf: SMF, a: int, b: int) -> List[Tuple[int, int]]:
    """
    Compute the track spans in output order with tracks ``a`` and ``b`` exchanged.

    Args:
        smf: Decoded document
        a: First track index (0-based)
        b: Second track index (0-based)

    Returns:
        List of (start, end) offsets into the original file

    Raises:
        InvalidTrackIndex: If either index is out of range
    """
    num_tracks = len(smf.tracks)
    validate_track_index(a, num_tracks)
    validate_track_index(b, num_tracks)

    spans = smf.track_spans()
    spans[a], spans[b] = spans[b], spans[a]
    return spans


def swap_track_bytes(data: bytes, smf: SMF, a: int, b: int) -> bytes:
    """
    Build a new file with tracks ``a`` and ``b`` exchanged.

    Args:
        data: Original file contents
        smf: Document decoded from ``data``
        a: First track index (0-based)
        b: Second track index (0-based)

    Returns:
        Output file contents
    """
    spans = swapped_spans(smf, a, b)

    out = bytearray(data[:HEADER_LENGTH])
    for start, end in spans:
        out += data[start:end]

    logger.debug("Swapped track %d and %d (%d bytes)", a, b, len(out))
    return bytes(out)


def swap_tracks(dst: BinaryIO, src: BinaryIO, a: int, b: int, strict: bool = False) -> None:
    """
    Read an SMF from ``src`` and write it to ``dst`` with two tracks exchanged.

    Nothing is written to ``dst`` unless decoding and index validation
    succeed.

    Args:
        dst: Writable binary sink
        src: Readable binary stream positioned at the start of the file
        a: First track index (0-based)
        b: Second track index (0-based)
        strict: Require every track to end with end-of-track

    Raises:
        SMFError: If the input is not a valid SMF or an index is out of range
    """
    data = src.read()
    smf = decode_bytes(data, strict=strict)
    dst.write(swap_track_bytes(data, smf, a, b))


def default_output_path(filepath: Union[str, Path], a: int, b: int) -> Path:
    """
    Derive the output file name for a swap.

    Example:
        >>> default_output_path("songs/demo.mid", 1, 3)
        PosixPath('songs/demo_swap_1_3.mid')
    """
    filepath = Path(filepath)
    return filepath.with_name(f"{filepath.stem}_swap_{a}_{b}{filepath.suffix}")


class TrackSwapper:
    """
    File-level track swapper.

    The output is written to a temporary file in the destination directory
    and moved into place only after the swap succeeded, so a failed swap
    never leaves a half-written file behind.

    Example:
        swapper = TrackSwapper()
        output = swapper.swap_file("song.mid", 1, 2)
        print(f"Written {output}")
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def swap_bytes(self, data: bytes, a: int, b: int) -> bytes:
        """
        Swap two tracks of an in-memory file.

        Args:
            data: Original file contents
            a: First track index (0-based)
            b: Second track index (0-based)

        Returns:
            Output file contents
        """
        smf = decode_bytes(data, strict=self.strict)
        return swap_track_bytes(data, smf, a, b)

    def swap_file(
        self,
        input_path: Union[str, Path],
        a: int,
        b: int,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Swap two tracks of a file on disk.

        Args:
            input_path: Source .mid file
            a: First track index (0-based)
            b: Second track index (0-based)
            output_path: Destination; defaults to ``<stem>_swap_<a>_<b><ext>``

        Returns:
            Path of the written file
        """
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(f"File not found: {input_path}")

        output_path = Path(output_path) if output_path else default_output_path(input_path, a, b)

        with open(input_path, "rb") as f:
            data = f.read()

        result = self.swap_bytes(data, a, b)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(result)
            os.replace(tmp_name, output_path)
        except BaseException:
            os.unlink(tmp_name)
            raise

        logger.debug("Wrote %s", output_path)
        return output_path


def swap_track_file(
    input_path: Union[str, Path],
    a: int,
    b: int,
    output_path: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Convenience function: swap tracks ``a`` and ``b`` of a file.

    Args:
        input_path: Source .mid file
        a: First track index (0-based)
        b: Second track index (0-based)
        output_path: Optional destination

    Returns:
        Path of the written file
    """
    return TrackSwapper().swap_file(input_path, a, b, output_path)
