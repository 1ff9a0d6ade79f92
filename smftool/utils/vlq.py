"""
MIDI variable-length quantity (VLQ) encoding/decoding utilities.

Standard MIDI Files store delta-times and meta/sysex lengths as
variable-length quantities:

- Each byte contributes its low 7 bits, most significant group first
- Bit 7 is set on every byte except the last one
- At most 4 bytes are used, so the largest value is 0x0FFFFFFF

Example:
    Value:   0x2000 (8192)
    Groups:  0b1000000, 0b0000000
    Encoded: [0xC0, 0x00]
"""

from typing import Tuple, Union

from smftool.utils.validation import InvalidVariableLength

MAX_VLQ_BYTES = 4
MAX_VLQ_VALUE = 0x0FFFFFFF


def decode_vlq(data: Union[bytes, bytearray, memoryview], offset: int = 0) -> Tuple[int, int]:
    """
    Decode a variable-length quantity starting at ``offset``.

    Args:
        data: Buffer holding the encoded value
        offset: Position of the first VLQ byte

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        InvalidVariableLength: If no terminating byte is found within
            4 bytes, or the buffer ends first

    Example:
        >>> decode_vlq(bytes([0x81, 0x00]))
        (128, 2)
    """
    value = 0
    end = min(len(data), offset + MAX_VLQ_BYTES)

    for pos in range(offset, end):
        byte = data[pos]
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, pos - offset + 1

    raise InvalidVariableLength(
        "invalid variable-length encoding: no terminating byte", offset=offset
    )


def encode_vlq(value: int) -> bytes:
    """
    Encode an unsigned integer as a variable-length quantity.

    Args:
        value: Integer in range 0..0x0FFFFFFF

    Returns:
        1 to 4 encoded bytes

    Raises:
        ValueError: If value does not fit in 4 VLQ bytes

    Example:
        >>> encode_vlq(0x2000)
        b'\\xc0\\x00'
    """
    if not 0 <= value <= MAX_VLQ_VALUE:
        raise ValueError(f"VLQ value must be 0-{MAX_VLQ_VALUE:#x}, got {value}")

    result = bytearray([value & 0x7F])
    value >>= 7

    while value:
        result.insert(0, (value & 0x7F) | 0x80)
        value >>= 7

    return bytes(result)
