"""Format handlers for Standard MIDI Files."""

from smftool.formats.smf import SMFReader, decode, decode_bytes

__all__ = ["SMFReader", "decode", "decode_bytes"]
