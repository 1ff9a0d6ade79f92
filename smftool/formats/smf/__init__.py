"""Standard MIDI File format handlers."""

from smftool.formats.smf.decoder import decode, parse_event, read_header, read_track
from smftool.formats.smf.reader import SMFReader, decode_bytes

__all__ = ["SMFReader", "decode", "decode_bytes", "parse_event", "read_header", "read_track"]
