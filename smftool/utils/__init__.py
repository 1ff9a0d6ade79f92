"""Utility functions for smftool."""

from smftool.utils.vlq import decode_vlq, encode_vlq
from smftool.utils.validation import SMFError, validate_track_index

__all__ = [
    "decode_vlq",
    "encode_vlq",
    "SMFError",
    "validate_track_index",
]
