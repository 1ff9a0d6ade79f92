#!/usr/bin/env python3
"""
Example: Swap two tracks

Exchanges two tracks and shows that every other byte is unchanged.

Usage:
    python swap_tracks.py song.mid 1 2
"""

import io
import sys

sys.path.insert(0, "..")

from smftool import decode_bytes, swap_tracks


def main():
    if len(sys.argv) < 4:
        print(__doc__)
        sys.exit(1)

    path, a, b = sys.argv[1], int(sys.argv[2]), int(sys.argv[3])

    with open(path, "rb") as f:
        original = f.read()

    out = io.BytesIO()
    swap_tracks(out, io.BytesIO(original), a, b)
    swapped = out.getvalue()

    before = decode_bytes(original)
    after = decode_bytes(swapped)

    print(f"Input:  {len(original)} bytes")
    print(f"Output: {len(swapped)} bytes")
    print()
    for i, (old, new) in enumerate(zip(before.tracks, after.tracks)):
        marker = "*" if i in (a, b) else " "
        print(f" {marker} [{i}] {old.name or '-':16s} -> {new.name or '-'}")

    # Swapping again restores the original
    again = io.BytesIO()
    swap_tracks(again, io.BytesIO(swapped), a, b)
    print()
    print(f"Round trip identical: {again.getvalue() == original}")


if __name__ == "__main__":
    main()
