#!/usr/bin/env python3
"""
Example: Basic MIDI file analysis

Shows how to use the SMF reader to inspect a file's header, tracks and events.

Usage:
    python basic_analysis.py song.mid
"""

import sys

sys.path.insert(0, "..")

from smftool import SMFReader


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    smf = SMFReader.read(sys.argv[1])

    # Header
    print(f"Format: {smf.header.format}")
    print(f"Tracks: {smf.header.num_tracks}")
    print(f"Division: {smf.header.ticks_per_quarter} ticks/quarter")
    print()

    # Tracks with their position in the file
    print("Tracks:")
    for i, (track, (start, end)) in enumerate(zip(smf.tracks, smf.track_spans())):
        print(
            f"  [{i}] {track.name or '-':16s} 0x{start:06X}-0x{end:06X} "
            f"{len(track.events):5d} events  channels={track.channels}"
        )
    print()

    # First few events of the first track
    if smf.tracks:
        print("Track 0 events:")
        for event in smf.tracks[0].events[:10]:
            print(f"  +{event.delta:<6d} {event.type_name:20s} {event.data.hex(' ')}")


if __name__ == "__main__":
    main()
