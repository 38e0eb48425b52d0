"""MIDI message output, stream parsing, soft thru, SysEx packing and note tracking."""

__version__ = "4.2.0"

__all__ = [
    "defs",
    "interface",
    "message",
    "notelist",
    "output",
    "parser",
    "pitches",
    "port",
    "settings",
    "sysex",
]