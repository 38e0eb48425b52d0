"""The decoded form of a received MIDI message."""

from dataclasses import dataclass, field

from .defs import MidiType


@dataclass
class Message:
    """A received MIDI message.

    For System Exclusive messages the length of ``sysex`` in use is stored in
    ``data1`` (low byte) and ``data2`` (high byte).
    """

    type: MidiType = MidiType.INVALID_TYPE
    channel: int = 0
    data1: int = 0
    data2: int = 0
    valid: bool = False
    sysex_max_size: int = 256
    sysex: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.sysex_max_size <= 0:
            raise ValueError(
                f"sysex_max_size must be positive, got {self.sysex_max_size}"
            )
        self.sysex = bytearray(self.sysex_max_size)

    def sysex_size(self) -> int:
        """Length of the System Exclusive data, capped at the buffer size."""
        size = (self.data2 << 8) | self.data1
        return min(size, self.sysex_max_size)

    def clear(self) -> None:
        """Return the message to its empty, invalid state."""
        self.valid = False
        self.type = MidiType.INVALID_TYPE
        self.channel = 0
        self.data1 = 0
        self.data2 = 0