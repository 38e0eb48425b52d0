"""Behaviour settings for a MIDI interface."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Tunable behaviour of the MIDI interface.

    Make a variant with ``dataclasses.replace(Settings(), ...)``.
    """

    use_running_status: bool = True
    """Omit repeated status bytes when sending messages of the same type and channel."""

    handle_null_velocity_note_on_as_note_off: bool = True
    """Report a NoteOn with zero velocity as a NoteOff."""

    use_1byte_parsing: bool = True
    """Parse at most one byte of input per read."""

    baud_rate: int = 31250
    """Serial speed handed to the port on begin."""

    sysex_max_size: int = 256
    """Largest System Exclusive message that can be received."""

    def __post_init__(self) -> None:
        if self.baud_rate <= 0:
            raise ValueError(f"baud_rate must be positive, got {self.baud_rate}")
        if self.sysex_max_size <= 0:
            raise ValueError(
                f"sysex_max_size must be positive, got {self.sysex_max_size}"
            )