"""Building and sending MIDI messages over a serial port."""

from __future__ import annotations

from collections.abc import Iterable

from .defs import (
    CHANNEL_OFF,
    CHANNEL_OMNI,
    PITCHBEND_MAX,
    PITCHBEND_MIN,
    MidiType,
)
from .port import SerialPort
from .settings import Settings

_REAL_TIME_TYPES = frozenset(
    {
        MidiType.TUNE_REQUEST,
        MidiType.CLOCK,
        MidiType.START,
        MidiType.STOP,
        MidiType.CONTINUE,
        MidiType.ACTIVE_SENSING,
        MidiType.SYSTEM_RESET,
    }
)

_TWO_BYTE_CHANNEL_TYPES = frozenset(
    {MidiType.PROGRAM_CHANGE, MidiType.AFTER_TOUCH_CHANNEL}
)


class MidiOutput:
    """Writes MIDI messages to a port, with optional running status."""

    def __init__(self, port: SerialPort, settings: Settings | None = None) -> None:
        self.port = port
        self.settings = settings if settings is not None else Settings()
        self._running_status: int = MidiType.INVALID_TYPE

    @property
    def running_status(self) -> int:
        """The status byte last sent for a channel message, or INVALID_TYPE."""
        return self._running_status

    def reset_running_status(self) -> None:
        """Forget the running status so the next channel message sends its status."""
        self._running_status = MidiType.INVALID_TYPE

    def _cancel_running_status(self) -> None:
        if self.settings.use_running_status:
            self.reset_running_status()

    def send(self, midi_type: int, data1: int, data2: int, channel: int) -> None:
        """Send a raw message.

        Nothing is sent for an invalid channel (OMNI, OFF or above) or a
        non-status type; running status is then cancelled.  For types whose
        message holds one data byte, ``data2`` is ignored.
        """
        if channel >= CHANNEL_OFF or channel == CHANNEL_OMNI or midi_type < 0x80:
            self._cancel_running_status()
            return

        if midi_type <= MidiType.PITCH_BEND:
            data1 &= 0x7F
            data2 &= 0x7F
            status = (midi_type & 0xFF) | ((channel - 1) & 0x0F)

            if self.settings.use_running_status:
                if self._running_status != status:
                    self._running_status = status
                    self.port.write(status)
            else:
                self.port.write(status)

            self.port.write(data1)
            if midi_type not in _TWO_BYTE_CHANNEL_TYPES:
                self.port.write(data2)
        elif MidiType.TUNE_REQUEST <= midi_type <= MidiType.SYSTEM_RESET:
            self.send_real_time(midi_type)

    def send_note_on(self, note: int, velocity: int, channel: int) -> None:
        """Send a Note On; a zero velocity is commonly taken as Note Off."""
        self.send(MidiType.NOTE_ON, note, velocity, channel)

    def send_note_off(self, note: int, velocity: int, channel: int) -> None:
        """Send a real Note Off message."""
        self.send(MidiType.NOTE_OFF, note, velocity, channel)

    def send_program_change(self, program: int, channel: int) -> None:
        """Select a program (0 to 127)."""
        self.send(MidiType.PROGRAM_CHANGE, program, 0, channel)

    def send_control_change(self, number: int, value: int, channel: int) -> None:
        """Set a controller to a value."""
        self.send(MidiType.CONTROL_CHANGE, number, value, channel)

    def send_pitch_bend(self, value: int, channel: int) -> None:
        """Send a signed pitch bend between PITCHBEND_MIN and PITCHBEND_MAX."""
        bend = int(value) - PITCHBEND_MIN
        self.send(MidiType.PITCH_BEND, bend & 0x7F, (bend >> 7) & 0x7F, channel)

    def send_pitch_bend_float(self, value: float, channel: int) -> None:
        """Send a pitch bend given between -1.0 and +1.0."""
        self.send_pitch_bend(int(value * PITCHBEND_MAX), channel)

    def send_poly_pressure(self, note: int, pressure: int, channel: int) -> None:
        """Send polyphonic aftertouch for one note."""
        self.send(MidiType.AFTER_TOUCH_POLY, note, pressure, channel)

    def send_after_touch(self, pressure: int, channel: int) -> None:
        """Send channel (monophonic) aftertouch."""
        self.send(MidiType.AFTER_TOUCH_CHANNEL, pressure, 0, channel)

    def send_sysex(self, data: Iterable[int], contains_boundaries: bool = False) -> None:
        """Send a System Exclusive frame.

        Unless ``contains_boundaries`` is true, the 0xF0 and 0xF7 framing bytes
        are added around ``data``.
        """
        if not contains_boundaries:
            self.port.write(MidiType.SYSTEM_EXCLUSIVE)
        for value in bytes(data):
            self.port.write(value)
        if not contains_boundaries:
            self.port.write(0xF7)
        self._cancel_running_status()

    def send_time_code_quarter_frame(self, type_nibble: int, values_nibble: int) -> None:
        """Send an MTC quarter frame built from its type and value nibbles."""
        data = ((type_nibble & 0x07) << 4) | (values_nibble & 0x0F)
        self.send_time_code_quarter_frame_byte(data)

    def send_time_code_quarter_frame_byte(self, data: int) -> None:
        """Send an MTC quarter frame whose data byte is already assembled."""
        self.port.write(MidiType.TIME_CODE_QUARTER_FRAME)
        self.port.write(data & 0xFF)
        self._cancel_running_status()

    def send_song_position(self, beats: int) -> None:
        """Send a Song Position Pointer (beats since the start of the song)."""
        self.port.write(MidiType.SONG_POSITION)
        self.port.write(beats & 0x7F)
        self.port.write((beats >> 7) & 0x7F)
        self._cancel_running_status()

    def send_song_select(self, song: int) -> None:
        """Send a Song Select message."""
        self.port.write(MidiType.SONG_SELECT)
        self.port.write(song & 0x7F)
        self._cancel_running_status()

    def send_tune_request(self) -> None:
        """Ask receivers to tune their oscillators."""
        self.send_real_time(MidiType.TUNE_REQUEST)

    def send_real_time(self, midi_type: int) -> None:
        """Send a one-byte message; other types are ignored.

        Real-time messages leave running status in place; Tune Request, a
        System Common message, cancels it.
        """
        if midi_type in _REAL_TIME_TYPES:
            self.port.write(midi_type & 0xFF)
        if midi_type == MidiType.TUNE_REQUEST:
            self._cancel_running_status()