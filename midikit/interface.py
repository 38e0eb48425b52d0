"""A complete MIDI interface: input parsing, callbacks, output and soft thru."""

from __future__ import annotations

from collections.abc import Callable

from .defs import CHANNEL_OFF, CHANNEL_OMNI, PITCHBEND_MIN, FilterMode, MidiType
from .message import Message
from .output import MidiOutput
from .parser import MidiParser
from .port import SerialPort
from .settings import Settings

Handler = Callable[..., None]

_ONE_BYTE_THRU = frozenset(
    {
        MidiType.CLOCK,
        MidiType.START,
        MidiType.STOP,
        MidiType.CONTINUE,
        MidiType.ACTIVE_SENSING,
        MidiType.SYSTEM_RESET,
        MidiType.TUNE_REQUEST,
    }
)


def _fourteen_bits(lsb: int, msb: int) -> int:
    return (lsb & 0x7F) | ((msb & 0x7F) << 7)


class MidiInterface:
    """Reads messages from a port, dispatches them to handlers and echoes them.

    Outgoing messages are sent through ``output``; the last received message is
    available as ``message``.
    """

    def __init__(self, port: SerialPort, settings: Settings | None = None) -> None:
        self.port = port
        self.settings = settings if settings is not None else Settings()
        self.output = MidiOutput(port, self.settings)
        self.parser = MidiParser(port, self.settings)
        self.input_channel = 1
        self._thru_active = True
        self._filter_mode = FilterMode.FULL
        self._handlers: dict[MidiType, Handler] = {}

    # ------------------------------------------------------------------
    # Setup

    def begin(self, channel: int = 1) -> None:
        """Open the port and reset input, output and thru to their defaults."""
        self.port.begin(self.settings.baud_rate)
        self.input_channel = channel
        self.output.reset_running_status()
        self.parser.reset()
        self.parser.message.clear()
        self._filter_mode = FilterMode.FULL
        self._thru_active = True

    # ------------------------------------------------------------------
    # Received message

    @property
    def message(self) -> Message:
        """The last message received."""
        return self.parser.message

    @property
    def sysex_array(self) -> bytes:
        """The last System Exclusive frame received, boundaries included."""
        message = self.parser.message
        return bytes(message.sysex[: message.sysex_size()])

    # ------------------------------------------------------------------
    # Input

    def read(self, channel: int | None = None) -> bool:
        """Read from the port; return True when a message for this input arrived.

        A channel of CHANNEL_OFF or above disables input for this call.  Channel
        matching is done against ``input_channel``; system messages always
        match.  Matching messages reach their handler, and every complete
        message is offered to the soft thru.
        """
        if channel is None:
            channel = self.input_channel
        if channel >= CHANNEL_OFF:
            return False
        if not self.parser.parse():
            return False

        self._handle_null_velocity_note_on()
        matched = self._input_filter()
        if matched:
            self._launch_handler()
        self._thru_filter()
        return matched

    def _handle_null_velocity_note_on(self) -> None:
        message = self.parser.message
        if (
            self.settings.handle_null_velocity_note_on_as_note_off
            and message.type == MidiType.NOTE_ON
            and message.data2 == 0
        ):
            message.type = MidiType.NOTE_OFF

    def _listens_to(self, channel: int) -> bool:
        return channel == self.input_channel or self.input_channel == CHANNEL_OMNI

    def _input_filter(self) -> bool:
        message = self.parser.message
        if message.type == MidiType.INVALID_TYPE:
            return False
        if MidiType.NOTE_OFF <= message.type <= MidiType.PITCH_BEND:
            return self._listens_to(message.channel)
        return True

    # ------------------------------------------------------------------
    # Handlers

    def on(self, midi_type: int, handler: Handler) -> Handler:
        """Call ``handler`` whenever a message of ``midi_type`` is received.

        Channel messages pass ``(channel, data1, data2)`` or ``(channel, data1)``;
        pitch bend passes ``(channel, bend)`` with bend centred on zero; System
        Exclusive passes the frame as bytes; Song Position passes the beats;
        Time Code and Song Select pass their data byte; the rest pass nothing.
        """
        kind = MidiType(midi_type)
        if kind == MidiType.INVALID_TYPE:
            raise ValueError("cannot attach a handler to the invalid type")
        self._handlers[kind] = handler
        return handler

    def disconnect(self, midi_type: int) -> None:
        """Detach the handler for ``midi_type``, if any."""
        self._handlers.pop(midi_type, None)

    def _launch_handler(self) -> None:
        message = self.parser.message
        handler = self._handlers.get(message.type)
        if handler is None:
            return
        kind = message.type
        if kind in (
            MidiType.NOTE_OFF,
            MidiType.NOTE_ON,
            MidiType.AFTER_TOUCH_POLY,
            MidiType.CONTROL_CHANGE,
        ):
            handler(message.channel, message.data1, message.data2)
        elif kind in (MidiType.PROGRAM_CHANGE, MidiType.AFTER_TOUCH_CHANNEL):
            handler(message.channel, message.data1)
        elif kind == MidiType.PITCH_BEND:
            handler(
                message.channel,
                _fourteen_bits(message.data1, message.data2) + PITCHBEND_MIN,
            )
        elif kind == MidiType.SYSTEM_EXCLUSIVE:
            handler(self.sysex_array)
        elif kind == MidiType.SONG_POSITION:
            handler(_fourteen_bits(message.data1, message.data2))
        elif kind in (MidiType.TIME_CODE_QUARTER_FRAME, MidiType.SONG_SELECT):
            handler(message.data1)
        else:
            handler()

    # ------------------------------------------------------------------
    # Soft thru

    @property
    def filter_mode(self) -> FilterMode:
        """The current thru filter mode."""
        return self._filter_mode

    @property
    def thru_active(self) -> bool:
        """Whether received messages are echoed to the output."""
        return self._thru_active

    def turn_thru_on(self, mode: FilterMode = FilterMode.FULL) -> None:
        """Enable the soft thru with the given filter mode."""
        self._thru_active = True
        self._filter_mode = FilterMode(mode)

    def turn_thru_off(self) -> None:
        """Disable the soft thru."""
        self._thru_active = False
        self._filter_mode = FilterMode.OFF

    def set_thru_filter_mode(self, mode: FilterMode) -> None:
        """Set the thru filter; any mode but OFF also enables the thru."""
        self._filter_mode = FilterMode(mode)
        self._thru_active = self._filter_mode != FilterMode.OFF

    def _thru_filter(self) -> None:
        if not self._thru_active or self._filter_mode == FilterMode.OFF:
            return

        message = self.parser.message
        out = self.output
        if MidiType.NOTE_OFF <= message.type <= MidiType.PITCH_BEND:
            listened = self._listens_to(message.channel)
            mode = self._filter_mode
            if (
                mode == FilterMode.FULL
                or (mode == FilterMode.SAME_CHANNEL and listened)
                or (mode == FilterMode.DIFFERENT_CHANNEL and not listened)
            ):
                out.send(message.type, message.data1, message.data2, message.channel)
            return

        if message.type in _ONE_BYTE_THRU:
            out.send_real_time(message.type)
        elif message.type == MidiType.SYSTEM_EXCLUSIVE:
            out.send_sysex(self.sysex_array, True)
        elif message.type == MidiType.SONG_SELECT:
            out.send_song_select(message.data1)
        elif message.type == MidiType.SONG_POSITION:
            out.send_song_position(message.data1 | (message.data2 << 7))
        elif message.type == MidiType.TIME_CODE_QUARTER_FRAME:
            out.send_time_code_quarter_frame(message.data1, message.data2)