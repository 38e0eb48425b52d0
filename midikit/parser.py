"""Assembling MIDI messages from a stream of incoming bytes."""

from __future__ import annotations

from .defs import (
    MidiType,
    channel_from_status_byte,
    is_channel_message,
    type_from_status_byte,
)
from .message import Message
from .port import SerialPort
from .settings import Settings

_ONE_BYTE_TYPES = frozenset(
    {
        MidiType.START,
        MidiType.CONTINUE,
        MidiType.STOP,
        MidiType.CLOCK,
        MidiType.ACTIVE_SENSING,
        MidiType.SYSTEM_RESET,
        MidiType.TUNE_REQUEST,
    }
)

_TWO_BYTE_TYPES = frozenset(
    {
        MidiType.PROGRAM_CHANGE,
        MidiType.AFTER_TOUCH_CHANNEL,
        MidiType.TIME_CODE_QUARTER_FRAME,
        MidiType.SONG_SELECT,
    }
)

_THREE_BYTE_TYPES = frozenset(
    {
        MidiType.NOTE_ON,
        MidiType.NOTE_OFF,
        MidiType.CONTROL_CHANGE,
        MidiType.PITCH_BEND,
        MidiType.AFTER_TOUCH_POLY,
        MidiType.SONG_POSITION,
    }
)

# Real-time messages that may arrive in the middle of another message.
_INTERLEAVED_REAL_TIME = frozenset(
    {
        MidiType.CLOCK,
        MidiType.START,
        MidiType.CONTINUE,
        MidiType.STOP,
        MidiType.ACTIVE_SENSING,
        MidiType.SYSTEM_RESET,
    }
)

_END_OF_EXCLUSIVE = 0xF7


class MidiParser:
    """Reads bytes from a port and assembles them into ``message``.

    Running status is honoured for channel messages, real-time bytes may be
    interleaved within other messages, and System Exclusive frames are stored
    in ``message.sysex`` including their 0xF0 and 0xF7 boundaries.
    """

    def __init__(self, port: SerialPort, settings: Settings | None = None) -> None:
        self.port = port
        self.settings = settings if settings is not None else Settings()
        self.message = Message(sysex_max_size=self.settings.sysex_max_size)
        self._running_status: int = MidiType.INVALID_TYPE
        self._pending = [0, 0, 0]
        self._expected_length = 0
        self._index = 0

    @property
    def running_status(self) -> int:
        """The status byte that data bytes without a status are taken to follow."""
        return self._running_status

    def reset(self) -> None:
        """Drop any partly received message and forget the running status."""
        self._index = 0
        self._expected_length = 0
        self._running_status = MidiType.INVALID_TYPE

    def parse(self) -> bool:
        """Consume incoming bytes; return True once a complete message is stored.

        With one-byte parsing at most one byte is consumed per call; otherwise
        bytes are consumed until a message completes, an error occurs or the
        port runs dry.
        """
        while self.port.available():
            outcome = self._consume(self.port.read() & 0xFF)
            if outcome is not None:
                return outcome
            if self.settings.use_1byte_parsing:
                return False
        return False

    def _store(self, midi_type: MidiType, channel: int, data1: int, data2: int) -> None:
        self.message.type = midi_type
        self.message.channel = channel
        self.message.data1 = data1
        self.message.data2 = data2
        self.message.valid = True

    def _finish_pending(self, channel: int) -> None:
        data2 = self._pending[2] if self._expected_length == 3 else 0
        self._store(
            type_from_status_byte(self._pending[0]), channel, self._pending[1], data2
        )
        self._index = 0
        self._expected_length = 0

    def _consume(self, extracted: int) -> bool | None:
        """Handle one byte; None means the message is not complete yet."""
        if self._index == 0:
            return self._start_message(extracted)
        return self._continue_message(extracted)

    def _start_message(self, extracted: int) -> bool | None:
        self._pending[0] = extracted

        if is_channel_message(type_from_status_byte(self._running_status)):
            if extracted < 0x80:
                self._pending[0] = self._running_status
                self._pending[1] = extracted
                self._index = 1

        midi_type = type_from_status_byte(self._pending[0])
        if midi_type in _ONE_BYTE_TYPES:
            # Running status must survive these, so only the pending state is reset.
            self._store(midi_type, 0, 0, 0)
            self._index = 0
            self._expected_length = 0
            return True
        if midi_type in _TWO_BYTE_TYPES:
            self._expected_length = 2
        elif midi_type in _THREE_BYTE_TYPES:
            self._expected_length = 3
        elif midi_type == MidiType.SYSTEM_EXCLUSIVE:
            self._expected_length = self.message.sysex_max_size
            self._running_status = MidiType.INVALID_TYPE
            self.message.sysex[0] = MidiType.SYSTEM_EXCLUSIVE
        else:
            self.reset()
            return False

        if self._index >= self._expected_length - 1:
            self._finish_pending(channel_from_status_byte(self._pending[0]))
            return True

        self._index += 1
        return None

    def _continue_message(self, extracted: int) -> bool | None:
        if extracted >= 0x80:
            if extracted in _INTERLEAVED_REAL_TIME:
                # The pending message is left untouched, to be completed later.
                self._store(MidiType(extracted), 0, 0, 0)
                return True
            if extracted == _END_OF_EXCLUSIVE:
                if self.message.sysex[0] != MidiType.SYSTEM_EXCLUSIVE:
                    self.reset()
                    return False
                self.message.sysex[self._index] = _END_OF_EXCLUSIVE
                self._index += 1
                self._store(
                    MidiType.SYSTEM_EXCLUSIVE, 0, self._index & 0xFF, self._index >> 8
                )
                self.reset()
                return True

        in_sysex = self._pending[0] == MidiType.SYSTEM_EXCLUSIVE
        if in_sysex:
            self.message.sysex[self._index] = extracted
        else:
            self._pending[self._index] = extracted

        if self._index < self._expected_length - 1:
            self._index += 1
            return None

        if in_sysex:
            # The frame does not fit in the SysEx buffer.
            self.reset()
            return False

        midi_type = type_from_status_byte(self._pending[0])
        channel = (
            channel_from_status_byte(self._pending[0])
            if is_channel_message(midi_type)
            else 0
        )
        self._finish_pending(channel)

        if is_channel_message(midi_type):
            self._running_status = self._pending[0]
        else:
            self._running_status = MidiType.INVALID_TYPE
        return True