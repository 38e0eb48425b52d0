"""MIDI message types, thru filter modes, controller numbers and status helpers."""

from enum import IntEnum

CHANNEL_OMNI = 0
"""Listen on every channel."""

CHANNEL_OFF = 17
"""Any channel of this value or above disables input."""

PITCHBEND_MIN = -8192
PITCHBEND_MAX = 8191


class MidiType(IntEnum):
    """MIDI message types, valued by their status byte (channel nibble cleared)."""

    INVALID_TYPE = 0x00
    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    AFTER_TOUCH_POLY = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    AFTER_TOUCH_CHANNEL = 0xD0
    PITCH_BEND = 0xE0
    SYSTEM_EXCLUSIVE = 0xF0
    TIME_CODE_QUARTER_FRAME = 0xF1
    SONG_POSITION = 0xF2
    SONG_SELECT = 0xF3
    TUNE_REQUEST = 0xF6
    CLOCK = 0xF8
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    ACTIVE_SENSING = 0xFE
    SYSTEM_RESET = 0xFF


class FilterMode(IntEnum):
    """Which incoming messages the soft thru sends back out."""

    OFF = 0
    FULL = 1
    SAME_CHANNEL = 2
    DIFFERENT_CHANNEL = 3


class ControlChangeNumber(IntEnum):
    """Control Change controller numbers."""

    BANK_SELECT = 0
    MODULATION_WHEEL = 1
    BREATH_CONTROLLER = 2
    FOOT_CONTROLLER = 4
    PORTAMENTO_TIME = 5
    DATA_ENTRY = 6
    CHANNEL_VOLUME = 7
    BALANCE = 8
    PAN = 10
    EXPRESSION_CONTROLLER = 11
    EFFECT_CONTROL_1 = 12
    EFFECT_CONTROL_2 = 13
    GENERAL_PURPOSE_CONTROLLER_1 = 16
    GENERAL_PURPOSE_CONTROLLER_2 = 17
    GENERAL_PURPOSE_CONTROLLER_3 = 18
    GENERAL_PURPOSE_CONTROLLER_4 = 19

    SUSTAIN = 64
    PORTAMENTO = 65
    SOSTENUTO = 66
    SOFT_PEDAL = 67
    LEGATO = 68
    HOLD = 69

    SOUND_CONTROLLER_1 = 70
    SOUND_CONTROLLER_2 = 71
    SOUND_CONTROLLER_3 = 72
    SOUND_CONTROLLER_4 = 73
    SOUND_CONTROLLER_5 = 74
    SOUND_CONTROLLER_6 = 75
    SOUND_CONTROLLER_7 = 76
    SOUND_CONTROLLER_8 = 77
    SOUND_CONTROLLER_9 = 78
    SOUND_CONTROLLER_10 = 79
    GENERAL_PURPOSE_CONTROLLER_5 = 80
    GENERAL_PURPOSE_CONTROLLER_6 = 81
    GENERAL_PURPOSE_CONTROLLER_7 = 82
    GENERAL_PURPOSE_CONTROLLER_8 = 83
    PORTAMENTO_CONTROL = 84
    EFFECTS_1 = 91
    EFFECTS_2 = 92
    EFFECTS_3 = 93
    EFFECTS_4 = 94
    EFFECTS_5 = 95

    ALL_SOUND_OFF = 120
    RESET_ALL_CONTROLLERS = 121
    LOCAL_CONTROL = 122
    ALL_NOTES_OFF = 123
    OMNI_MODE_OFF = 124
    OMNI_MODE_ON = 125
    MONO_MODE_ON = 126
    POLY_MODE_ON = 127


_UNDEFINED_STATUS = frozenset({0xF4, 0xF5, 0xF9, 0xFD})

_CHANNEL_TYPES = frozenset(
    {
        MidiType.NOTE_OFF,
        MidiType.NOTE_ON,
        MidiType.CONTROL_CHANGE,
        MidiType.AFTER_TOUCH_POLY,
        MidiType.AFTER_TOUCH_CHANNEL,
        MidiType.PITCH_BEND,
        MidiType.PROGRAM_CHANGE,
    }
)


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"status byte out of range: {value!r}")
    return value


def type_from_status_byte(status: int) -> MidiType:
    """Return the message type a status byte announces.

    Data bytes and undefined status bytes give ``MidiType.INVALID_TYPE``.
    """
    _check_byte(status)
    if status < 0x80 or status in _UNDEFINED_STATUS:
        return MidiType.INVALID_TYPE
    if status < 0xF0:
        return MidiType(status & 0xF0)
    try:
        return MidiType(status)
    except ValueError:
        # 0xF7 (end of exclusive) is not a message of its own.
        return MidiType.INVALID_TYPE


def channel_from_status_byte(status: int) -> int:
    """Return the channel (1 to 16) carried in a status byte's low nibble."""
    _check_byte(status)
    return (status & 0x0F) + 1


def is_channel_message(midi_type: int) -> bool:
    """Tell whether a type is a channel voice message."""
    return midi_type in _CHANNEL_TYPES