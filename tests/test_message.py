import pytest

from midikit.defs import MidiType
from midikit.message import Message


def test_new_message_is_empty():
    message = Message()
    assert message.valid is False
    assert message.type is MidiType.INVALID_TYPE
    assert (message.channel, message.data1, message.data2) == (0, 0, 0)


def test_sysex_buffer_matches_max_size():
    assert len(Message(sysex_max_size=32).sysex) == 32


def test_sysex_size_low_byte():
    message = Message(type=MidiType.SYSTEM_EXCLUSIVE, data1=10, data2=0)
    assert message.sysex_size() == 10


def test_sysex_size_combines_bytes():
    message = Message(data1=3, data2=1, sysex_max_size=1024)
    assert message.sysex_size() == (1 << 8) | 3


def test_sysex_size_is_capped():
    message = Message(data1=0xFF, data2=0xFF, sysex_max_size=256)
    assert message.sysex_size() == 256


def test_clear_resets_fields():
    message = Message(type=MidiType.NOTE_ON, channel=3, data1=60, data2=100, valid=True)
    message.clear()
    assert message == Message()


def test_clear_keeps_sysex_buffer_contents():
    message = Message()
    message.sysex[0] = MidiType.SYSTEM_EXCLUSIVE
    message.clear()
    assert message.sysex[0] == MidiType.SYSTEM_EXCLUSIVE


def test_invalid_max_size_raises():
    with pytest.raises(ValueError):
        Message(sysex_max_size=0)