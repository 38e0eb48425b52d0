import dataclasses

import pytest

from midikit.defs import CHANNEL_OFF, CHANNEL_OMNI, PITCHBEND_MAX, FilterMode, MidiType
from midikit.interface import MidiInterface
from midikit.output import MidiOutput
from midikit.port import MemoryPort
from midikit.settings import Settings


def make(channel=1, settings=None):
    port = MemoryPort()
    midi = MidiInterface(port, settings)
    midi.begin(channel)
    return midi, port


def pump(midi, port):
    results = []
    while port.available():
        results.append(midi.read())
    return results


def wire(build):
    port = MemoryPort()
    build(MidiOutput(port))
    return port.take_written()


def test_begin_opens_port_at_default_baud_rate():
    midi, port = make(5)
    assert port.baud_rate == 31250
    assert midi.input_channel == 5
    assert midi.thru_active is True
    assert midi.filter_mode == FilterMode.FULL
    assert midi.message.valid is False


def test_note_on_reaches_handler_and_is_echoed():
    midi, port = make()
    calls = []
    midi.on(MidiType.NOTE_ON, lambda *args: calls.append(args))
    data = bytes([0x90, 60, 100])
    port.feed(data)
    results = pump(midi, port)
    assert results == [False, False, True]
    assert calls == [(1, 60, 100)]
    assert port.take_written() == data
    assert midi.message.type == MidiType.NOTE_ON


def test_null_velocity_note_on_becomes_note_off():
    midi, port = make()
    offs = []
    midi.on(MidiType.NOTE_OFF, lambda *args: offs.append(args))
    port.feed([0x90, 60, 0])
    pump(midi, port)
    assert midi.message.type == MidiType.NOTE_OFF
    assert offs == [(1, 60, 0)]


def test_null_velocity_kept_as_note_on_when_disabled():
    settings = dataclasses.replace(
        Settings(), handle_null_velocity_note_on_as_note_off=False
    )
    midi, port = make(settings=settings)
    port.feed([0x90, 60, 0])
    pump(midi, port)
    assert midi.message.type == MidiType.NOTE_ON


def test_other_channel_is_not_delivered_but_echoed_in_full_mode():
    midi, port = make(1)
    calls = []
    midi.on(MidiType.NOTE_ON, lambda *args: calls.append(args))
    data = bytes([0x91, 60, 100])
    port.feed(data)
    assert pump(midi, port) == [False, False, False]
    assert calls == []
    assert port.take_written() == data


@pytest.mark.parametrize(
    "mode, status, echoed",
    [
        (FilterMode.SAME_CHANNEL, 0x90, True),
        (FilterMode.SAME_CHANNEL, 0x91, False),
        (FilterMode.DIFFERENT_CHANNEL, 0x90, False),
        (FilterMode.DIFFERENT_CHANNEL, 0x91, True),
    ],
)
def test_thru_filter_modes(mode, status, echoed):
    midi, port = make(1)
    midi.set_thru_filter_mode(mode)
    data = bytes([status, 60, 100])
    port.feed(data)
    pump(midi, port)
    assert port.take_written() == (data if echoed else b"")


def test_omni_receives_every_channel():
    midi, port = make(CHANNEL_OMNI)
    channels = []
    midi.on(MidiType.CONTROL_CHANGE, lambda ch, num, val: channels.append(ch))
    port.feed([0xB3, 7, 90, 0xBF, 7, 90])
    pump(midi, port)
    assert channels == [4, 16]


def test_read_with_channel_off_consumes_nothing():
    midi, port = make()
    port.feed([0x90, 60, 100])
    assert midi.read(CHANNEL_OFF) is False
    assert port.available() == 3


def test_running_status_input_delivers_each_note():
    midi, port = make()
    notes = []
    midi.on(MidiType.NOTE_ON, lambda ch, note, vel: notes.append(note))
    port.feed([0x90, 60, 100, 62, 100])
    pump(midi, port)
    assert notes == [60, 62]


def test_full_parsing_reads_a_message_in_one_call():
    settings = dataclasses.replace(Settings(), use_1byte_parsing=False)
    midi, port = make(settings=settings)
    port.feed([0xC0, 9])
    got = []
    midi.on(MidiType.PROGRAM_CHANGE, lambda *args: got.append(args))
    assert midi.read() is True
    assert got == [(1, 9)]
    assert port.available() == 0


def test_pitch_bend_round_trip_through_handler():
    midi, port = make()
    bends = []
    midi.on(MidiType.PITCH_BEND, lambda ch, bend: bends.append(bend))
    for value in (0, PITCHBEND_MAX, -8192, 1234):
        port.feed(wire(lambda out, v=value: out.send_pitch_bend(v, 1)))
        pump(midi, port)
    assert bends == [0, PITCHBEND_MAX, -8192, 1234]


def test_song_position_round_trip():
    midi, port = make()
    beats = []
    midi.on(MidiType.SONG_POSITION, beats.append)
    port.feed(wire(lambda out: out.send_song_position(300)))
    pump(midi, port)
    assert beats == [300]


def test_song_select_handler_and_thru():
    midi, port = make()
    songs = []
    midi.on(MidiType.SONG_SELECT, songs.append)
    data = wire(lambda out: out.send_song_select(5))
    port.feed(data)
    pump(midi, port)
    assert songs == [5]
    assert port.take_written() == data


def test_sysex_handler_receives_frame_and_thru_echoes_it():
    midi, port = make()
    frames = []
    midi.on(MidiType.SYSTEM_EXCLUSIVE, frames.append)
    data = bytes([0xF0, 0x01, 0x02, 0x03, 0xF7])
    port.feed(data)
    results = pump(midi, port)
    assert results[-1] is True
    assert frames == [data]
    assert midi.sysex_array == data
    assert port.take_written() == data


def test_clock_handler_takes_no_arguments_and_is_echoed():
    midi, port = make()
    ticks = []
    midi.on(MidiType.CLOCK, lambda: ticks.append(1))
    port.feed([0xF8])
    assert midi.read() is True
    assert ticks == [1]
    assert port.take_written() == bytes([0xF8])


def test_disconnect_stops_handler():
    midi, port = make()
    calls = []
    midi.on(MidiType.NOTE_ON, lambda *args: calls.append(args))
    midi.disconnect(MidiType.NOTE_ON)
    port.feed([0x90, 60, 100])
    results = pump(midi, port)
    assert results[-1] is True
    assert calls == []


def test_on_rejects_invalid_type():
    midi, _ = make()
    with pytest.raises(ValueError):
        midi.on(MidiType.INVALID_TYPE, lambda: None)
    with pytest.raises(ValueError):
        midi.on(0xF4, lambda: None)


def test_turn_thru_off_silences_output():
    midi, port = make()
    midi.turn_thru_off()
    assert midi.thru_active is False
    assert midi.filter_mode == FilterMode.OFF
    port.feed([0x90, 60, 100, 0xF8])
    pump(midi, port)
    assert port.take_written() == b""


def test_turn_thru_on_and_set_filter_mode():
    midi, _ = make()
    midi.turn_thru_off()
    midi.turn_thru_on(FilterMode.SAME_CHANNEL)
    assert midi.thru_active is True
    assert midi.filter_mode == FilterMode.SAME_CHANNEL
    midi.set_thru_filter_mode(FilterMode.OFF)
    assert midi.thru_active is False
    midi.set_thru_filter_mode(FilterMode.DIFFERENT_CHANNEL)
    assert midi.thru_active is True


def test_output_sends_through_interface_port():
    midi, port = make()
    midi.output.send_note_on(60, 100, 1)
    midi.output.send_note_on(62, 100, 1)
    assert port.take_written() == bytes([0x90, 60, 100, 62, 100])