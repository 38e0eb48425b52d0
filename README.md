# midikit

A small, dependency-free MIDI toolkit. It builds MIDI messages as bytes,
parses an incoming byte stream (running status, interleaved real-time
messages and System Exclusive frames included), dispatches received messages
to handlers and mirrors input to output through a configurable soft thru.

It works over any object with `begin(baud_rate)`, `available()`, `read()` and
`write(value)` methods, as described by the `midikit.port.SerialPort`
protocol. The bundled `midikit.port.MemoryPort` is such an object held in
memory: `feed` queues bytes to be read, `take_written` returns and clears
everything written so far, and `read` raises `EOFError` when nothing is left.

## Installation

```
pip install midikit
```

## Sending messages

```python
from midikit.output import MidiOutput
from midikit.port import MemoryPort
from midikit.settings import Settings

port = MemoryPort()
out = MidiOutput(port, Settings())
out.send_note_on(60, 100, 1)
out.send_note_on(64, 100, 1)   # running status: status byte not repeated
print(port.take_written())     # b'\x90<d@d'
```

`MidiOutput` offers `send_note_on`, `send_note_off`, `send_program_change`,
`send_control_change`, `send_poly_pressure`, `send_after_touch`,
`send_pitch_bend` (signed, -8192 to 8191), `send_pitch_bend_float`
(-1.0 to 1.0), `send_sysex`, `send_time_code_quarter_frame`,
`send_time_code_quarter_frame_byte`, `send_song_position`,
`send_song_select`, `send_tune_request`, `send_real_time` and the raw `send`.
Channels run from 1 to 16; `send` writes nothing for channel 0
(`CHANNEL_OMNI`), 17 (`CHANNEL_OFF`) or above, and then forgets the running
status. `send_sysex` adds the 0xF0/0xF7 framing unless called with
`contains_boundaries=True`. `reset_running_status` forces the next channel
message to carry its status byte.

## Receiving messages

```python
from midikit.defs import MidiType
from midikit.interface import MidiInterface
from midikit.port import MemoryPort
from midikit.settings import Settings

port = MemoryPort()
midi = MidiInterface(port, Settings())
midi.begin(1)
midi.on(MidiType.NOTE_ON, lambda channel, note, velocity: print(note, velocity))

port.feed(b"\x90\x3c\x40")
while port.available():
    midi.read()
```

`read` returns true when a complete message for the input channel has been
received; system messages always match, and `input_channel` set to
`CHANNEL_OMNI` listens to every channel. The last message is available as
`midi.message` (a `midikit.message.Message` with `type`, `channel`, `data1`,
`data2` and `valid`), and the last System Exclusive frame, boundaries
included, as `midi.sysex_array`. A note-on with velocity 0 is reported as a
note-off by default.

Handlers receive `(channel, data1, data2)` for note, poly pressure and control
change messages, `(channel, data1)` for program change and channel
aftertouch, `(channel, bend)` for pitch bend with the bend centred on zero,
the frame as bytes for System Exclusive, the beat count for song position,
the data byte for time code and song select, and nothing for the one-byte
messages. `midi.disconnect(MidiType.NOTE_ON)` drops a handler.

The soft thru echoes received messages to the port. Control it with
`turn_thru_on(mode)`, `turn_thru_off()` or `set_thru_filter_mode(mode)` using
a `midikit.defs.FilterMode` (`OFF`, `FULL`, `SAME_CHANNEL`,
`DIFFERENT_CHANNEL`); `filter_mode` and `thru_active` report the state.

The byte-level parser is also usable alone: `midikit.parser.MidiParser`
assembles bytes from a port into its `message`, `parse` returning true once a
message is complete, and `reset` dropping any partial message.

## Settings

`midikit.settings.Settings` is a frozen dataclass with `use_running_status`,
`handle_null_velocity_note_on_as_note_off`, `use_1byte_parsing`, `baud_rate`
(31250) and `sysex_max_size` (256). Make a variant with
`dataclasses.replace(Settings(), use_running_status=False)`.

## Definitions

`midikit.defs` holds the `MidiType`, `FilterMode` and `ControlChangeNumber`
enumerations, the channel and pitch-bend limits, and the helpers
`type_from_status_byte`, `channel_from_status_byte` and `is_channel_message`.

## SysEx packing

`encode_sysex` and `decode_sysex` in `midikit.sysex` pack 8-bit data into
7-bit-safe blocks (one byte of high bits followed by up to seven data bytes)
and back.

## Note tracking

`midikit.notelist.MidiNoteList(capacity)` keeps the held `MidiNote`s in the
order they were played. `add` raises `IndexError` when the list is full and
`remove(pitch)` drops the most recent note of that pitch. `last`, `high` and
`low` give the pitch for each mono playing mode, and `get(index)` the pitch
`index` steps back from the most recent note; all return `None` when the list
is empty.

`midikit.pitches.note_frequency(index)` gives the tone frequency in hertz for
an entry in the note table (index 0 is B0, up to D#8); `NOTES` maps names such
as `"CS4"` to frequencies.

## What it does not do

midikit opens no serial device and produces no sound: it only turns messages
into bytes and bytes into messages over a port object you supply, and the note
list and pitch table give values for your own synthesis code to use.