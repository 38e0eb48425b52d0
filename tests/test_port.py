import pytest

from midikit.port import MemoryPort


def test_begin_records_baud_rate():
    port = MemoryPort()
    port.begin(31250)
    assert port.baud_rate == 31250


def test_feed_and_read_in_order():
    port = MemoryPort()
    port.feed(b"\x90\x3c")
    port.feed([0x40])
    assert port.available() == 3
    assert [port.read() for _ in range(3)] == [0x90, 0x3C, 0x40]
    assert port.available() == 0


def test_read_empty_raises():
    port = MemoryPort()
    with pytest.raises(EOFError):
        port.read()


def test_written_bytes_collected_and_cleared():
    port = MemoryPort()
    for value in (0xF8, 0xFA):
        port.write(value)
    assert port.take_written() == b"\xf8\xfa"
    assert port.take_written() == b""


@pytest.mark.parametrize("value", [-1, 256])
def test_write_out_of_range_raises(value):
    port = MemoryPort()
    with pytest.raises(ValueError):
        port.write(value)
    assert port.take_written() == b""


def test_feed_rejects_non_bytes():
    port = MemoryPort()
    with pytest.raises(ValueError):
        port.feed([300])
    assert port.available() == 0