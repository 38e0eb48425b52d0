"""Seven-bit packing of System Exclusive payloads.

Each block of up to seven bytes is sent as one header byte holding their high
bits (bit ``i`` for byte ``i``), followed by the seven low-bit bodies.
"""

from collections.abc import Iterable


def encode_sysex(data: Iterable[int]) -> bytes:
    """Pack arbitrary bytes into seven-bit-safe SysEx data."""
    raw = bytes(data)
    out = bytearray()
    for start in range(0, len(raw), 7):
        block = raw[start:start + 7]
        out.append(sum((byte >> 7) << bit for bit, byte in enumerate(block)))
        out.extend(byte & 0x7F for byte in block)
    return bytes(out)


def decode_sysex(data: Iterable[int]) -> bytes:
    """Unpack seven-bit SysEx data produced by ``encode_sysex``."""
    raw = bytes(data)
    out = bytearray()
    for start in range(0, len(raw), 8):
        msbs = raw[start]
        out.extend(
            byte | (((msbs >> bit) & 1) << 7)
            for bit, byte in enumerate(raw[start + 1:start + 8])
        )
    return bytes(out)