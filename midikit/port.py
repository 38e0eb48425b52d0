"""Byte transports a MIDI interface reads from and writes to."""

from collections import deque
from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class SerialPort(Protocol):
    """What a MIDI interface needs from its transport."""

    def begin(self, baud_rate: int) -> None:
        """Open the port at the given speed."""

    def available(self) -> int:
        """Number of bytes waiting to be read."""

    def read(self) -> int:
        """Take the next incoming byte."""

    def write(self, value: int) -> None:
        """Send one byte."""


class MemoryPort:
    """An in-memory port: bytes are fed in by hand and written bytes collected."""

    def __init__(self) -> None:
        self.baud_rate: int | None = None
        self._incoming: deque[int] = deque()
        self._written = bytearray()

    def begin(self, baud_rate: int) -> None:
        """Record the requested speed."""
        self.baud_rate = baud_rate

    def available(self) -> int:
        """Number of fed bytes not yet read."""
        return len(self._incoming)

    def read(self) -> int:
        """Take the oldest fed byte; raise EOFError when none is left."""
        if not self._incoming:
            raise EOFError("no data available")
        return self._incoming.popleft()

    def write(self, value: int) -> None:
        """Collect one outgoing byte."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte out of range: {value!r}")
        self._written.append(value)

    def feed(self, data: Iterable[int]) -> None:
        """Queue bytes to be read."""
        self._incoming.extend(bytes(data))

    def take_written(self) -> bytes:
        """Return everything written so far and forget it."""
        written = bytes(self._written)
        self._written.clear()
        return written