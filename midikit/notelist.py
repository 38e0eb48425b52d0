"""Held notes in the order they were played, for Last, High and Low mono modes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MidiNote:
    """A note by pitch and velocity."""

    pitch: int = 0
    velocity: int = 0

    def __post_init__(self) -> None:
        for name in ("pitch", "velocity"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} out of range: {value!r}")


class MidiNoteList:
    """A bounded list of held notes, oldest first.

    Add a note on NoteOn and remove its pitch on NoteOff; the queries then give
    the note to play in each monophonic mode.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._notes: list[MidiNote] = []

    def add(self, note: MidiNote) -> None:
        """Append a note as the most recent one."""
        if len(self._notes) >= self.capacity:
            raise IndexError(f"note list is full ({self.capacity} notes)")
        self._notes.append(note)

    def remove(self, pitch: int) -> None:
        """Remove the most recent note of this pitch; do nothing if none is held."""
        for position in range(len(self._notes) - 1, -1, -1):
            if self._notes[position].pitch == pitch:
                del self._notes[position]
                return

    def get(self, index: int) -> int | None:
        """Pitch of the note ``index`` steps back from the most recent one.

        Indices past the oldest note give the oldest note; an empty list gives
        None.
        """
        if not self._notes:
            return None
        if index < 0:
            raise ValueError(f"index must not be negative, got {index}")
        position = max(len(self._notes) - 1 - index, 0)
        return self._notes[position].pitch

    def last(self) -> int | None:
        """Pitch of the most recently played note, or None when empty."""
        return self._notes[-1].pitch if self._notes else None

    def high(self) -> int | None:
        """Highest held pitch, or None when empty."""
        return max((note.pitch for note in self._notes), default=None)

    def low(self) -> int | None:
        """Lowest held pitch, or None when empty."""
        return min((note.pitch for note in self._notes), default=None)

    def __len__(self) -> int:
        return len(self._notes)

    def __bool__(self) -> bool:
        return bool(self._notes)