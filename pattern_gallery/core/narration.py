"""Narration: where demonstration output lines go.

Invariants:
    - Lines are recorded in the exact order they are said
    - Transcript never performs IO; printing belongs to the shell (infrastructure.console)

Design Decisions:
    - Narrator is a Protocol: the stdout narrator in the shell satisfies it structurally
"""

from typing import Protocol


class Narrator(Protocol):
    """Contract for anything that receives narration lines."""
    def say(self, line: str = "") -> None: ...


class Transcript:
    """In-memory narrator. Collects lines for the shell or for tests."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def say(self, line: str = "") -> None:
        self._lines.append(line)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
