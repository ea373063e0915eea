"""Saving and loading the gold balance."""

from __future__ import annotations

import re
from pathlib import Path

from .gold import Gold

SAVE_FILE_NAME = "save.txt"
_INT_MAX = 2**31 - 1
_INTEGER = re.compile(rb"[0-9]+")


class SaveFormatError(ValueError):
    """The save file does not hold a non-negative integer."""


class SaveSystem:
    """Stores the gold amount as a plain integer in a text file."""

    def __init__(self, gold: Gold, path=None) -> None:
        self.gold = gold
        self._path = None if path is None else Path(path)

    @property
    def path(self) -> Path:
        """The save file; by default ``save.txt`` in the current directory."""
        return self._path if self._path is not None else Path.cwd() / SAVE_FILE_NAME

    def save_progress(self) -> None:
        self.path.write_text(str(self.gold.amount), encoding="ascii")

    def load_progress(self) -> int | None:
        """Add the saved amount to the gold and return it.

        Returns None for an empty file. Raises FileNotFoundError when there is
        no save file and SaveFormatError when its first line is not an integer.
        """
        data = self.path.read_bytes()
        if not data:
            return None
        line = data.partition(b"\n")[0]
        if not _INTEGER.fullmatch(line):
            raise SaveFormatError(f"invalid save file format: {line[:40]!r}")
        amount = int(line)
        if amount > _INT_MAX:
            raise SaveFormatError(f"saved amount is out of range: {amount}")
        self.gold.add(amount)
        return amount