from __future__ import annotations
from pathlib import Path
from typing import Optional

from .exceptions import CursorPersistError


class CursorStore:
    """Plik stanu z indeksem ostatniego zapisanego słowa (włącznie)."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[int]:
        """Zwraca zapisany indeks albo None, gdy pliku nie ma lub jest nieczytelny."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
        try:
            return int(text.strip())
        except ValueError:
            return None

    def save(self, last_index: int) -> None:
        try:
            self.path.write_text(str(last_index), encoding="utf-8")
        except OSError as e:
            raise CursorPersistError(self.path, e) from e
