"""
config.py
---------
Stałe generatora i niezmienna konfiguracja przekazywana do niego przy budowie.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from dotenv import load_dotenv

from .alphabet import Alphabet

# === KONFIGURACJA ===
CHARSET = Alphabet.DEFAULT            # a-z A-Z 0-9 _ .
MAX_LENGTH = 4                        # długości 1..4
BATCH_SIZE = 250_000                  # paczka między odświeżeniami postępu
ENTRIES_PER_FILE = 2_000_000          # słów w jednym pliku
CHECKPOINT_EVERY = 20                 # commit + push co tyle plików
PROGRESS_INTERVAL = 0.15              # sekundy między liniami postępu
STATE_FILE = "state.txt"
FILE_PATTERN = "combos_{:06d}.txt"
GIT_REMOTE = "origin"
GIT_BRANCH = "main"


@dataclass(frozen=True)
class WordlistConfig:
    charset: str = CHARSET
    max_length: int = MAX_LENGTH
    batch_size: int = BATCH_SIZE
    entries_per_file: int = ENTRIES_PER_FILE
    checkpoint_every: int = CHECKPOINT_EVERY
    progress_interval: float = PROGRESS_INTERVAL
    output_dir: Path = field(default_factory=Path)
    state_file: str = STATE_FILE
    file_pattern: str = FILE_PATTERN
    git_remote: str = GIT_REMOTE
    git_branch: str = GIT_BRANCH

    def __post_init__(self):
        for name in ("max_length", "batch_size", "entries_per_file", "checkpoint_every"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} musi być >= 1")
        if self.progress_interval < 0:
            raise ValueError("progress_interval nie może być ujemny")
        object.__setattr__(self, "output_dir", Path(self.output_dir))

    @property
    def state_path(self) -> Path:
        return self.output_dir / self.state_file

    def file_name(self, file_num: int) -> str:
        return self.file_pattern.format(file_num)

    def file_path(self, file_num: int) -> Path:
        return self.output_dir / self.file_name(file_num)

    def with_changes(self, **changes) -> "WordlistConfig":
        return replace(self, **changes)


def load_config(**overrides) -> WordlistConfig:
    """
    Domyślna konfiguracja + ustawienia z .env / zmiennych środowiskowych.
    Z otoczenia bierzemy tylko katalog wyjściowy i cel pushowania,
    parametry samego wyliczania są stałe.
    """
    load_dotenv()
    values = {
        "output_dir": Path(os.getenv("WORDLIST_OUTPUT_DIR", ".")),
        "git_remote": os.getenv("WORDLIST_GIT_REMOTE", GIT_REMOTE),
        "git_branch": os.getenv("WORDLIST_GIT_BRANCH", GIT_BRANCH),
    }
    values.update(overrides)
    return WordlistConfig(**values)
