"""
checkpoint.py
-------------
Okresowy "checkpoint" postępu: git add / commit / push katalogu z wynikami.
Każda porażka kończy się ostrzeżeniem, nigdy wyjątkiem w pętli generatora.
"""

from __future__ import annotations
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Tuple


class Checkpoint(Protocol):
    def __call__(self, files_completed: int, last_file: str) -> bool:
        """Próbuje zapisać postęp; zwraca True przy sukcesie, nigdy nie rzuca."""
        ...


class NoCheckpoint:
    """Checkpoint, który nic nie robi (testy, praca bez repozytorium)."""

    def __call__(self, files_completed: int, last_file: str) -> bool:
        return True


class GitCheckpoint:
    def __init__(
        self,
        remote: str = "origin",
        branch: str = "main",
        cwd: Optional[Path] = None,
        timeout: Optional[float] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.remote = remote
        self.branch = branch
        self.cwd = cwd
        self.timeout = timeout
        self._run = runner

    def commands(self, files_completed: int, last_file: str) -> List[Tuple[str, List[str]]]:
        message = f"Wordlist progress: added files up to {last_file} ({files_completed} files)"
        return [
            ("git add", ["git", "add", "."]),
            ("git commit", ["git", "commit", "-m", message]),
            ("git push", ["git", "push", self.remote, self.branch]),
        ]

    def __call__(self, files_completed: int, last_file: str) -> bool:
        print(f"\n[GIT] Commit i push postępu ({files_completed} plików gotowych)...")
        for name, args in self.commands(files_completed, last_file):
            try:
                result = self._run(args, cwd=self.cwd, timeout=self.timeout)
            except subprocess.TimeoutExpired:
                print(f"[UWAGA] {name}: przekroczono limit czasu ({self.timeout}s)")
                return False
            except OSError as e:
                # np. brak gita w PATH
                print(f"[UWAGA] {name} nie powiódł się: {e}")
                return False
            if result.returncode != 0:
                # auth / sieć - nie ponawiamy, generujemy dalej
                print(f"[UWAGA] {name} nie powiódł się (kod {result.returncode})")
                return False
        print("[GIT] Zapisano i wypchnięto!\n")
        return True
