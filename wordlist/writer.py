from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .checkpoint import Checkpoint, NoCheckpoint
from .config import WordlistConfig
from .exceptions import CursorPersistError, OutputFileError
from .generator import WordGenerator
from .progress import ProgressReporter
from .state import CursorStore


@dataclass
class RunSummary:
    total: int
    generated: int
    elapsed: float
    files_completed: int
    resumed_from: Optional[int]

    @property
    def average_speed(self) -> float:
        return self.generated / self.elapsed if self.elapsed > 0 else 0.0


class ResumableBatchWriter:
    """
    Zapisuje całą przestrzeń słów do kolejnych plików combos_XXXXXX.txt.

    Po każdym zamkniętym pliku zapisuje do pliku stanu indeks ostatniego słowa,
    więc przerwany przebieg wznawia się od pierwszego słowa niedokończonego
    pliku (plik jest generowany od nowa, nigdy dopisywany). Co
    `checkpoint_every` plików woła checkpoint (domyślnie git push).
    """

    def __init__(
        self,
        generator: WordGenerator,
        config: WordlistConfig,
        checkpoint: Optional[Checkpoint] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.generator = generator
        self.config = config
        self.checkpoint = checkpoint or NoCheckpoint()
        self.store = CursorStore(config.state_path)
        self.total = generator.total_combinations()
        self._clock = clock
        self.progress = ProgressReporter(self.total, config.progress_interval, clock)
        self.next_index = 0
        self.files_completed = 0
        self.resumed_from: Optional[int] = None

    # ======== WZNOWIENIE ========
    def resume(self) -> int:
        """Ustawia kursor na podstawie pliku stanu i zwraca indeks następnego słowa."""
        epf = self.config.entries_per_file
        persisted = self.store.load()
        self.resumed_from = None
        self.next_index = 0

        if persisted is not None and not 0 <= persisted < self.total:
            print(f"[UWAGA] Stan {persisted} poza zakresem [0, {self.total}), zaczynam od zera")
            persisted = None

        if persisted is None:
            print("[START] Generowanie od początku...\n")
        else:
            self.resumed_from = persisted
            self.next_index = persisted + 1
            if self.next_index < self.total and self.next_index % epf:
                # kursor w środku pliku: cały plik robimy od nowa
                self.next_index -= self.next_index % epf
            done = self.next_index / self.total * 100
            print(f"[WZNOWIENIE] Pozycja {persisted:,} ({done:.4f}% gotowe)\n")

        self.files_completed = -(-self.next_index // epf)
        return self.next_index

    # ======== GENEROWANIE ========
    def run(self) -> RunSummary:
        self.resume()
        start_index = self.next_index
        started = self._clock()
        self.progress.restart()
        last_file = None

        while self.next_index < self.total:
            last_file, written = self._write_file()
            self.files_completed += 1
            print(f"\n[PLIK] Gotowe: {last_file} ({written:,} słów) - plików razem: {self.files_completed}")
            if self.files_completed % self.config.checkpoint_every == 0:
                self.checkpoint(self.files_completed, last_file)

        if self.files_completed % self.config.checkpoint_every != 0:
            if last_file is None:
                last_file = self.config.file_name(self.files_completed)
            self.checkpoint(self.files_completed, last_file)

        return RunSummary(
            total=self.total,
            generated=self.next_index - start_index,
            elapsed=self._clock() - started,
            files_completed=self.files_completed,
            resumed_from=self.resumed_from,
        )

    def _write_file(self) -> Tuple[str, int]:
        epf = self.config.entries_per_file
        file_num = self.next_index // epf + 1
        path = self.config.file_path(file_num)
        first = self.next_index
        end = min(first + epf, self.total)

        try:
            with open(path, "w", encoding="utf-8", newline="\n") as fh:
                for start, words in self.generator.batches(self.next_index, end, self.config.batch_size):
                    fh.write("\n".join(words))
                    fh.write("\n")
                    self.next_index = start + len(words)
                    self.progress.advance(self.next_index, len(words), file_num)
        except OSError as e:
            raise OutputFileError(path, e) from e

        self._persist()
        return path.name, end - first

    def _persist(self) -> None:
        try:
            self.store.save(self.next_index - 1)
        except CursorPersistError as e:
            # nie przerywamy, ale po restarcie ten plik może zostać wygenerowany ponownie
            print(f"\n[BŁĄD] {e}")
