from __future__ import annotations
import time
from pathlib import Path
from typing import Callable, Optional
from .alphabet import Alphabet
from .checkpoint import Checkpoint
from .config import WordlistConfig
from .generator import WordGenerator
from .strategies import LengthOrderedStrategy
from .writer import ResumableBatchWriter


class GeneratorBuilder:
    """Builder do konfigurowania generatora listy słów."""

    def __init__(self, config: Optional[WordlistConfig] = None):
        self._config = config or WordlistConfig()
        self._checkpoint: Optional[Checkpoint] = None
        self._clock: Callable[[], float] = time.monotonic

    def with_alphabet(self, charset: str) -> "GeneratorBuilder":
        Alphabet(charset)  # walidacja od razu, a nie dopiero w build()
        self._config = self._config.with_changes(charset=charset)
        return self

    def with_max_length(self, max_len: int) -> "GeneratorBuilder":
        if max_len < 1:
            raise ValueError("Niepoprawna długość")
        self._config = self._config.with_changes(max_length=max_len)
        return self

    def with_files(self, entries_per_file: int, batch_size: Optional[int] = None) -> "GeneratorBuilder":
        changes = {"entries_per_file": entries_per_file}
        if batch_size is not None:
            changes["batch_size"] = batch_size
        self._config = self._config.with_changes(**changes)
        return self

    def with_checkpoint_every(self, files: int) -> "GeneratorBuilder":
        self._config = self._config.with_changes(checkpoint_every=files)
        return self

    def with_output_dir(self, path: Path) -> "GeneratorBuilder":
        self._config = self._config.with_changes(output_dir=Path(path))
        return self

    def with_checkpoint(self, checkpoint: Checkpoint) -> "GeneratorBuilder":
        self._checkpoint = checkpoint
        return self

    def with_clock(self, clock: Callable[[], float], interval: Optional[float] = None) -> "GeneratorBuilder":
        self._clock = clock
        if interval is not None:
            self._config = self._config.with_changes(progress_interval=interval)
        return self

    @property
    def config(self) -> WordlistConfig:
        return self._config

    def build(self) -> ResumableBatchWriter:
        strategy = LengthOrderedStrategy(
            alphabet=Alphabet(self._config.charset),
            max_length=self._config.max_length,
        )
        return ResumableBatchWriter(
            WordGenerator(strategy),
            self._config,
            checkpoint=self._checkpoint,
            clock=self._clock,
        )
