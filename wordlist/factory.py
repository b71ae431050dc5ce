"""
factory.py
----------
Fabryka – gotowe generatory z domyślnymi ustawieniami
(pełna lista słów z checkpointem w gicie).
"""

from __future__ import annotations
from typing import Optional
from .builder import GeneratorBuilder
from .checkpoint import GitCheckpoint
from .config import WordlistConfig, load_config
from .writer import ResumableBatchWriter


class GeneratorFactory:
    """Statyczna fabryka – wygodne „jednolinijkowe” tworzenie generatorów."""

    @staticmethod
    def default_wordlist(config: Optional[WordlistConfig] = None) -> ResumableBatchWriter:
        config = config or load_config()
        checkpoint = GitCheckpoint(
            remote=config.git_remote,
            branch=config.git_branch,
            cwd=config.output_dir,
        )
        return GeneratorBuilder(config).with_checkpoint(checkpoint).build()
