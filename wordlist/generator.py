from __future__ import annotations
from typing import List, Tuple
from .strategies import GenerationStrategy


class BatchIterator:
    """
    Iterator paczek: idzie od start_idx do end_idx (bez końca) i zwraca
    krotki (indeks_początkowy, lista_słów) po co najwyżej batch_size słów.
    Kolejność jest zawsze rosnąca, paczki nie zachodzą na siebie.
    """

    def __init__(self, strategy: GenerationStrategy, start_idx: int, end_idx: int, batch_size: int):
        if batch_size < 1:
            raise ValueError("batch_size musi być >= 1")
        self._strategy = strategy
        self._current = int(start_idx)
        self._end = min(int(end_idx), strategy.total_combinations())
        self._batch_size = int(batch_size)

    def __iter__(self) -> "BatchIterator":
        return self

    def __next__(self) -> Tuple[int, List[str]]:
        if self._current >= self._end:
            raise StopIteration
        start = self._current
        count = min(self._batch_size, self._end - start)
        words = list(self._strategy.generate(start, count))
        self._current += count
        return start, words

    @property
    def position(self) -> int:
        """Indeks następnego słowa, które zostanie zwrócone."""
        return self._current


class WordGenerator:
    """
    Wyższy poziom nad strategią: trzyma ją i wystawia API potrzebne piszącemu
    do plików (liczba kombinacji, paczki).
    """

    def __init__(self, strategy: GenerationStrategy):
        self.strategy = strategy

    def total_combinations(self) -> int:
        return self.strategy.total_combinations()

    def batches(self, start_idx: int, end_idx: int, batch_size: int) -> BatchIterator:
        return BatchIterator(self.strategy, start_idx, end_idx, batch_size)
