from __future__ import annotations
from typing import Protocol, Iterator, List
from .alphabet import Alphabet
from .exceptions import IndexOutOfRange


class GenerationStrategy(Protocol):
    """Protokół strategii generowania słów."""

    def generate(self, start_idx: int, count: int) -> Iterator[str]:
        """Generuje count słów zaczynając od globalnego indeksu start_idx."""
        ...

    def total_combinations(self) -> int:
        """Zwraca całkowitą liczbę kombinacji."""
        ...


class LengthOrderedStrategy:
    """
    Numeracja wszystkich słów o długości 1..max_length: najpierw krótsze,
    w obrębie jednej długości leksykograficznie według kolejności alfabetu.

    Indeksy [cum[l-1], cum[l]) to słowa długości l, a przesunięcie w bloku
    zapisane w systemie o podstawie N (cyframi są znaki alfabetu, najbardziej
    znacząca z lewej) daje samo słowo.
    """

    def __init__(self, alphabet: Alphabet, max_length: int):
        if max_length < 1:
            raise ValueError("Maksymalna długość musi być >= 1")
        self.alphabet = alphabet
        self.max_length = max_length
        self._lengths = list(range(1, max_length + 1))
        self._counts = [alphabet.base ** L for L in self._lengths]
        # cum[l] = liczba wszystkich słów o długości <= l
        self._cum = [0]
        for cnt in self._counts:
            self._cum.append(self._cum[-1] + cnt)
        self._total = self._cum[-1]

    def total_combinations(self) -> int:
        return self._total

    def cumulative_counts(self) -> List[int]:
        return list(self._cum)

    def _check_index(self, idx: int) -> None:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise TypeError(f"Indeks musi być liczbą całkowitą, a nie {type(idx).__name__}")
        if idx < 0 or idx >= self._total:
            raise IndexOutOfRange(idx, self._total)

    def length_of(self, idx: int) -> int:
        """Długość słowa o indeksie idx."""
        self._check_index(idx)
        for L in self._lengths:
            if idx < self._cum[L]:
                return L
        raise IndexOutOfRange(idx, self._total)

    def word_at(self, idx: int) -> str:
        L = self.length_of(idx)
        offset = idx - self._cum[L - 1]
        base = self.alphabet.base
        chars = [""] * L
        for j in range(L - 1, -1, -1):
            chars[j] = self.alphabet[offset % base]
            offset //= base
        return "".join(chars)

    def index_of(self, word: str) -> int:
        """Odwrotność word_at: globalny indeks danego słowa."""
        if not word:
            raise ValueError("Słowo nie może być puste")
        if len(word) > self.max_length:
            raise ValueError(f"Słowo dłuższe niż {self.max_length} znaków")
        offset = 0
        for ch in word:
            offset = offset * self.alphabet.base + self.alphabet.position(ch)
        return self._cum[len(word) - 1] + offset

    def estimated_bytes(self) -> int:
        """Rozmiar całego wyniku w bajtach (słowo + znak nowej linii)."""
        return sum(cnt * (L + 1) for L, cnt in zip(self._lengths, self._counts))

    def generate(self, start_idx: int, count: int) -> Iterator[str]:
        if count <= 0:
            return
        self._check_index(start_idx)
        for idx in range(start_idx, min(start_idx + count, self._total)):
            yield self.word_at(idx)
