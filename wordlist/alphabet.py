import string
from typing import Iterable


class Alphabet:
    """Reprezentuje uporządkowany zestaw znaków, z których budujemy słowa."""

    DEFAULT = string.ascii_lowercase + string.ascii_uppercase + string.digits + "_."  # a-zA-Z0-9_.

    def __init__(self, charset: str = None):
        self.charset = self.DEFAULT if charset is None else charset
        if not self.charset:
            raise ValueError("Alfabet nie może być pusty")
        if len(set(self.charset)) != len(self.charset):
            raise ValueError("Alfabet nie może zawierać powtórzonych znaków")
        self.base = len(self.charset)
        self._positions = {ch: i for i, ch in enumerate(self.charset)}

    def __getitem__(self, index: int) -> str:
        return self.charset[index]

    def __len__(self) -> int:
        return self.base

    def __iter__(self) -> Iterable[str]:
        return iter(self.charset)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._positions

    def position(self, symbol: str) -> int:
        """Pozycja znaku w alfabecie (cyfra w systemie o podstawie `base`)."""
        try:
            return self._positions[symbol]
        except KeyError:
            raise ValueError(f"Znak {symbol!r} nie należy do alfabetu") from None

    def summary(self) -> str:
        """Krótki opis do banera, np. 'a-z A-Z 0-9 _ .'."""
        parts = []
        rest = self.charset
        for group, label in (
            (string.ascii_lowercase, "a-z"),
            (string.ascii_uppercase, "A-Z"),
            (string.digits, "0-9"),
        ):
            if group in rest:
                parts.append(label)
                rest = rest.replace(group, "", 1)
        parts.extend(rest)
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"Alphabet('{self.charset[:10]}{'...' if len(self.charset) > 10 else ''}', base={self.base})"
