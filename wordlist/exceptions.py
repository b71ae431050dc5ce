"""Wyjątki pakietu wordlist."""


class WordlistError(Exception):
    """Bazowy wyjątek pakietu"""

    def __init__(self, message):
        super().__init__(message)


class IndexOutOfRange(WordlistError, IndexError):
    """Indeks spoza przestrzeni [0, total) generatora"""

    def __init__(self, index, total):
        self.index = index
        self.total = total
        super().__init__(f"Indeks {index} poza zakresem generatora [0, {total})")


class OutputFileError(WordlistError):
    """Nie udało się utworzyć lub zapisać pliku wynikowego"""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Nie można zapisać pliku {path}: {cause}")


class CursorPersistError(WordlistError):
    """Nie udało się zapisać kursora do pliku stanu"""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Nie można zapisać stanu do {path}: {cause}")
