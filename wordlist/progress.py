from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Optional


def format_eta(seconds: Optional[float]) -> str:
    if seconds is None:
        return "--h--m--s"
    s = int(seconds)
    return f"{s // 3600:02d}h{s // 60 % 60:02d}m{s % 60:02d}s"


def format_bytes(n: int) -> str:
    size = float(n)
    for unit in ("B", "KiB", "MiB", "GiB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TiB"


def progress_bar(percent: float, width: int = 50) -> str:
    filled = min(width, max(0, int(percent * width / 100)))
    return "█" * filled + "░" * (width - filled)


@dataclass
class ProgressSnapshot:
    file_num: int
    position: int
    total: int
    percent: float
    speed: float
    eta: Optional[float]

    def line(self) -> str:
        return (
            f"\r[POSTĘP] Plik {self.file_num:06d} │ {progress_bar(self.percent)} {self.percent:.4f}% │ "
            f"{self.position:>10,} / {self.total:>10,} │ {self.speed:8.0f}/s │ ETA: {format_eta(self.eta)}"
        )


class ProgressReporter:
    """
    Linia postępu nadpisywana w miejscu, odświeżana najwyżej co `interval`
    sekund według wstrzykniętego zegara. Nie wpływa na generowanie.
    """

    def __init__(self, total: int, interval: float = 0.15, clock: Callable[[], float] = time.monotonic):
        self.total = total
        self.interval = interval
        self._clock = clock
        self._last = clock()
        self._since_last = 0

    def restart(self) -> None:
        self._last = self._clock()
        self._since_last = 0

    def advance(self, position: int, count: int, file_num: int) -> Optional[ProgressSnapshot]:
        """Zlicza `count` nowych słów; zwraca i wypisuje migawkę, gdy minął interwał."""
        self._since_last += count
        now = self._clock()
        elapsed = now - self._last
        if elapsed < self.interval or elapsed <= 0:
            return None

        speed = self._since_last / elapsed
        remaining = self.total - position
        snapshot = ProgressSnapshot(
            file_num=file_num,
            position=position,
            total=self.total,
            percent=position / self.total * 100 if self.total else 100.0,
            speed=speed,
            eta=remaining / speed if speed > 0 else None,
        )
        print(snapshot.line(), end="", flush=True)
        self._since_last = 0
        self._last = now
        return snapshot
