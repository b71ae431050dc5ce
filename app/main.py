#!/usr/bin/env python3
import sys

from wordlist.exceptions import OutputFileError
from wordlist.factory import GeneratorFactory
from wordlist.progress import format_bytes, format_eta
from wordlist.writer import ResumableBatchWriter, RunSummary

LINE = "─" * 60


# === POMOCNICZE ===
def print_banner(writer: ResumableBatchWriter):
    strategy = writer.generator.strategy
    config = writer.config
    total = writer.total
    files = -(-total // config.entries_per_file)
    size = strategy.estimated_bytes()

    print("╔════════════════════════════════════════════════════════════╗")
    print("║              Alphanumeric + _ . Wordlist Generator         ║")
    print("╚════════════════════════════════════════════════════════════╝")
    print(f"Alfabet   : {strategy.alphabet.summary()}  ({strategy.alphabet.base} znaków)")
    print(f"Długości  : od 1 do {strategy.max_length} znaków")
    print(f"Razem     : {total:,} kombinacji (~{total / 1e9:.3f} mld)")
    print(f"Na plik   : {config.entries_per_file:,} słów")
    print(f"Pliki     : ~{files} (razem ~{format_bytes(size)}, ~{format_bytes(size // files)} na plik)")
    print(LINE + "\n")


def print_summary(summary: RunSummary, config):
    print("\n╔════════════════════════════════════════════════════════════╗")
    print("║                    GENEROWANIE ZAKOŃCZONE                  ║")
    print("╚════════════════════════════════════════════════════════════╝")
    print(f"Wszystkich kombinacji : {summary.total:,}")
    print(f"W tym przebiegu       : {summary.generated:,}")
    print(f"Czas                  : {format_eta(summary.elapsed)}")
    print(f"Średnia prędkość      : {summary.average_speed:.0f} słów/s")
    print(f"Plików                : {summary.files_completed}")
    print(f"Pliki zapisane jako {config.file_pattern.format(0).replace('000000', 'XXXXXX')}")
    print(f"[KONIEC] Postęp zapisywany w gicie co {config.checkpoint_every} plików.\n")


def main() -> int:
    writer = GeneratorFactory.default_wordlist()
    print_banner(writer)
    try:
        summary = writer.run()
    except OutputFileError as e:
        print(f"\n[FATAL] {e}")
        return 1
    except KeyboardInterrupt:
        print("\n[STOP]")
        return 130
    print_summary(summary, writer.config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
