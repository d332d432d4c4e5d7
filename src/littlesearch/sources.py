"""Readers for the manifest, noise-word and document files."""

from collections.abc import Iterator
from pathlib import Path

from littlesearch.keywords import noise_word_set


def _require(path: Path, kind: str) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"{kind} not found: {path}")
    return path


def read_manifest(path: Path) -> list[str]:
    """Document names listed one per line, blank lines skipped."""
    text = _require(path, "Manifest").read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_noise_words(path: Path) -> frozenset[str]:
    text = _require(path, "Noise word file").read_text(encoding="utf-8")
    return noise_word_set(text.split())


def resolve_document(doc_id: str, base_dir: Path) -> Path:
    """Relative names resolve against base_dir (the manifest's directory)."""
    path = Path(doc_id)
    return path if path.is_absolute() else base_dir / path


def iter_tokens(path: Path) -> Iterator[str]:
    """Lazily yield whitespace-delimited tokens from a document.

    The file is checked up front so a missing document fails on the call,
    not on first iteration.
    """
    _require(path, "Document")
    return _tokens(path)


def _tokens(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8") as f:
        for line in f:
            yield from line.split()
