"""Build a keyword index from a document manifest and answer OR queries.

Usage:
    python -m littlesearch.make_index \\
        --docs docs.txt --noise-words noisewords.txt \\
        [--query KW1 KW2]... [--keyword KW]... [--check WORD]... [--show-index]
"""

import argparse
from collections.abc import Callable, Iterable
from pathlib import Path
import sys

import polars as pl

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.keywords import get_keyword, load_keywords
from littlesearch.search import top5_search
from littlesearch.sources import (
    iter_tokens,
    read_manifest,
    read_noise_words,
    resolve_document,
)


def index_documents(
    doc_ids: Iterable[str],
    token_source: Callable[[str], Iterable[str]],
    noise_words: frozenset[str],
    index: KeywordIndex | None = None,
) -> KeywordIndex:
    """Load and merge each document once, in manifest order.

    Documents already in a passed-in index are skipped too. The returned
    index is not sealed; the caller decides when the build is complete.
    """
    if index is None:
        index = KeywordIndex()
    seen = set(index.documents())
    for doc_id in doc_ids:
        if doc_id in seen:
            print(f"[index] skipping already indexed document {doc_id!r}")
            continue
        seen.add(doc_id)
        index.merge(load_keywords(token_source(doc_id), doc_id, noise_words), doc_id)
    return index


def make_index(docs_file: Path, noise_words_file: Path) -> KeywordIndex:
    """Index every document listed in docs_file and seal the result."""
    noise_words = read_noise_words(noise_words_file)
    doc_ids = read_manifest(docs_file)
    base_dir = docs_file.parent
    index = index_documents(
        doc_ids,
        lambda doc_id: iter_tokens(resolve_document(doc_id, base_dir)),
        noise_words,
    )
    index.seal()
    return index


def main() -> None:
    parser = argparse.ArgumentParser(description="Index documents and search them")
    parser.add_argument(
        "--docs", required=True, help="File listing document paths, one per line"
    )
    parser.add_argument(
        "--noise-words", required=True, help="File of whitespace-separated noise words"
    )
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        default=[],
        metavar=("KW1", "KW2"),
        help="Top-5 search for KW1 or KW2 (repeatable)",
    )
    parser.add_argument(
        "--keyword",
        action="append",
        default=[],
        help="Print a keyword's occurrence list (repeatable)",
    )
    parser.add_argument(
        "--check",
        action="append",
        default=[],
        help="Show how a raw word is normalized (repeatable)",
    )
    parser.add_argument(
        "--show-index", action="store_true", help="Print the whole index as a table"
    )
    args = parser.parse_args()

    try:
        index = make_index(Path(args.docs), Path(args.noise_words))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Indexed {len(index.documents())} documents, {len(index)} keywords")

    if args.check:
        noise_words = read_noise_words(Path(args.noise_words))
        for word in args.check:
            print(f"  {word!r} -> {get_keyword(word, noise_words)!r}")

    for keyword in args.keyword:
        occs = index.get(keyword.lower())
        if occs is None:
            print(f"{keyword}: not indexed")
        else:
            print(f"{keyword}: " + " ".join(str(o) for o in occs))

    for kw1, kw2 in args.query:
        result = top5_search(kw1.lower(), kw2.lower(), index)
        print(f"{kw1} OR {kw2}:")
        if not result:
            print("  no matches")
        for doc_id in result or []:
            print(f"  {doc_id}")

    if args.show_index:
        with pl.Config(tbl_rows=-1):
            print(index.to_polars())


if __name__ == "__main__":
    main()
