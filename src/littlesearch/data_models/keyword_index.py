"""In-memory keyword index: keyword -> occurrences in descending frequency."""

import polars as pl

from littlesearch.data_models.occurrence import Occurrence

_SCHEMA = {
    "keyword": pl.String,
    "doc_id": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}


def insert_last_occurrence(occs: list[Occurrence]) -> list[int]:
    """Move occs[-1] to its place in an otherwise descending list.

    occs[0..n-2] must already be in non-increasing frequency order. The spot is
    found by binary search; an equal frequency counts as "not greater", so the
    new element lands after any existing ties.

    Returns the midpoint indexes probed, in order. Lists shorter than two are
    left alone and yield [].
    """
    if len(occs) < 2:
        return []
    key = occs[-1].frequency
    lo, hi = 0, len(occs) - 2
    midpoints = []
    while hi >= lo:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        if occs[mid].frequency >= key:
            lo = mid + 1
        else:
            hi = mid - 1
    occs.insert(hi + 1, occs.pop())
    return midpoints


class KeywordIndex:
    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._docs: dict[str, None] = {}
        self._sealed = False

    def merge(self, kws: dict[str, Occurrence], doc_id: str) -> None:
        """Fold one document's keyword counts into the index.

        Each document may be merged once. The document is recorded even when
        kws is empty (every token was noise or malformed).
        """
        if self._sealed:
            raise RuntimeError("Cannot merge into a sealed index")
        if doc_id in self._docs:
            raise ValueError(f"Document already merged: {doc_id!r}")
        stray = sorted({occ.doc_id for occ in kws.values()} - {doc_id})
        if stray:
            raise ValueError(f"Keyword map for {doc_id!r} names other docs: {stray}")
        self._docs[doc_id] = None
        for keyword, occ in kws.items():
            occs = self._index.get(keyword)
            if occs is None:
                self._index[keyword] = [occ]
            else:
                occs.append(occ)
                insert_last_occurrence(occs)

    def seal(self) -> None:
        """Mark the build as complete; further merges are refused."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, keyword: str) -> list[Occurrence] | None:
        return self._index.get(keyword)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def __len__(self) -> int:
        return len(self._index)

    def keywords(self) -> list[str]:
        return sorted(self._index)

    def documents(self) -> list[str]:
        """Distinct document ids, in the order they were first merged."""
        return list(self._docs)

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, occ.doc_id, occ.frequency, rank)
            for keyword in self.keywords()
            for rank, occ in enumerate(self._index[keyword])
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")
