from littlesearch.data_models.keyword_index import KeywordIndex

TOP_N = 5


def top5_search(
    kw1: str, kw2: str, index: KeywordIndex, limit: int = TOP_N
) -> list[str] | None:
    """Documents containing kw1 or kw2, most frequent first.

    Each document appears once, at its best-ranked position. Equal
    frequencies favor kw1's occurrences, then each list's own order. Returns
    None only when neither keyword is in the index.
    """
    occs1 = index.get(kw1)
    occs2 = index.get(kw2)
    if occs1 is None and occs2 is None:
        return None

    # sorted() is stable, so kw1 entries stay ahead of kw2 entries on ties
    combined = sorted(
        (occs1 or []) + (occs2 or []), key=lambda o: o.frequency, reverse=True
    )
    top: list[str] = []
    for occ in combined:
        if len(top) >= limit:
            break
        if occ.doc_id not in top:
            top.append(occ.doc_id)
    return top
