"""Turn raw whitespace-delimited tokens into keywords and per-document counts."""

from collections.abc import Iterable

from littlesearch.data_models.occurrence import Occurrence


def noise_word_set(words: Iterable[str]) -> frozenset[str]:
    """Lowercase a sequence of noise words into a membership set."""
    return frozenset(w.lower() for w in words)


def get_keyword(token: str, noise_words: frozenset[str]) -> str | None:
    """Return the keyword for token, or None if it is not one.

    A keyword is the token's leading run of letters, lowercased, once any
    trailing punctuation is stripped. Letters after a non-letter reject the
    token outright, as does a noise word or an empty letter run.

    get_keyword("Word")       -> "word"
    get_keyword("question??") -> "question"
    get_keyword("test-case")  -> None
    get_keyword("...")        -> None
    """
    end = 0
    while end < len(token) and token[end].isalpha():
        end += 1
    if any(c.isalpha() for c in token[end:]):
        return None
    core = token[:end].lower()
    if not core or core in noise_words:
        return None
    return core


def load_keywords(
    tokens: Iterable[str], doc_id: str, noise_words: frozenset[str]
) -> dict[str, Occurrence]:
    """Count each keyword in one document's token stream."""
    loaded: dict[str, Occurrence] = {}
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue
        occ = loaded.get(keyword)
        if occ is not None:
            occ.frequency += 1
        else:
            loaded[keyword] = Occurrence(doc_id=doc_id)
    return loaded
