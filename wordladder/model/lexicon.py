"""
Lexicon
=======

Immutable set of admissible words.

Words are normalized once, at construction, to stripped lower case.
Every later comparison (graph lookup, goal test) relies on that form.
"""

from typing import Iterable, Iterator


def normalize_word(word: str) -> str:
    """Return the canonical form used for storage and lookup."""
    return word.strip().lower()


def is_valid_word(word: str, alphabet: str, max_length: int) -> bool:
    """Check a normalized word against the alphabet and the length ceiling."""
    return 0 < len(word) <= max_length and all(c in alphabet for c in word)


class Lexicon:
    """Immutable, case-insensitive set of words.

    Usage:
        lexicon = Lexicon(["Cat", "cot", "cog"])
        "COT" in lexicon        # True
        lexicon.by_length(3)    # ['cat', 'cog', 'cot']
    """

    __slots__ = ("_words", "_by_length")

    def __init__(self, words: Iterable[str] = ()):
        normalized = (normalize_word(w) for w in words)
        self._words = frozenset(w for w in normalized if w)

        buckets: dict[int, set[str]] = {}
        for word in self._words:
            buckets.setdefault(len(word), set()).add(word)
        self._by_length = {length: frozenset(b) for length, b in buckets.items()}

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other):
        if isinstance(other, Lexicon):
            return self._words == other._words
        return NotImplemented

    def __hash__(self):
        return hash(self._words)

    def __repr__(self):
        return f"Lexicon({len(self._words)} words)"

    @property
    def lengths(self) -> list[int]:
        """Word lengths present, shortest first."""
        return sorted(self._by_length)

    def by_length(self, length: int) -> list[str]:
        """All words of exactly ``length`` letters, sorted."""
        return sorted(self._by_length.get(length, ()))

    def has_normalized(self, word: str) -> bool:
        """Membership test for a word that is already normalized."""
        return word in self._words
