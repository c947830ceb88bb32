"""
wordladder Exceptions
=====================

Error taxonomy shared by the loader, the search and the CLI.

Construction-time problems (bad invocation, unreadable word list) end the
run. Query-time problems (unknown word, no ladder, exhausted budget) are
reported per query and leave the graph usable for the next one.

Word-list I/O failures are not wrapped: they surface as the built-in
OSError subclasses raised by open().
"""

from typing import Optional


class WordLadderError(Exception):
    """Base class for all wordladder errors."""


class LadderArgumentError(WordLadderError, ValueError):
    """The trailing words of an invocation do not form complete pairs."""

    def __init__(self, word_count: int):
        self.word_count = word_count
        super().__init__(
            f"Incorrect number of arguments ({word_count} words). Arguments must "
            f"contain a path to a word list followed by pairs of words"
        )


class WordNotFoundError(WordLadderError, KeyError):
    """One or both query words are absent from the lexicon."""

    def __init__(self, start: str, end: str, missing: tuple):
        self.start = start
        self.end = end
        self.missing = tuple(missing)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{' and '.join(self.missing)} not found in dictionary."

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.message


class NoPathError(WordLadderError):
    """The search exhausted every reachable word without meeting the target."""

    def __init__(self, start: str, end: str, expanded: int = 0):
        self.start = start
        self.end = end
        self.expanded = expanded
        super().__init__(f"NO POSSIBLE PATH: {start} to {end}")


class SearchBudgetExceeded(WordLadderError):
    """The per-query expansion budget or deadline ran out."""

    def __init__(self, start: str, end: str, expanded: int,
                 max_expansions: Optional[int] = None,
                 time_limit: Optional[float] = None):
        self.start = start
        self.end = end
        self.expanded = expanded
        self.max_expansions = max_expansions
        self.time_limit = time_limit

        if max_expansions is not None and expanded >= max_expansions:
            limit = f"expansion budget of {max_expansions}"
        else:
            limit = f"time limit of {time_limit}s"
        super().__init__(
            f"SEARCH ABORTED: {start} to {end} exceeded the {limit} "
            f"after {expanded} expansions"
        )
