"""
Word List Loader
================

Reads plain-text word lists into a Lexicon.

Supported Formats:
- One word per line, ASCII letters, any case
- Blank lines and surrounding whitespace are ignored

Design Decisions:
-----------------
1. Case is normalized once here; everything downstream sees lower case
2. Lines that cannot be graph words (foreign letters, over-long) are
   skipped and counted rather than aborting the load
3. I/O errors propagate to the caller, which reports them once
"""

from pathlib import Path
from typing import Iterable, Optional

from ..config import GraphConfig
from ..model.lexicon import Lexicon, normalize_word, is_valid_word


class WordListLoader:
    """Loader for plain-text word lists.

    Usage:
        loader = WordListLoader(verbose=True)
        lexicon = loader.load_file("/usr/share/dict/words")

        # Or merge several lists
        lexicon = loader.load_files(["common.txt", "extra.txt"])
    """

    def __init__(self, config: Optional[GraphConfig] = None, verbose: bool = False):
        """Initialize the word list loader.

        Args:
            config: Graph configuration providing the alphabet and length ceiling
            verbose: Whether to print progress messages
        """
        self.config = config or GraphConfig()
        self.verbose = verbose
        self.skipped: list[str] = []
        self.lines_read = 0

    def load_file(self, file_path: str) -> Lexicon:
        """Load a single word list.

        Args:
            file_path: Path to the text file

        Returns:
            Lexicon of the valid words in the file

        Raises:
            OSError: The file is missing or unreadable
        """
        self._reset()
        return Lexicon(self._read_file(file_path))

    def load_files(self, file_paths: list[str]) -> Lexicon:
        """Load several word lists into one Lexicon."""
        self._reset()
        words: set[str] = set()
        for file_path in file_paths:
            words.update(self._read_file(file_path))
        return Lexicon(words)

    def load_words(self, words: Iterable[str]) -> Lexicon:
        """Build a Lexicon from in-memory lines, applying the same filtering."""
        self._reset()
        return Lexicon(self._filter(words))

    def _reset(self) -> None:
        self.skipped = []
        self.lines_read = 0

    def _read_file(self, file_path: str) -> set[str]:
        path = Path(file_path)

        if self.verbose:
            print(f"[*] Loading {path.name}...")

        with open(path, 'r', encoding='ascii', errors='replace') as f:
            words = self._filter(f)

        if self.verbose:
            print(f"[+] Loaded {len(words)} words from {path.name}")
            if self.skipped:
                print(f"[!] Skipped {len(self.skipped)} unusable lines")
        return words

    def _filter(self, lines: Iterable[str]) -> set[str]:
        alphabet = self.config.alphabet
        max_length = self.config.max_word_length

        words = set()
        for line in lines:
            self.lines_read += 1
            word = normalize_word(line)
            if not word:
                continue
            if is_valid_word(word, alphabet, max_length):
                words.add(word)
            else:
                self.skipped.append(word)
        return words
