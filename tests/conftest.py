import random
import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordladder.config import GraphConfig
from wordladder.model.lexicon import Lexicon
from wordladder.model.graph_builder import build_word_graph


LADDER_WORDS = ["cat", "cot", "cog", "dog", "dot"]
HOT_WORDS = ["hot", "dot", "dog", "lot", "log", "cog"]

SMALL_ALPHABET = "abcd"


def random_words(seed: int, count: int = 80, max_length: int = 4, alphabet: str = SMALL_ALPHABET):
    """Seeded random words over a small alphabet, dense enough to form ladders."""
    rng = random.Random(seed)
    words = set()
    while len(words) < count:
        length = rng.randint(1, max_length)
        words.add("".join(rng.choice(alphabet) for _ in range(length)))
    return sorted(words)


@pytest.fixture
def ladder_lexicon():
    return Lexicon(LADDER_WORDS)


@pytest.fixture
def ladder_graph(ladder_lexicon):
    return build_word_graph(ladder_lexicon)


@pytest.fixture
def hot_graph():
    return build_word_graph(Lexicon(HOT_WORDS))


@pytest.fixture
def small_config():
    return GraphConfig(max_word_length=6, alphabet=SMALL_ALPHABET)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(LADDER_WORDS) + "\n")
    return path
