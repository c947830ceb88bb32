"""
wordladder - Shortest Word Ladders over a Lexicon
=================================================

Finds shortest sequences of single-letter edits (insertion, deletion,
substitution) between two words, where every step is a valid word.

Architecture Overview:
----------------------
- ingestion/: Word list loading and normalization
- model/: Lexicon, graph node/edge types and the adjacency graph
- analysis/: Edit distance and the best-first ladder search
- reporting/: Console lines, text summaries and JSON reports
- runner.py: End-to-end pipeline used by the CLI

Design Decisions:
-----------------
1. NetworkX backs the adjacency graph for connectivity queries and stats
2. All data models use Python dataclasses
3. Search state is per query, so one graph serves any number of queries
"""

__version__ = "1.0.0"

from .config import LadderConfig
