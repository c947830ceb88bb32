"""
wordladder Model Module
=======================

Core data models and the graph representation of a lexicon.

Key Components:
- lexicon.py: Immutable, case-insensitive word set
- schemas.py: Typed dataclasses for nodes, edges and query results
- graph_builder.py: NetworkX-backed graph and single-edit probing builder
"""

from .schemas import (
    EdgeType,
    QueryStatus,
    WordNode,
    WordEdge,
    LadderPath,
    QueryResult,
    GraphStats,
    BatchResult
)
from .lexicon import Lexicon
from .graph_builder import WordGraph, build_word_graph
