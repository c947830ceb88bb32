"""
wordladder Data Schemas
=======================

Typed dataclasses for graph entities and query results.

Design Decisions:
-----------------
1. WordNode is the graph identity of one lexicon word; identity is its name
2. Adjacency is stored on the node as three lists split by relative length
3. Nodes hold topology only. Per-query search state lives in the search
4. QueryResult is the primary unit of output; BatchResult aggregates them

Schema Hierarchy:
- WordNode: one lexicon word and its one-edit neighbors
- WordEdge: an unordered single-edit adjacency
- LadderPath: a discovered ladder
- QueryResult: outcome of one (start, end) query
- GraphStats: graph-wide counts
- BatchResult: complete run output container
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class EdgeType(Enum):
    """Kinds of single-letter edits connecting two words.

    Edges are unordered; INSERTION is named from the shorter word's side
    (the longer word reaches the shorter one by a deletion).
    """
    SUBSTITUTION = "Substitution"
    INSERTION = "Insertion"

    @classmethod
    def for_lengths(cls, a: int, b: int) -> "EdgeType":
        """Classify an edge by the lengths of its endpoints."""
        if a == b:
            return cls.SUBSTITUTION
        if abs(a - b) == 1:
            return cls.INSERTION
        raise ValueError(f"Words of length {a} and {b} cannot be one edit apart")


class QueryStatus(Enum):
    """Outcome of a single ladder query."""
    FOUND = "Found"
    NOT_FOUND = "NotFound"
    NO_PATH = "NoPath"
    BUDGET_EXCEEDED = "BudgetExceeded"


@dataclass(eq=False)
class WordNode:
    """Graph identity of one lexicon word.

    Attributes:
        name: Normalized (lower-case) word
        length: Number of letters
        same: Neighbors of equal length (one substitution away)
        shorter: Neighbors one letter shorter (one deletion away)
        longer: Neighbors one letter longer (one insertion away)
    """
    name: str
    length: int = 0
    same: list = field(default_factory=list, repr=False)
    shorter: list = field(default_factory=list, repr=False)
    longer: list = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.length:
            self.length = len(self.name)

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        if isinstance(other, WordNode):
            return self.name == other.name
        return False

    def neighbors(self) -> Iterator["WordNode"]:
        """Iterate over every neighbor: shorter, then same, then longer."""
        yield from self.shorter
        yield from self.same
        yield from self.longer

    def neighbor_list_for(self, other: "WordNode") -> list:
        """Return the list that ``other`` belongs in from this node's side."""
        if other.length == self.length:
            return self.same
        if other.length == self.length - 1:
            return self.shorter
        if other.length == self.length + 1:
            return self.longer
        raise ValueError(f"{other.name!r} cannot neighbor {self.name!r}")

    @property
    def degree(self) -> int:
        return len(self.same) + len(self.shorter) + len(self.longer)


@dataclass(frozen=True)
class WordEdge:
    """An unordered single-edit adjacency between two words.

    For INSERTION edges ``source`` is the shorter word. For SUBSTITUTION
    edges ``source`` sorts before ``target``.
    """
    source: str
    target: str
    edge_type: EdgeType

    @classmethod
    def between(cls, a: str, b: str) -> "WordEdge":
        """Build the canonical edge for two words."""
        edge_type = EdgeType.for_lengths(len(a), len(b))
        if (len(a), a) > (len(b), b):
            a, b = b, a
        return cls(source=a, target=b, edge_type=edge_type)


@dataclass
class LadderPath:
    """A discovered word ladder.

    Attributes:
        start: First word
        end: Last word
        words: Ordered words from start to end inclusive
        expanded: Nodes expanded by the search that produced it
    """
    start: str
    end: str
    words: list
    expanded: int = 0

    @property
    def steps(self) -> int:
        """Number of single-letter edits on the ladder."""
        return len(self.words) - 1

    def __str__(self):
        return " ".join(self.words)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "start": self.start,
            "end": self.end,
            "words": list(self.words),
            "steps": self.steps,
            "expanded": self.expanded,
        }


@dataclass
class QueryResult:
    """Outcome of one (start, end) query.

    Attributes:
        start: Start word as given by the caller
        end: End word as given by the caller
        status: QueryStatus of the query
        path: LadderPath when status is FOUND
        missing: Words absent from the lexicon when status is NOT_FOUND
        message: Console line describing the outcome
    """
    start: str
    end: str
    status: QueryStatus
    path: Optional[LadderPath] = None
    missing: tuple = ()
    message: str = ""

    @property
    def found(self) -> bool:
        return self.status == QueryStatus.FOUND

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "start": self.start,
            "end": self.end,
            "status": self.status.value,
            "path": self.path.to_dict() if self.path else None,
            "missing": list(self.missing),
            "message": self.message,
        }


@dataclass
class GraphStats:
    """Statistics about a built word graph."""
    total_words: int = 0
    total_edges: int = 0
    substitution_edges: int = 0
    insertion_edges: int = 0
    words_by_length: dict = field(default_factory=dict)
    connected_components: int = 0
    largest_component: int = 0
    isolated_words: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_words": self.total_words,
            "total_edges": self.total_edges,
            "substitution_edges": self.substitution_edges,
            "insertion_edges": self.insertion_edges,
            "words_by_length": {str(k): v for k, v in sorted(self.words_by_length.items())},
            "connected_components": self.connected_components,
            "largest_component": self.largest_component,
            "isolated_words": self.isolated_words,
        }


@dataclass
class BatchResult:
    """Complete output of one run over a word list and its query pairs.

    Attributes:
        results: QueryResult per pair, in invocation order
        graph_stats: Statistics about the graph the queries ran against
        report_path: Path to the generated JSON report, if any
        metadata: Additional metadata (timestamp, word list, timings)
    """
    results: list = field(default_factory=list)
    graph_stats: Optional[GraphStats] = None
    report_path: Optional[str] = None
    metadata: dict = field(default_factory=dict)

    def count(self, status: QueryStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def total_queries(self) -> int:
        return len(self.results)

    @property
    def found_count(self) -> int:
        return self.count(QueryStatus.FOUND)

    @property
    def not_found_count(self) -> int:
        return self.count(QueryStatus.NOT_FOUND)

    @property
    def no_path_count(self) -> int:
        return self.count(QueryStatus.NO_PATH)

    @property
    def budget_exceeded_count(self) -> int:
        return self.count(QueryStatus.BUDGET_EXCEEDED)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "results": [r.to_dict() for r in self.results],
            "graph_stats": self.graph_stats.to_dict() if self.graph_stats else None,
            "report_path": self.report_path,
            "total_queries": self.total_queries,
            "found": self.found_count,
            "not_found": self.not_found_count,
            "no_path": self.no_path_count,
            "budget_exceeded": self.budget_exceeded_count,
            "metadata": self.metadata,
        }
