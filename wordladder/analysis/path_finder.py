"""
Ladder Path Finder
==================

Informed best-first search from a start word to a target word.

OPEN is a binary heap keyed by f = g + h, where g is the number of edits
made so far and h is the edit distance to the target. Ties on f go to the
alphabetically smaller word, so repeated queries return identical ladders.

Two policies are supported:
- closed on first visit (default): a word is frozen the moment it is
  discovered and is never re-queued, even if a shorter route to it turns
  up later. This is a simplified best-first search, not textbook A*: a
  word first reached by a detour keeps the detour, so the ladder can be
  longer than the shortest one. Pass reopen_nodes (--reopen) when the
  ladder must be shortest.
- reopen_nodes: a queued word whose g improves is queued again with the
  better route (A* with lazy deletion). Edit distance is a consistent
  heuristic, so this variant always returns a shortest ladder.

All bookkeeping lives in a per-query dict of SearchRecord objects. The
graph is only read, so a failed or aborted query cannot leave it dirty.
"""

import time
from dataclasses import dataclass
from heapq import heappush, heappop
from typing import Iterable, Optional

from ..config import SearchConfig
from ..exceptions import WordNotFoundError, NoPathError, SearchBudgetExceeded
from ..model.graph_builder import WordGraph
from ..model.schemas import WordNode, LadderPath, QueryResult, QueryStatus
from .edit_distance import levenshtein_distance


@dataclass
class SearchRecord:
    """Per-query state of one discovered word."""
    node: WordNode
    g: int
    h: int
    predecessor: Optional[str] = None
    expanded: bool = False

    @property
    def f(self) -> int:
        return self.g + self.h


class LadderPathFinder:
    """Best-first word-ladder search over a WordGraph.

    Usage:
        finder = LadderPathFinder(graph)
        path = finder.find_path("cat", "dog")
        # path.words == ['cat', 'cot', 'cog', 'dog']

        results = finder.find_paths([("cat", "dog"), ("hit", "cog")])
        # One QueryResult per pair; failures do not stop the batch
    """

    def __init__(self, graph: WordGraph, config: Optional[SearchConfig] = None):
        """Initialize the path finder.

        Args:
            graph: WordGraph to search
            config: Search configuration (uses defaults if None)
        """
        self.graph = graph
        self.config = config or SearchConfig()

    def find_path(self, start: str, end: str) -> LadderPath:
        """Find a ladder from start to end.

        Args:
            start: First word (case-insensitive)
            end: Target word (case-insensitive)

        Returns:
            LadderPath from start to end inclusive

        Raises:
            WordNotFoundError: start and/or end is not in the graph
            NoPathError: end is unreachable from start
            SearchBudgetExceeded: the expansion budget or time limit ran out
        """
        start_node, end_node = self._resolve(start, end)
        return self._search(start_node, end_node)

    def find_result(self, start: str, end: str) -> QueryResult:
        """Run one query and report its outcome instead of raising."""
        try:
            path = self.find_path(start, end)
        except WordNotFoundError as e:
            return QueryResult(start, end, QueryStatus.NOT_FOUND,
                               missing=e.missing, message=str(e))
        except NoPathError as e:
            return QueryResult(start, end, QueryStatus.NO_PATH, message=str(e))
        except SearchBudgetExceeded as e:
            return QueryResult(start, end, QueryStatus.BUDGET_EXCEEDED, message=str(e))

        return QueryResult(start, end, QueryStatus.FOUND, path=path, message=str(path))

    def find_paths(self, pairs: Iterable[tuple]) -> list[QueryResult]:
        """Run a batch of (start, end) queries against the same graph."""
        return [self.find_result(start, end) for start, end in pairs]

    def _resolve(self, start: str, end: str) -> tuple[WordNode, WordNode]:
        start_node = self.graph.get_node(start)
        end_node = self.graph.get_node(end)

        missing = []
        if start_node is None:
            missing.append(start.strip())
        if end_node is None:
            missing.append(end.strip())
        if missing:
            raise WordNotFoundError(start, end, tuple(missing))

        return start_node, end_node

    def _search(self, start: WordNode, goal: WordNode) -> LadderPath:
        max_expansions = self.config.max_expansions
        time_limit = self.config.time_limit
        reopen = self.config.reopen_nodes

        records: dict[str, SearchRecord] = {
            start.name: SearchRecord(node=start, g=0,
                                     h=levenshtein_distance(start.name, goal.name))
        }
        frontier = [(records[start.name].f, start.name)]
        expanded = 0
        started_at = time.monotonic()

        while frontier:
            f, name = heappop(frontier)
            current = records[name]
            if current.expanded or f > current.f:
                # Superseded entry left behind by a reopen
                continue

            if name == goal.name:
                return LadderPath(
                    start=start.name,
                    end=goal.name,
                    words=self._reconstruct(records, name),
                    expanded=expanded
                )

            if max_expansions is not None and expanded >= max_expansions:
                raise SearchBudgetExceeded(start.name, goal.name, expanded,
                                           max_expansions=max_expansions)
            if time_limit is not None and time.monotonic() - started_at > time_limit:
                raise SearchBudgetExceeded(start.name, goal.name, expanded,
                                           time_limit=time_limit)

            current.expanded = True
            expanded += 1
            g = current.g + 1

            for neighbor in current.node.neighbors():
                record = records.get(neighbor.name)
                if record is None:
                    record = SearchRecord(
                        node=neighbor,
                        g=g,
                        h=levenshtein_distance(neighbor.name, goal.name),
                        predecessor=name
                    )
                    records[neighbor.name] = record
                    heappush(frontier, (record.f, neighbor.name))
                elif reopen and not record.expanded and g < record.g:
                    record.g = g
                    record.predecessor = name
                    heappush(frontier, (record.f, neighbor.name))

        raise NoPathError(start.name, goal.name, expanded)

    @staticmethod
    def _reconstruct(records: dict, name: str) -> list[str]:
        words = []
        current: Optional[str] = name
        while current is not None:
            words.append(current)
            current = records[current].predecessor
        words.reverse()
        return words


def find_path(graph: WordGraph, start: str, end: str,
              config: Optional[SearchConfig] = None) -> LadderPath:
    """Convenience wrapper around LadderPathFinder.find_path."""
    return LadderPathFinder(graph, config).find_path(start, end)

