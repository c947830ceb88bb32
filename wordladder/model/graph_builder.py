"""
wordladder Graph Builder
========================

NetworkX-backed adjacency graph over a lexicon.

Design Decisions:
-----------------
1. Uses a NetworkX Graph (undirected) for connectivity queries and stats
2. WordNode objects are stored as node attributes and kept in an arena
   bucketed by word length, so lookup never scans unrelated lengths
3. Every edge is mirrored on both endpoints' neighbor lists
4. Edges are discovered by probing the single-edit variants of each word
   against the lexicon, never by comparing word pairs

Probing costs O(L x |alphabet|) set lookups per word of length L, against
O(|lexicon|) comparisons per word for a pairwise scan. Substitutions find
same-length neighbors; insertions find the one-longer neighbors. Deletion
edges are the same edges seen from the longer word, so they need no probes
of their own.
"""

from collections import defaultdict
from typing import Callable, Iterator, Optional

import networkx as nx

from ..config import GraphConfig
from .lexicon import Lexicon, normalize_word, is_valid_word
from .schemas import WordNode, WordEdge, EdgeType, GraphStats


class WordGraph:
    """Abstraction layer over NetworkX for word-ladder adjacency.

    Usage:
        graph = build_word_graph(Lexicon(["cat", "cot", "cog"]))
        node = graph.get_node("COT")
        [n.name for n in node.neighbors()]   # ['cat', 'cog']
        graph.has_path("cat", "cog")          # True

    The graph is structurally immutable once built. Searches read it but
    never write to it, so one instance can serve any number of queries.
    """

    def __init__(self, max_word_length: Optional[int] = None):
        """Initialize empty word graph.

        Args:
            max_word_length: Lookups of longer names short-circuit to None
        """
        self._graph = nx.Graph()
        self.max_word_length = max_word_length

        # length -> {word -> WordNode}
        self._buckets: dict[int, dict[str, WordNode]] = defaultdict(dict)
        self._edges_by_type: dict[EdgeType, set[tuple]] = defaultdict(set)

    @property
    def nx_graph(self) -> nx.Graph:
        """Access underlying NetworkX graph for advanced operations."""
        return self._graph

    def add_node(self, word: str) -> WordNode:
        """Add a word to the graph, returning its node.

        Adding a word that is already present returns the existing node.
        """
        name = normalize_word(word)
        if not name:
            raise ValueError("Cannot add an empty word to the graph")
        if self.max_word_length is not None and len(name) > self.max_word_length:
            raise ValueError(
                f"{name!r} is longer than the maximum word length {self.max_word_length}"
            )

        bucket = self._buckets[len(name)]
        node = bucket.get(name)
        if node is None:
            node = WordNode(name=name)
            bucket[name] = node
            self._graph.add_node(name, node_obj=node, length=node.length)
        return node

    def add_edge(self, a: str, b: str) -> bool:
        """Connect two words that are one edit apart.

        Both endpoints must already be in the graph. Each endpoint records
        the other in the neighbor list matching their relative length.

        Returns:
            True if the edge is new, False if it was already present
        """
        node_a = self.get_node(a)
        node_b = self.get_node(b)
        if node_a is None or node_b is None:
            missing = a if node_a is None else b
            raise KeyError(f"{missing!r} is not in the graph")
        if node_a is node_b:
            raise ValueError(f"Self-loop on {node_a.name!r} is not allowed")
        if self._graph.has_edge(node_a.name, node_b.name):
            return False

        edge = WordEdge.between(node_a.name, node_b.name)
        node_a.neighbor_list_for(node_b).append(node_b)
        node_b.neighbor_list_for(node_a).append(node_a)

        self._graph.add_edge(
            edge.source,
            edge.target,
            edge_obj=edge,
            edge_type=edge.edge_type
        )
        self._edges_by_type[edge.edge_type].add((edge.source, edge.target))
        return True

    def get_node(self, name: str) -> Optional[WordNode]:
        """Get a node by its word (case-insensitive).

        Args:
            name: The word to look up

        Returns:
            WordNode or None if the word is not in the graph
        """
        word = normalize_word(name)
        length = len(word)
        if length == 0 or (self.max_word_length is not None and length > self.max_word_length):
            return None
        bucket = self._buckets.get(length)
        if bucket is None:
            return None
        return bucket.get(word)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self.get_node(name) is not None

    def __iter__(self) -> Iterator[WordNode]:
        for length in self.lengths:
            yield from self.get_nodes_by_length(length)

    def __len__(self) -> int:
        return self.node_count

    def get_nodes_by_length(self, length: int) -> Iterator[WordNode]:
        """Iterate over all nodes of one length, in alphabetical order."""
        bucket = self._buckets.get(length, {})
        for name in sorted(bucket):
            yield bucket[name]

    @property
    def lengths(self) -> list[int]:
        """Word lengths present in the graph, ascending."""
        return sorted(length for length, bucket in self._buckets.items() if bucket)

    def get_edge(self, a: str, b: str) -> Optional[WordEdge]:
        """Get the edge between two words, if any."""
        a, b = normalize_word(a), normalize_word(b)
        if not self._graph.has_edge(a, b):
            return None
        return self._graph.edges[a, b].get('edge_obj')

    def get_edges_by_type(self, edge_type: EdgeType) -> Iterator[WordEdge]:
        """Iterate over all edges of a specific type."""
        for source, target in sorted(self._edges_by_type[edge_type]):
            edge = self.get_edge(source, target)
            if edge:
                yield edge

    def get_neighbors(self, name: str) -> list[str]:
        """Sorted neighbor words of a word (empty if the word is absent)."""
        node = self.get_node(name)
        if node is None:
            return []
        return sorted(n.name for n in node.neighbors())

    def has_path(self, a: str, b: str) -> bool:
        """Check whether two words lie in the same connected component."""
        a, b = normalize_word(a), normalize_word(b)
        if not self._graph.has_node(a) or not self._graph.has_node(b):
            return False
        return nx.has_path(self._graph, a, b)

    def shortest_path_length(self, a: str, b: str) -> Optional[int]:
        """Unweighted shortest distance in edges, or None if unreachable."""
        if not self.has_path(a, b):
            return None
        return nx.shortest_path_length(self._graph, normalize_word(a), normalize_word(b))

    def connected_components(self) -> list[set]:
        """Connected components, largest first."""
        return sorted(nx.connected_components(self._graph), key=len, reverse=True)

    def get_graph_stats(self) -> GraphStats:
        """Calculate statistics about the graph."""
        stats = GraphStats()
        stats.total_words = self.node_count
        stats.total_edges = self.edge_count
        stats.substitution_edges = len(self._edges_by_type[EdgeType.SUBSTITUTION])
        stats.insertion_edges = len(self._edges_by_type[EdgeType.INSERTION])
        stats.words_by_length = {
            length: len(self._buckets[length]) for length in self.lengths
        }

        if stats.total_words:
            components = self.connected_components()
            stats.connected_components = len(components)
            stats.largest_component = len(components[0])
            stats.isolated_words = nx.number_of_isolates(self._graph)

        return stats

    @property
    def node_count(self) -> int:
        """Total number of words in the graph."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Total number of edges in the graph."""
        return self._graph.number_of_edges()

    def dump(self) -> Iterator[str]:
        """Yield a printable listing of every word and its neighbors.

        Words are grouped by length, shortest first.
        """
        for length in self.lengths:
            nodes = list(self.get_nodes_by_length(length))
            yield f"# length {length}: {len(nodes)} words"
            for node in nodes:
                neighbors = " ".join(n.name for n in node.neighbors()) or "-"
                yield f"{node.name}: {neighbors}"

    def to_dict(self) -> dict:
        """Convert graph to dictionary for serialization.

        Returns:
            Dictionary with 'nodes' and 'edges' keys
        """
        nodes = [
            {
                "name": node.name,
                "length": node.length,
                "degree": node.degree,
            }
            for node in self
        ]
        edges = []
        for edge_type in EdgeType:
            for edge in self.get_edges_by_type(edge_type):
                edges.append({
                    "source": edge.source,
                    "target": edge.target,
                    "edge_type": edge.edge_type.value,
                })
        return {"nodes": nodes, "edges": edges}


def _substitutions(word: str, alphabet: str) -> Iterator[str]:
    for i, original in enumerate(word):
        prefix, suffix = word[:i], word[i + 1:]
        for letter in alphabet:
            if letter != original:
                yield prefix + letter + suffix


def _insertions(word: str, alphabet: str) -> Iterator[str]:
    for i in range(len(word) + 1):
        prefix, suffix = word[:i], word[i:]
        for letter in alphabet:
            yield prefix + letter + suffix


def build_word_graph(
    lexicon: Lexicon,
    config: Optional[GraphConfig] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> WordGraph:
    """Build the single-edit adjacency graph over a lexicon.

    Words longer than ``config.max_word_length`` or containing letters
    outside ``config.alphabet`` are left out of the graph. A word with a
    foreign letter could only be linked from its own side, which would
    break the symmetric neighbor invariant.

    Args:
        lexicon: Words to connect
        config: Graph configuration (uses defaults if None)
        progress_callback: Optional callback for progress messages

    Returns:
        WordGraph where every word is linked to exactly the words at edit
        distance 1 from it
    """
    config = config or GraphConfig()
    max_length = config.max_word_length
    alphabet = config.alphabet

    def log(message: str):
        if progress_callback:
            progress_callback(message)

    graph = WordGraph(max_word_length=max_length)

    words = []
    for length in lexicon.lengths:
        if length > max_length:
            break
        words.extend(w for w in lexicon.by_length(length) if is_valid_word(w, alphabet, max_length))
    skipped = len(lexicon) - len(words)
    if skipped:
        log(f"[!] Skipped {skipped} words outside the alphabet or longer than {max_length} letters")

    for word in words:
        graph.add_node(word)

    for word in words:
        for candidate in _substitutions(word, alphabet):
            # Each substitution pair is probed from both sides; link it once
            if candidate > word and lexicon.has_normalized(candidate):
                graph.add_edge(word, candidate)

        if len(word) < max_length:
            for candidate in _insertions(word, alphabet):
                if lexicon.has_normalized(candidate):
                    graph.add_edge(word, candidate)

    log(f"[+] Graph built: {graph.node_count} words, {graph.edge_count} edges")
    return graph
