"""
Query Runner
============

High-level interface used by the CLI.

Orchestrates a whole run:
1. Word list loading
2. Graph building
3. One search per (start, end) pair
4. Optional graph dump and JSON report

Design Decisions:
-----------------
1. Single entry point (run_queries) returning a BatchResult
2. Construction errors (bad pairs, unreadable list) stop the run before
   any graph work; query errors are recorded per pair
3. Progress updates go to progress_callback, program output (ladders,
   failures, graph dump) to output_callback
"""

import time
from datetime import datetime
from typing import Callable, Optional, Sequence, Union

from .config import LadderConfig
from .exceptions import LadderArgumentError
from .ingestion.wordlist_loader import WordListLoader
from .model.graph_builder import WordGraph, build_word_graph
from .model.schemas import BatchResult
from .analysis.path_finder import LadderPathFinder
from .reporting.report_builder import ReportBuilder, format_result


def parse_word_pairs(words: Sequence[str]) -> list[tuple[str, str]]:
    """Group trailing arguments into (start, end) pairs.

    Raises:
        LadderArgumentError: The number of words is odd
    """
    if len(words) % 2 != 0:
        raise LadderArgumentError(len(words))
    return [(words[i], words[i + 1]) for i in range(0, len(words), 2)]


def load_graph(
    word_lists: Union[str, Sequence[str]],
    config: Optional[LadderConfig] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> WordGraph:
    """Load one or more word lists and build their graph.

    Raises:
        OSError: A word list is missing or unreadable
    """
    config = config or LadderConfig()
    if isinstance(word_lists, str):
        word_lists = [word_lists]

    def log(message: str):
        if progress_callback:
            progress_callback(message)

    loader = WordListLoader(config=config.graph, verbose=config.debug)
    lexicon = loader.load_files(list(word_lists))

    log(f"[+] Lexicon loaded: {len(lexicon)} words")
    if loader.skipped:
        log(f"[!] Skipped {len(loader.skipped)} lines that are not usable words")

    log("[*] Graph generation started...")
    return build_word_graph(lexicon, config.graph, progress_callback=progress_callback)


def run_queries(
    word_lists: Union[str, Sequence[str]],
    words: Sequence[str] = (),
    config: Optional[LadderConfig] = None,
    progress_callback: Optional[Callable[[str], None]] = None,
    output_callback: Optional[Callable[[str], None]] = None
) -> BatchResult:
    """Main entry point for running a batch of ladder queries.

    Args:
        word_lists: Path (or paths) of the word lists to load
        words: Flat sequence of query words, read as (start, end) pairs
        config: Configuration (uses defaults if None)
        progress_callback: Optional callback for progress updates
        output_callback: Optional callback receiving each output line

    Returns:
        BatchResult with one QueryResult per pair

    Raises:
        LadderArgumentError: ``words`` has odd length; nothing is loaded
        OSError: A word list is missing or unreadable

    Example:
        batch = run_queries("words.txt", ["cat", "dog", "hit", "cog"])
        [r.status for r in batch.results]
    """
    config = config or LadderConfig()
    pairs = parse_word_pairs(words)

    def log(message: str):
        """Log message to callback if provided."""
        if progress_callback:
            progress_callback(message)

    def emit(line: str):
        if output_callback:
            output_callback(line)

    if isinstance(word_lists, str):
        word_lists = [word_lists]

    build_started = time.monotonic()
    graph = load_graph(word_lists, config, progress_callback=log)
    build_seconds = time.monotonic() - build_started

    if config.output.dump_graph:
        for line in graph.dump():
            emit(line)

    finder = LadderPathFinder(graph, config.search)
    results = []
    for start, end in pairs:
        log(f"[*] Searching {start} -> {end}...")
        result = finder.find_result(start, end)
        results.append(result)
        emit(format_result(result))

    batch = BatchResult(
        results=results,
        graph_stats=graph.get_graph_stats(),
        metadata={
            'timestamp': datetime.now().isoformat(),
            'word_lists': [str(p) for p in word_lists],
            'build_seconds': round(build_seconds, 3),
            'config': config.to_dict(),
        }
    )

    if config.output.json_report:
        report_path = ReportBuilder(config.output.output_dir).save_json(batch)
        log(f"[+] Report saved to {report_path}")

    return batch
