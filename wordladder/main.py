#!/usr/bin/env python3
"""
wordladder - Shortest Word Ladder Finder
========================================

Command-line interface for running ladder queries against a word list.

Usage:
    # One query
    wordladder /usr/share/dict/words cat dog

    # Several queries against the same graph
    wordladder words.txt cat dog hit cog

    # Bounded search with a JSON report
    wordladder words.txt cat dog --max-expansions 5000 --json -o ./results

Options:
    --max-length        Longest word admitted into the graph (default: 12)
    --max-expansions    Node-expansion budget per query
    --time-limit        Seconds allowed per query
    --reopen            Re-queue words when a shorter route is found
                        (guarantees a shortest ladder)
    --dump-graph        Print every word with its neighbors
    --json              Write a JSON report to the output directory
    --output, -o        Output directory (default: ./output)
    --summary           Print a text summary after the results
    --config            JSON configuration file
    --verbose, -v       Verbose output
    --debug             Also report word list loading per file

Environment Variables:
    WORDLADDER_MAX_WORD_LENGTH  Default for --max-length
"""

import argparse
import sys

from . import __version__
from .config import LadderConfig
from .exceptions import LadderArgumentError
from .reporting.report_builder import generate_text_report
from .runner import parse_word_pairs, run_queries


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordladder",
        description="wordladder - shortest word ladders over a word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One query
  %(prog)s /usr/share/dict/words cat dog

  # Several queries against the same graph
  %(prog)s words.txt cat dog hit cog

  # Bounded search with a JSON report
  %(prog)s words.txt cat dog --max-expansions 5000 --json -o ./results
        """
    )

    parser.add_argument(
        "word_list",
        help="Path to a word list, one word per line"
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Pairs of words: start1 end1 [start2 end2 ...]"
    )

    graph_group = parser.add_argument_group("Graph Options")
    graph_group.add_argument(
        "--max-length",
        type=int,
        dest="max_length",
        help="Longest word admitted into the graph (default: 12)"
    )
    graph_group.add_argument(
        "--dump-graph",
        action="store_true",
        help="Print every word with its neighbors before the queries"
    )

    search_group = parser.add_argument_group("Search Options")
    search_group.add_argument(
        "--max-expansions",
        type=int,
        help="Node-expansion budget per query (default: unbounded)"
    )
    search_group.add_argument(
        "--time-limit",
        type=float,
        help="Seconds allowed per query (default: unbounded)"
    )
    search_group.add_argument(
        "--reopen",
        action="store_true",
        help="Re-queue words when a shorter route to them is found. "
             "Without it a ladder can be longer than the shortest one"
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory for reports (default: ./output)"
    )
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Write a JSON report of the batch"
    )
    output_group.add_argument(
        "--summary",
        action="store_true",
        help="Print a text summary after the results"
    )

    parser.add_argument(
        "--config",
        help="JSON configuration file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Report word list loading per file (implies --verbose)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"wordladder {__version__}"
    )
    return parser


def build_config(args: argparse.Namespace) -> LadderConfig:
    """Merge a config file (if any) with command-line overrides."""
    if args.config:
        config = LadderConfig.from_json_file(args.config).to_dict()
    else:
        config = {}

    graph = config.setdefault("graph", {})
    search = config.setdefault("search", {})
    output = config.setdefault("output", {})

    if args.max_length is not None:
        graph["max_word_length"] = args.max_length
    if args.max_expansions is not None:
        search["max_expansions"] = args.max_expansions
    if args.time_limit is not None:
        search["time_limit"] = args.time_limit
    if args.reopen:
        search["reopen_nodes"] = True
    if args.output is not None:
        output["output_dir"] = args.output
    if args.json:
        output["json_report"] = True
    if args.dump_graph:
        output["dump_graph"] = True
    if args.verbose:
        config["verbose"] = True
    if args.debug:
        config["verbose"] = True
        config["debug"] = True

    return LadderConfig.from_dict(config)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate pairs before touching the word list
    try:
        parse_word_pairs(args.words)
    except LadderArgumentError as e:
        parser.error(str(e))

    try:
        config = build_config(args)
    except (OSError, ValueError, TypeError) as e:
        parser.error(f"invalid configuration: {e}")

    try:
        batch = run_queries(
            args.word_list,
            args.words,
            config=config,
            progress_callback=print if config.verbose else None,
            output_callback=print
        )
    except OSError as e:
        print(f"[!] Error: failed to open word list at {args.word_list}: {e}")
        return 1

    if args.summary:
        print(generate_text_report(batch))

    if batch.report_path:
        print(f"[+] JSON report: {batch.report_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
