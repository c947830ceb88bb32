"""
Report Builder Module
=====================

Turns query results into console lines, a text summary and a JSON report.

Design Decisions:
-----------------
1. Reports are structured data (JSON-serializable) built from BatchResult
2. Console lines for each outcome come from the result itself, so batch
   output and single queries print identically
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..model.schemas import BatchResult, QueryResult, QueryStatus


def format_result(result: QueryResult) -> str:
    """One console line for a query outcome.

    FOUND prints the ladder space-separated; every other status prints
    the failure description.
    """
    if result.status == QueryStatus.FOUND and result.path is not None:
        return " ".join(result.path.words)
    return result.message


class ReportBuilder:
    """Writes batch results to disk.

    Usage:
        builder = ReportBuilder(output_dir="output")
        path = builder.save_json(batch)
    """

    def __init__(self, output_dir: str = "output"):
        """Initialize the report builder.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)

    def save_json(self, batch: BatchResult, filename: Optional[str] = None) -> str:
        """Save the batch as a JSON report.

        Args:
            batch: BatchResult to serialize
            filename: Report file name (timestamped if None)

        Returns:
            Path to the written report
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"wordladder_report_{timestamp}.json"

        report_path = self.output_dir / filename
        batch.report_path = str(report_path)
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(batch.to_dict(), f, indent=2)

        return str(report_path)


def generate_text_report(batch: BatchResult) -> str:
    """Generate a plain text summary of a batch.

    Args:
        batch: BatchResult to summarize

    Returns:
        Formatted text report
    """
    lines = [
        "=" * 60,
        "wordladder - Word Ladder Report",
        "=" * 60,
        "",
        f"Generated: {batch.metadata.get('timestamp', 'Unknown')}",
        f"Word lists: {', '.join(batch.metadata.get('word_lists', [])) or 'Unknown'}",
        "",
    ]

    if batch.graph_stats:
        stats = batch.graph_stats
        lines.extend([
            "GRAPH",
            "-" * 40,
            f"Words: {stats.total_words}",
            f"Edges: {stats.total_edges} "
            f"({stats.substitution_edges} substitution, {stats.insertion_edges} insertion)",
            f"Components: {stats.connected_components} (largest {stats.largest_component})",
            f"Isolated words: {stats.isolated_words}",
            "",
        ])

    lines.extend([
        "SUMMARY",
        "-" * 40,
        f"Queries: {batch.total_queries}",
        f"  - Found: {batch.found_count}",
        f"  - Not found: {batch.not_found_count}",
        f"  - No path: {batch.no_path_count}",
        f"  - Budget exceeded: {batch.budget_exceeded_count}",
        "",
        "QUERIES",
        "-" * 40,
    ])

    for i, result in enumerate(batch.results, 1):
        lines.append(f"#{i} {result.start} -> {result.end} [{result.status.value}]")
        if result.path is not None:
            lines.append(f"   Steps: {result.path.steps}, expanded: {result.path.expanded}")
        lines.append(f"   {format_result(result)}")

    lines.extend([
        "",
        "=" * 60,
        "End of Report",
        "=" * 60,
    ])

    return "\n".join(lines)
