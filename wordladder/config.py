"""
wordladder Configuration Module
===============================

Centralized configuration management for the wordladder framework.
Supports environment variables for deployment-specific limits.

Design Decision:
- Configuration is a dataclass tree that can be passed through the pipeline
- Search limits are optional; an unconfigured search runs to completion
- The graph ceiling (max word length) is fixed before any word is loaded
"""

import json
import os
import string
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional


DEFAULT_MAX_WORD_LENGTH = 12
MAX_LENGTH_ENV_VAR = "WORDLADDER_MAX_WORD_LENGTH"


@dataclass
class GraphConfig:
    """Configuration for lexicon loading and graph construction.

    Attributes:
        max_word_length: Longest word admitted into the graph
        alphabet: Letters used when probing single-edit variants
    """
    max_word_length: Optional[int] = None
    alphabet: str = string.ascii_lowercase

    def __post_init__(self):
        """Load the length ceiling from environment if not explicitly provided."""
        if self.max_word_length is None:
            env_value = os.environ.get(MAX_LENGTH_ENV_VAR)
            self.max_word_length = int(env_value) if env_value else DEFAULT_MAX_WORD_LENGTH

        if self.max_word_length < 1:
            raise ValueError(f"max_word_length must be at least 1, got {self.max_word_length}")

        # Dedupe while keeping the given order
        self.alphabet = "".join(dict.fromkeys(self.alphabet.lower()))
        if not self.alphabet:
            raise ValueError("alphabet must contain at least one letter")


@dataclass
class SearchConfig:
    """Configuration for the best-first ladder search.

    Attributes:
        max_expansions: Node-expansion budget per query (None for unbounded)
        time_limit: Wall-clock budget per query in seconds (None for unbounded)
        reopen_nodes: Update open nodes when a cheaper route is found.
            False keeps the closed-on-first-visit policy.
    """
    max_expansions: Optional[int] = None
    time_limit: Optional[float] = None
    reopen_nodes: bool = False

    def __post_init__(self):
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError(f"max_expansions must be positive, got {self.max_expansions}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")


@dataclass
class OutputConfig:
    """Configuration for output and reporting.

    Attributes:
        output_dir: Directory for report files
        json_report: Whether to write a JSON report of the batch
        dump_graph: Whether to print every word with its neighbors
    """
    output_dir: str = "output"
    json_report: bool = False
    dump_graph: bool = False


@dataclass
class LadderConfig:
    """Main configuration container for wordladder.

    Aggregates all sub-configurations into a single object that can be
    passed through the pipeline. Each component extracts the section it needs.

    Usage:
        config = LadderConfig()  # Uses all defaults
        config = LadderConfig(search=SearchConfig(max_expansions=5000))
    """
    graph: GraphConfig = field(default_factory=GraphConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    verbose: bool = False
    debug: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LadderConfig":
        """Create configuration from a dictionary.

        Useful for loading from JSON files or CLI overrides.
        """
        return cls(
            graph=GraphConfig(**config_dict.get("graph", {})),
            search=SearchConfig(**config_dict.get("search", {})),
            output=OutputConfig(**config_dict.get("output", {})),
            verbose=config_dict.get("verbose", False),
            debug=config_dict.get("debug", False)
        )

    @classmethod
    def from_json_file(cls, path: str) -> "LadderConfig":
        """Load configuration from a JSON file."""
        with open(Path(path), 'r', encoding='utf-8') as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for serialization."""
        return asdict(self)
