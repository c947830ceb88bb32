"""
wordladder Analysis Module
==========================

Distance and search algorithms.

Components:
- edit_distance.py: Levenshtein distance (adjacency test and heuristic)
- path_finder.py: Best-first ladder search
"""

from .edit_distance import levenshtein_distance
from .path_finder import LadderPathFinder
