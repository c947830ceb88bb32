"""
wordladder Ingestion Module
===========================

Loaders that turn word list files into a Lexicon.
"""

from .wordlist_loader import WordListLoader
