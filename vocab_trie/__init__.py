"""
vocab_trie

Lowercase word trie with dictionary loading and vocabulary stripping.
"""

from .core import (
    Trie,
    TrieNode,
    TrieError,
    InvalidInputError,
    SourceUnavailableError,
)

__all__ = [
    "Trie",
    "TrieNode",
    "TrieError",
    "InvalidInputError",
    "SourceUnavailableError",
]

__version__ = "0.1.0"
