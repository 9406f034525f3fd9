"""
vocab_trie.core

The trie engine:
 - fixed lowercase alphabet and child-slot mapping (alphabet)
 - the node tree with insert / exists / has_prefix / destroy (Trie)
 - streaming dictionary loader (load_from_source)
 - vocabulary filter for free text (strip)
"""

from .errors import TrieError, InvalidInputError, SourceUnavailableError
from .trie import Trie, TrieNode
from .loader import load_from_source
from .text_filter import ScanState, TokenFilter

__all__ = [
    "Trie",
    "TrieNode",
    "TrieError",
    "InvalidInputError",
    "SourceUnavailableError",
    "load_from_source",
    "ScanState",
    "TokenFilter",
]
