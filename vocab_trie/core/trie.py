# trie.py
# Fixed-alphabet trie (lowercase ASCII) for exact-word and prefix lookups.
# Each node has 30 child slots: 1..26 for the letters, 0 for the
# end-of-word sentinel. Nodes are only ever added; the whole tree is
# released in one pass by destroy().

from __future__ import annotations

from typing import Iterable, List, Optional

from .alphabet import SENTINEL, TRIE_SIZE, letter_code, word_codes
from .errors import TrieError
from . import loader, text_filter
from ..utils.logger_utils import Log


class TrieNode:
    """
    A single node in the trie.
    children: fixed list of TRIE_SIZE slots, None or an owned TrieNode
    reachable: True once insertion has passed through this node to a letter child
    """

    __slots__ = ("children", "reachable")

    def __init__(self) -> None:
        self.children: List[Optional[TrieNode]] = [None] * TRIE_SIZE
        self.reachable = False

    def is_word(self) -> bool:
        return self.children[SENTINEL] is not None


class Trie:
    """
    Set-membership and prefix index over lowercase words, used for:
     - exact lookups (exists / `in`)
     - "does a longer word run through here" checks (has_prefix)
     - filtering vocabulary words out of free text (strip)
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._nodes = 0
        self._words = 0
        self._root: Optional[TrieNode] = self._new_node()
        for w in words:
            self.insert(w)

    # node/path construction ---------------------------------------------------
    def _new_node(self) -> TrieNode:
        node = TrieNode()
        self._nodes += 1
        return node

    def _check_alive(self) -> None:
        if self._root is None:
            raise TrieError("trie has been destroyed")

    @property
    def root(self) -> TrieNode:
        self._check_alive()
        return self._root

    def insert(self, word: str) -> None:
        """
        Insert a word of lowercase letters. The empty word plants a
        sentinel on the root. Raises InvalidInputError before linking
        anything if the word holds a non-letter.
        """
        self.insert_codes(word_codes(word))

    def insert_codes(self, codes: Iterable[int]) -> bool:
        """
        Link an already validated path of letter codes and close it with
        a sentinel. Returns True if the word was new.
        """
        node = self.root
        for code in codes:
            nxt = node.children[code]
            if nxt is None:
                nxt = self._new_node()
                node.children[code] = nxt
            node.reachable = True
            node = nxt
        if node.children[SENTINEL] is not None:
            return False
        node.children[SENTINEL] = self._new_node()
        self._words += 1
        return True

    # queries ------------------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        codes = word_codes(s)
        node = self.root
        for code in codes:
            node = node.children[code]
            if node is None:
                return None
        return node

    def exists(self, word: str) -> bool:
        """True iff `word` was inserted (its path ends on a sentinel)."""
        node = self._walk(word)
        return node is not None and node.is_word()

    def has_prefix(self, prefix: str) -> bool:
        """
        True iff at least one stored word continues past `prefix`.
        A stored word that nothing extends is not a prefix.
        """
        node = self._walk(prefix)
        return node is not None and node.reachable

    def __contains__(self, word: str) -> bool:
        return self.exists(word)

    # incremental walking ---------------------------------------------------------
    @staticmethod
    def step(node: Optional[TrieNode], ch: str) -> Optional[TrieNode]:
        """Follow one letter from `node`; None in, None out."""
        if node is None:
            return None
        return node.children[letter_code(ch)]

    @staticmethod
    def is_word(node: Optional[TrieNode]) -> bool:
        return node is not None and node.is_word()

    # bulk operations -------------------------------------------------------------
    def load(self, source) -> int:
        """
        Load newline-separated words from a path or open text stream.
        Returns the number of non-blank lines inserted.
        Raises SourceUnavailableError if the path cannot be opened.
        """
        self._check_alive()
        return loader.load_from_source(self, source)

    def strip(self, text: Optional[str]) -> Optional[str]:
        """Remove every token that is a trie path (plus its trailing separator)."""
        return text_filter.strip(self.root, text)

    def strip_buffer(self, buf: bytearray, dest: Optional[bytearray] = None) -> int:
        """In-place (or into `dest`) variant of strip(); returns output length."""
        return text_filter.strip_buffer(self.root, buf, dest)

    # counters -------------------------------------------------------------------
    @property
    def node_count(self) -> int:
        """Nodes allocated so far, root and sentinels included."""
        self._check_alive()
        return self._nodes

    @property
    def word_count(self) -> int:
        self._check_alive()
        return self._words

    def __len__(self) -> int:
        return self.word_count

    # teardown --------------------------------------------------------------------
    def destroy(self) -> int:
        """
        Release every node, children before parents. Returns the number of
        nodes released. The trie cannot be used afterwards.
        """
        root = self.root
        released = 0
        # iterative post-order: (node, expanded)
        stack = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.children = [None] * TRIE_SIZE
                released += 1
                continue
            stack.append((node, True))
            for child in node.children:
                if child is not None:
                    stack.append((child, False))

        self._root = None
        Log.debug(f"[Trie] destroyed, released {released} of {self._nodes} nodes")
        return released
