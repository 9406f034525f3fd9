# text_filter.py
"""
Removes vocabulary tokens from free text in one left-to-right pass.

A token is a maximal run of non-separator characters (separators are
space, tab, newline and carriage return). A token is dropped, together
with the separator right after it, when every one of its letters has a
matching child walking down from the root. The token does not have to
end on a stored word: with "the" loaded, "th" is dropped too.

The pass copies every character to the output and rewinds the write
cursor to the last kept boundary when a matching token ends, so output
can share the input buffer.

Behaviour worth knowing about:
 - an empty token matches, so leading separators and the second of two
   consecutive separators after a kept token disappear
 - a last token without a separator after it is always kept, even when it
   matches (the pass only judges a token when it sees its separator)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

from .alphabet import SEPARATORS, letter_code

if TYPE_CHECKING:
    from .trie import TrieNode


class ScanState(Enum):
    AT_BOUNDARY = "at_boundary"
    SCANNING_MATCHING = "scanning_matching"
    SCANNING_FAILED = "scanning_failed"


def validate_text(text: str) -> None:
    """Raise InvalidInputError for anything but [a-z] and separators."""
    for i, ch in enumerate(text):
        if ch not in SEPARATORS:
            letter_code(ch, i)


class TokenFilter:
    """Single-pass state machine behind Trie.strip()."""

    def __init__(self, root: "TrieNode"):
        self.root = root
        self.node = root
        self.state = ScanState.AT_BOUNDARY
        self.cursor = 0  # next write position
        self.last_boundary = 0  # write position just after the last kept separator

    def run(self, chars: str, items: Sequence, out: MutableSequence) -> int:
        """
        Feed `chars` through the machine, writing the matching element of
        `items` to `out` for each one. Returns the output length.
        """
        for ch, item in zip(chars, items):
            out[self.cursor] = item
            self.cursor += 1
            if ch in SEPARATORS:
                self._boundary()
            elif self.state is not ScanState.SCANNING_FAILED:
                self._advance(ch)
        return self.cursor

    def _boundary(self) -> None:
        if self.state is ScanState.SCANNING_FAILED:
            self.last_boundary = self.cursor
        else:
            # token (possibly empty) is a trie path: drop it and this separator
            self.cursor = self.last_boundary
        self.state = ScanState.AT_BOUNDARY
        self.node = self.root

    def _advance(self, ch: str) -> None:
        nxt = self.node.children[letter_code(ch)]
        if nxt is None:
            self.state = ScanState.SCANNING_FAILED
        else:
            self.node = nxt
            self.state = ScanState.SCANNING_MATCHING


def strip(root: "TrieNode", text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    validate_text(text)
    out = [""] * len(text)
    n = TokenFilter(root).run(text, text, out)
    return "".join(out[:n])


def strip_buffer(root: "TrieNode", buf: bytearray,
                 dest: Optional[bytearray] = None) -> int:
    """
    Byte-buffer variant. Without `dest` the result overwrites `buf`, which
    is truncated to the output length. With `dest` (at least len(buf)
    long) `buf` is left alone and only the first n bytes of `dest` are
    meaningful. Returns n.
    """
    chars = bytes(buf).decode("latin-1")
    validate_text(chars)
    if dest is None:
        n = TokenFilter(root).run(chars, bytes(buf), buf)
        del buf[n:]
        return n
    if len(dest) < len(buf):
        raise ValueError(f"destination holds {len(dest)} bytes, need {len(buf)}")
    return TokenFilter(root).run(chars, bytes(buf), dest)
