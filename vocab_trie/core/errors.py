# errors.py - exception types raised by the trie

from __future__ import annotations


class TrieError(Exception):
    """Base class for all trie errors (also raised on use after destroy())."""


class InvalidInputError(TrieError, ValueError):
    """
    Raised when a character outside the supported alphabet reaches the trie.
    This is a caller bug: the trie only indexes pre-cleaned lowercase text.
    """

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"invalid character {char!r}{where}: expected [a-z]")


class SourceUnavailableError(TrieError):
    """Raised when a dictionary source cannot be opened for reading."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"cannot open dictionary source {str(path)!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
