# alphabet.py
# Fixed alphabet for the trie: 26 lowercase ASCII letters plus the
# end-of-word sentinel slot. Every child index goes through letter_code()
# so a stray byte can never land in the wrong slot.

from __future__ import annotations

from .errors import InvalidInputError

TRIE_SIZE = 30  # slots per node; 27..29 stay unused
SENTINEL = 0  # slot marking "a word ends here"
OFFSET = ord("a") - 1  # 'a' -> 1 ... 'z' -> 26

SEPARATORS = frozenset(" \t\n\r")
LINE_BREAKS = frozenset("\n\r")


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and "a" <= ch <= "z"


def letter_code(ch: str, position: int | None = None) -> int:
    """
    Map a lowercase letter to its child slot (1..26).
    Anything else raises InvalidInputError.
    """
    if not is_letter(ch):
        raise InvalidInputError(ch, position)
    return ord(ch) - OFFSET


def word_codes(word: str) -> list[int]:
    """Validate a whole word up front and return its slot indices."""
    return [letter_code(ch, i) for i, ch in enumerate(word)]
