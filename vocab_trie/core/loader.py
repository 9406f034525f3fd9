# loader.py
# Streams a newline-delimited word list into a trie.
# Lines may end in \n, \r or both; blank lines are skipped. A line is
# linked into the trie only once it is complete, so a bad character
# never leaves a half-built path behind.

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, List, Union

from .alphabet import LINE_BREAKS, letter_code
from .errors import SourceUnavailableError
from ..utils.logger_utils import Log

if TYPE_CHECKING:
    from .trie import Trie

Source = Union[str, "os.PathLike[str]", IO[str]]

CHUNK_SIZE = 64 * 1024


def _read_words(trie: "Trie", stream: IO[str]) -> int:
    count = 0
    codes: List[int] = []
    offset = 0
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        if not isinstance(chunk, str):
            raise TypeError(
                f"dictionary stream must be opened in text mode, got {type(chunk).__name__} chunks"
            )
        for i, ch in enumerate(chunk):
            if ch in LINE_BREAKS:
                if codes:
                    trie.insert_codes(codes)
                    count += 1
                    codes = []
                continue
            codes.append(letter_code(ch, offset + i))
        offset += len(chunk)

    # last word without a trailing line break
    if codes:
        trie.insert_codes(codes)
        count += 1
    return count


def load_from_source(trie: "Trie", source: Source) -> int:
    """
    Insert every word of `source` into `trie` and return how many lines
    were inserted.
    `source` is a path or an open text stream; streams are not closed.
    """
    if hasattr(source, "read"):
        name = getattr(source, "name", "<stream>")
        with Log.time_block("Trie.load"):
            count = _read_words(trie, source)
        Log.info(f"[Trie] loaded {count} words from {name}")
        return count

    try:
        # surrogateescape turns non-ASCII bytes into characters that fail
        # the letter check instead of failing the decode
        f = open(source, "r", encoding="ascii", errors="surrogateescape", newline="")
    except OSError as e:
        Log.error(f"[Trie] cannot open dictionary {os.fspath(source)!r}: {e}")
        raise SourceUnavailableError(source, e.strerror or str(e)) from e

    with f, Log.time_block("Trie.load"):
        count = _read_words(trie, f)
    Log.info(f"[Trie] loaded {count} words from {os.fspath(source)}")
    return count
