# test_loader.py - bulk dictionary loading
import io

import pytest

from vocab_trie import Trie, InvalidInputError, SourceUnavailableError
from vocab_trie.core import loader


def test_load_cat_car_dog(write_dict):
    t = Trie()
    assert t.load(write_dict("cat\ncar\ndog\n")) == 3
    assert t.exists("cat") and t.exists("car") and t.exists("dog")
    assert t.exists("ca") is False
    assert t.has_prefix("ca") is True


@pytest.mark.parametrize("text", [
    "cat\r\ncar\r\ndog\r\n",
    "cat\rcar\rdog",
    "\n\ncat\n\n\r\ncar\n\ndog",
])
def test_line_break_styles(write_dict, text):
    t = Trie()
    assert t.load(write_dict(text)) == 3
    assert [w for w in ("cat", "car", "dog") if w in t] == ["cat", "car", "dog"]
    assert t.exists("") is False


def test_final_word_without_newline(write_dict):
    t = Trie()
    assert t.load(write_dict("alpha\nomega")) == 2
    assert t.exists("omega")


def test_empty_file(write_dict):
    t = Trie()
    assert t.load(write_dict("")) == 0
    assert t.word_count == 0


def test_repeated_lines_are_counted(write_dict):
    t = Trie()
    assert t.load(write_dict("dog\ndog\n")) == 2
    assert t.word_count == 1


def test_missing_file_leaves_trie_alone(tmp_path):
    t = Trie(["cat"])
    before = (t.node_count, t.word_count)
    missing = tmp_path / "nope.txt"
    with pytest.raises(SourceUnavailableError) as exc:
        t.load(str(missing))
    assert exc.value.path == str(missing)
    assert (t.node_count, t.word_count) == before
    assert t.exists("cat")


def test_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailableError):
        Trie().load(tmp_path)


def test_missing_file_is_logged(tmp_path, isolated_log):
    with pytest.raises(SourceUnavailableError):
        Trie().load(str(tmp_path / "nope.txt"))
    assert "ERROR" in isolated_log.read_text(encoding="utf-8")


def test_load_is_logged(write_dict, isolated_log):
    Trie().load(write_dict("cat\n"))
    log = isolated_log.read_text(encoding="utf-8")
    assert "loaded 1 words" in log
    assert "Trie.load done" in log


def test_bad_line_is_not_linked(write_dict):
    t = Trie()
    with pytest.raises(InvalidInputError) as exc:
        t.load(write_dict("cat\ndoG\nbee\n"))
    assert exc.value.char == "G"
    assert exc.value.position == 6
    # earlier lines stay, the bad one left no path
    assert t.exists("cat")
    assert t.has_prefix("d") is False
    assert t.exists("bee") is False


def test_non_ascii_byte_rejected(write_dict):
    with pytest.raises(InvalidInputError):
        Trie().load(write_dict("caf\xe9\n"))


def test_load_from_stream():
    t = Trie()
    assert t.load(io.StringIO("one\ntwo\nthree")) == 3
    assert t.exists("three")


def test_words_across_chunk_boundary(monkeypatch):
    monkeypatch.setattr(loader, "CHUNK_SIZE", 4)
    t = Trie()
    assert loader.load_from_source(t, io.StringIO("abcdefgh\nij\r\nklmnop")) == 3
    assert t.exists("abcdefgh") and t.exists("ij") and t.exists("klmnop")


def test_empty_binary_stream_loads_nothing():
    t = Trie()
    assert t.load(io.BytesIO(b"")) == 0
    assert t.word_count == 0


def test_binary_stream_is_rejected():
    t = Trie()
    with pytest.raises(TypeError):
        t.load(io.BytesIO(b"cat\ndog\n"))
    assert t.word_count == 0
