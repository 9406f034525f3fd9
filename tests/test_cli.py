# test_cli.py - command line front end
import io
import json
import sys

import pytest

from vocab_trie import Trie
from vocab_trie.cli import CLI, main
from vocab_trie.utils.config_manager import Config


@pytest.fixture
def setup(tmp_path, monkeypatch, write_dict):
    monkeypatch.chdir(tmp_path)
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(json.dumps({"log_path": str(tmp_path / "cli.log")}), encoding="utf-8")
    return str(cfg_path), write_dict("the\na\ncat\n", name="d.txt")


def test_check(setup, capsys):
    cfg, words = setup
    assert main(["--config", cfg, "--dict", words, "check", "cat", "zebra"]) == 0
    out = capsys.readouterr().out
    assert "loaded 3 words" in out
    assert "cat" in out and "zebra" in out
    assert "yes" in out and "no" in out


def test_strip_argument(setup, capsys):
    cfg, words = setup
    assert main(["--config", cfg, "--dict", words, "strip", "the dog sat"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "dog sat"


def test_strip_stdin(setup, capsys, monkeypatch):
    cfg, words = setup
    monkeypatch.setattr(sys, "stdin", io.StringIO("a dog\n"))
    assert main(["--config", cfg, "--dict", words, "strip"]) == 0
    assert capsys.readouterr().out.endswith("dog\n")


def test_dictionary_from_config(tmp_path, monkeypatch, capsys, write_dict):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({
        "dictionary": write_dict("dog\n"),
        "log_path": str(tmp_path / "cli.log"),
    }), encoding="utf-8")
    assert main(["--config", str(cfg), "strip", "dog cat"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "cat"


def test_missing_dictionary(setup, capsys, tmp_path):
    cfg, _ = setup
    assert main(["--config", cfg, "--dict", str(tmp_path / "gone.txt"), "check", "cat"]) == 1
    assert "error" in capsys.readouterr().out


def test_invalid_text_exit_status(setup, capsys):
    cfg, words = setup
    assert main(["--config", cfg, "--dict", words, "strip", "The Cat"]) == 1


def test_shell_loop(setup, capsys, monkeypatch):
    cfg, _ = setup
    monkeypatch.setattr(sys, "stdin", io.StringIO("add dog\nhas dog\nstats\nexit\n"))
    assert main(["--config", cfg, "shell"]) == 0
    out = capsys.readouterr().out
    assert "added dog" in out
    assert "words: 1" in out


def test_shell_stops_on_eof(setup, monkeypatch):
    cfg, _ = setup
    monkeypatch.setattr(sys, "stdin", io.StringIO("add dog\n"))
    assert main(["--config", cfg, "shell"]) == 0


def test_handle_commands(setup, capsys):
    cli = CLI(Config(setup[0]), Trie(["the", "them"]))
    assert cli.handle("has the") is True
    assert cli.handle("prefix the") is True
    assert cli.handle("strip the cat") is True
    assert cli.handle("frobnicate") is True
    assert cli.handle("has The") is True  # reported, not raised
    assert cli.handle("exit") is False
    out = capsys.readouterr().out
    assert "cat" in out
    assert "unknown command" in out
    assert "error" in out
