import pytest

from vocab_trie.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def isolated_log(tmp_path):
    """Send log lines into the test's temp dir instead of ./logs."""
    saved = (Log.path, Log.echo, Log.use_color)
    Log.configure(path=str(tmp_path / "logs" / "test.log"), echo=False, use_color=False)
    yield tmp_path / "logs" / "test.log"
    Log.path, Log.echo, Log.use_color = saved


@pytest.fixture
def write_dict(tmp_path):
    """Write raw dictionary text to a file and return its path."""
    def _write(text, name="words.txt"):
        p = tmp_path / name
        p.write_bytes(text.encode("latin-1"))
        return str(p)
    return _write
