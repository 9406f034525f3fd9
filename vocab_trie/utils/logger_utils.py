# logger_utils.py -  for logging messages and timing metrics of trie operations

from __future__ import annotations

import os
import time
from datetime import datetime

# Directory where log files are stored by default
LOG_DIR = "logs"

# Path to the default log file, can be overriden with Log.configure()
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "vocab_trie.log")


class Log:
    """
    Lightweight project logger for messages and metrics.
    Lines go to a log file and, when echo is on, to the console.
    """

    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path: str = DEFAULT_LOG_PATH
    echo: bool = False
    use_color: bool = True

    @classmethod
    def configure(cls, path: str | None = None, echo: bool | None = None,
                  use_color: bool | None = None) -> None:
        """Change where log lines go. Arguments left as None keep their value."""
        if path is not None:
            cls.path = path
        if echo is not None:
            cls.echo = echo
        if use_color is not None:
            cls.use_color = use_color

    @classmethod
    def write(cls, msg: str, level: str = "INFO") -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        cls._append(line)

        if not cls.echo:
            return
        if cls.use_color and level in cls.COLORS:
            print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
        else:
            print(line)

    @classmethod
    def _append(cls, line: str) -> None:
        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    # Public logging methods
    @classmethod
    def debug(cls, msg: str) -> None:
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str) -> None:
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str) -> None:
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str) -> None:
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts).
        Example: [12:45:02] Trie.load done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        cls._append(line)
        if cls.echo:
            print(line)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("Trie.load"):
                trie.load("words.txt")
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        # only record blocks that finished
        if exc_type is None:
            Log.metric(f"{self.label} done", self.elapsed, "s")
        return False
