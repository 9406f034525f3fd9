# config_manager.py - JSON config manager

import json
import os

from .logger_utils import Log

DEFAULT_CONFIG_PATH = "vocab_trie.json"


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH):
        self.path = path
        self.data = {
            "dictionary": None,  # word list loaded at startup
            "log_path": os.path.join("logs", "vocab_trie.log"),
            "log_echo": False,
            "log_color": True,
            "show_timing": False,
        }
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Log.warning(f"[Config] ignoring unreadable config {self.path!r}: {e}")
            return
        if not isinstance(loaded, dict):
            Log.warning(f"[Config] ignoring config {self.path!r}: not a JSON object")
            return
        self.data.update(loaded)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        default = self.data[key]
        if isinstance(default, bool) and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        elif default is not None:
            val = type(default)(val)
        self.data[key] = val
        self.save()

    def apply_logging(self):
        """Point the project logger at the configured destination."""
        Log.configure(
            path=self.data["log_path"],
            echo=bool(self.data["log_echo"]),
            use_color=bool(self.data["log_color"]),
        )
