# storage.py
from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)

# Plain ASCII digits only; int() alone also takes "1_000" and non-ASCII digits
SCORE_RE = re.compile(r"[0-9]+")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-local store; used by tests and ``--no-save``."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    Flat JSON object on disk, string keys to string values.

    A missing or corrupt file reads as an empty store. Write failures are
    logged and swallowed so a read-only home directory never ends a game.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, ignoring it: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            # Write beside the target, then swap, so a crash never truncates it
            fd, tmp = tempfile.mkstemp(dir=parent or ".", prefix=".scores-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp, self.path)
            except BaseException:
                os.unlink(tmp)
                raise
        except OSError as e:
            logger.warning("Could not save %s: %s", self.path, e)


# ---------- High score ----------
def parse_score(raw: Optional[str]) -> int:
    """Stored text -> non-negative int; absent, malformed or negative -> 0."""
    if raw is None:
        return 0
    text = raw.strip()
    if not SCORE_RE.fullmatch(text):
        logger.warning("Malformed high score %r, using 0", raw)
        return 0
    return int(text)


class HighScore:
    """Best score ever seen, backed by a key in a ``KeyValueStore``."""

    def __init__(self, store: KeyValueStore, key: str):
        self.store = store
        self.key = key

    def read(self) -> int:
        return parse_score(self.store.get(self.key))

    def submit(self, score: int) -> bool:
        """Persist ``score`` only if it strictly beats the stored value."""
        best = self.read()
        if score <= best:
            return False
        self.store.set(self.key, str(score))
        logger.info("New high score %d (was %d)", score, best)
        return True
