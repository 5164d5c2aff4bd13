"""
JSON document store for user records.

All users live in a single JSON document of the form
``{"users": [...]}``.  Every operation reads the whole document and
mutating operations rewrite it wholesale; there is no indexing and no
partial write.  The module provides:

* ``RecordStore``: the interface services depend on (``load``,
  ``save`` and the ``transaction`` context manager);
* ``JsonFileStore``: the file‑backed implementation used in production;
* ``InMemoryStore``: a drop‑in replacement for tests;
* ``get_store`` / ``init_store``: the FastAPI dependency and startup
  hook.

Each store serialises read‑modify‑write cycles with its own lock, so
two requests handled by the same process cannot overwrite each
other's changes.  Separate processes sharing one file are not
coordinated.
"""

import copy
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .config import settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

# Key under which the record sequence is stored in the document.
DOCUMENT_KEY = "users"


class RecordStore(ABC):
    """Interface for loading and saving the full user collection."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @abstractmethod
    def load(self) -> List[Record]:
        """Return all records in insertion order."""

    @abstractmethod
    def save(self, records: List[Record]) -> None:
        """Replace the stored collection with ``records``."""

    @contextmanager
    def transaction(self) -> Iterator[List[Record]]:
        """Yield the loaded collection and save it when the block exits.

        The store lock is held for the whole block.  If the block raises,
        nothing is written.
        """
        with self._lock:
            records = self.load()
            yield records
            self.save(records)


class JsonFileStore(RecordStore):
    """Store backed by a JSON document on local disk."""

    def __init__(self, path: os.PathLike) -> None:
        super().__init__()
        self.path = Path(path)

    def init(self) -> None:
        """Create an empty document if the file does not exist yet."""
        with self._lock:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.save([])
            logger.info("Created empty user document at %s", self.path)

    def load(self) -> List[Record]:
        # A malformed document raises json.JSONDecodeError; callers do not
        # attempt to recover from it.
        with self.path.open("r", encoding="utf-8") as fh:
            document = json.load(fh)
        return document.get(DOCUMENT_KEY) or []

    def save(self, records: List[Record]) -> None:
        # Write to a sibling file first so readers never see a half‑written
        # document.
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump({DOCUMENT_KEY: records}, fh, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise


class InMemoryStore(RecordStore):
    """Store keeping the collection in process memory.

    Records are deep‑copied on the way in and out, mirroring the
    behaviour of the file store where a loaded list is a private copy.
    """

    def __init__(self, records: Optional[List[Record]] = None) -> None:
        super().__init__()
        self._records: List[Record] = copy.deepcopy(records or [])

    def load(self) -> List[Record]:
        return copy.deepcopy(self._records)

    def save(self, records: List[Record]) -> None:
        self._records = copy.deepcopy(records)


def get_users_file_path() -> Path:
    """Compute the path to the user document.

    If ``settings.users_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    users_file = Path(settings.users_file)
    if users_file.is_absolute():
        return users_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / users_file).resolve()


_store: Optional[JsonFileStore] = None


def get_store() -> RecordStore:
    """FastAPI dependency returning the process‑wide record store.

    Tests replace it through ``app.dependency_overrides[get_store]``.
    """
    global _store
    if _store is None:
        _store = JsonFileStore(get_users_file_path())
    return _store


def init_store() -> None:
    """Make sure the user document exists.  Called at application startup."""
    store = get_store()
    if isinstance(store, JsonFileStore):
        store.init()
