import copy
import json
import logging
import os
import tempfile
import threading

from models import RECORD_KINDS

logger = logging.getLogger(__name__)


class RecordStore:
    """Ordered sequences of records, one document per record kind.

    Read and write failures never reach the caller: a document that is
    missing or cannot be parsed loads as an empty list, and a failed save
    is logged and dropped.
    """

    def __init__(self):
        self._locks = {kind: threading.RLock() for kind in RECORD_KINDS}

    def lock(self, kind):
        return self._locks[kind]

    def load(self, kind):
        raise NotImplementedError

    def save(self, kind, records):
        raise NotImplementedError


class JsonFileStore(RecordStore):
    def __init__(self, data_dir):
        super().__init__()
        self.data_dir = data_dir
        os.makedirs(data_dir, exist_ok=True)

    def path_for(self, kind):
        if kind not in RECORD_KINDS:
            raise KeyError(kind)
        return os.path.join(self.data_dir, f"{kind}.json")

    def load(self, kind):
        path = self.path_for(kind)
        if not os.path.exists(path):
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
            records = json.loads(content or "[]")
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {path}: {e}")
            return []
        if not isinstance(records, list):
            logger.error(f"Error reading {path}: expected a JSON array, got {type(records).__name__}")
            return []
        return records

    def save(self, kind, records):
        path = self.path_for(kind)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{kind}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
            logger.debug(f"Wrote {len(records)} {kind} records to {path}")
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing {path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)


class MemoryStore(RecordStore):
    """In-process store with the same contract, for tests."""

    def __init__(self, initial=None):
        super().__init__()
        self._documents = {kind: [] for kind in RECORD_KINDS}
        for kind, records in (initial or {}).items():
            self.save(kind, records)

    def load(self, kind):
        return copy.deepcopy(self._documents[kind])

    def save(self, kind, records):
        self._documents[kind] = copy.deepcopy(list(records))
