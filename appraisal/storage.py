# MIT License
"""Local snapshot of the dashboard form.

:class:`LocalStore` is a small string key-value store kept in one JSON
file, the desktop counterpart of a browser's local storage.
:class:`RecordRepository` keeps one :class:`InvestmentRecord` under a fixed
key in such a store.  Reading never fails: a missing, unreadable or
malformed snapshot reads as absent.  Writing failures are logged and
reported through the return value.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from .params import InvestmentRecord
from .state import default_record

logger = logging.getLogger(__name__)


class LocalStore:
    """String key-value pairs persisted as a JSON object in ``path``."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Local store %s is unreadable; treating it as empty", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local store %s does not hold an object; treating it as empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self._path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``; raises ``OSError`` if the file cannot be written."""
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class RecordRepository:
    """Loads and saves the investment record under ``key``."""

    def __init__(self, store: LocalStore, key: str) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Optional[InvestmentRecord]:
        """Return the stored record, or ``None`` when absent or malformed."""
        raw = self._store.get_item(self._key)
        if raw is None:
            return None
        try:
            return InvestmentRecord.model_validate_json(raw)
        except ValidationError:
            logger.warning("Stored record under %r is malformed; ignoring it", self._key, exc_info=True)
            return None

    def load_or_default(self) -> InvestmentRecord:
        record = self.load()
        return record if record is not None else default_record()

    def save(self, record: InvestmentRecord) -> bool:
        """Snapshot ``record``.  Returns ``False`` if the store could not be written."""
        try:
            self._store.set_item(self._key, record.to_json())
        except OSError:
            logger.warning("Could not save record under %r", self._key, exc_info=True)
            return False
        logger.debug("Saved record under %r", self._key)
        return True

    def clear(self) -> bool:
        try:
            self._store.remove_item(self._key)
        except OSError:
            logger.warning("Could not clear record under %r", self._key, exc_info=True)
            return False
        return True
