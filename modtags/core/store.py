"""
Canonical store access.
ModStore is the only code path that rewrites mods.json: load, transform the mods list,
stamp the update time and replace the file in one step.
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .config import get_data_file
from ..util.logging import logger

ModsTransform = Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]]


class StoreError(Exception):
    """Raised when the store document is missing, unparsable or cannot be written."""
    pass


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-18T09:30:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_date(now: Optional[datetime] = None) -> str:
    """Current UTC date, e.g. 2026-10-18."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).date().isoformat()


def serialize(document: Any) -> str:
    """Stable serialization: insertion key order, two-space indent, trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def read_json(path: Path) -> Any:
    """Read a JSON document, mapping missing or malformed files to StoreError."""
    if not path.exists():
        raise StoreError(f"Data file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except json.JSONDecodeError as e:
        raise StoreError(f"Error parsing data file: {e}") from e


def write_json_atomic(path: Path, document: Any) -> None:
    """Write through a temp file and rename over the target."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + f".tmp-{os.getpid()}")

    try:
        with tmp.open("w", encoding="utf-8") as fh:
            fh.write(serialize(document))
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise StoreError(f"Failed to write {path}: {e}") from e


class ModStore:
    """Repository over the canonical mods.json document.

    Assumes a single writer at a time; concurrent invocations must be
    serialized by the caller.
    """

    def __init__(self, path: Union[Path, str, None] = None, clock: Callable[[], datetime] = None):
        self.path = Path(path) if path is not None else get_data_file()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def load(self) -> Dict[str, Any]:
        """Load the store document."""
        document = read_json(self.path)
        if not isinstance(document, dict) or not isinstance(document.get("mods"), list):
            raise StoreError(f"Store document has no mods list: {self.path}")
        return document

    def mods(self) -> List[Dict[str, Any]]:
        return self.load()["mods"]

    def save(self, transform: ModsTransform) -> Dict[str, Any]:
        """Apply ``transform`` to the mods list and persist the result.

        ``version`` is left untouched; ``updated`` is stamped with the current
        time. Records are not schema-validated here.
        """
        document = self.load()
        document["mods"] = transform(list(document["mods"]))
        document["updated"] = utc_timestamp(self._clock())

        write_json_atomic(self.path, document)
        logger.log_store_write(str(self.path), len(document["mods"]), document["updated"])
        return document

    def append(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Append one record to the end of the store."""
        return self.save(lambda mods: mods + [record])

    def remove_at(self, index: int) -> Dict[str, Any]:
        """Remove the record at ``index``, keeping the order of the rest.

        Returns the removed record.
        """
        removed = []

        def splice(mods):
            removed.append(mods.pop(index))
            return mods

        self.save(splice)
        return removed[0]
