"""A JSON array on disk, shared by the file-backed repositories.

Every repository instance pointing at the same path shares one
process-local lock, so a read-modify-write done under ``lock`` is
atomic with respect to other repositories in this process.  There is
no cross-process locking.

I/O failures, undecodable files and records that do not map back onto
the domain model all surface as InternalError; callers log the detail
and show the user a generic message.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Callable, TypeVar

from agrimarket.domain.exceptions import DomainException, InternalError

T = TypeVar("T")

# What a malformed-but-parseable record can raise while being rebuilt:
# missing keys, wrong types, bad decimals/dates, failed domain invariants.
_RECORD_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError, AttributeError, DomainException)

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self.lock = _lock_for(self._file_path)
        self._ensure_file()

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise InternalError(f"Could not read {self._file_path}") from exc
        if not isinstance(records, list):
            raise InternalError(f"Expected a JSON array in {self._file_path}")
        return records

    def load_as(self, convert: Callable[[dict], T]) -> list[T]:
        """Load every record and rebuild it with *convert*."""
        records = self.load()
        try:
            return [convert(raw) for raw in records]
        except _RECORD_ERRORS as exc:
            raise InternalError(f"Malformed record in {self._file_path}") from exc

    def persist(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise InternalError(f"Could not write {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise InternalError(f"Could not create {self._file_path}") from exc


class HighWaterMark:
    """The highest ID ever issued, kept beside a store file.

    Deleting records never lowers it, so IDs are not reused.  Callers
    hold the owning JsonFile's lock around ``advance``.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()

    def read(self) -> int:
        if not self._file_path.exists():
            return 0
        try:
            return int(json.loads(self._file_path.read_text(encoding="utf-8"))["last_id"])
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise InternalError(f"Could not read {self._file_path}") from exc

    def advance(self, issued: int) -> None:
        if issued <= self.read():
            return
        try:
            self._file_path.write_text(
                json.dumps({"last_id": issued}) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise InternalError(f"Could not write {self._file_path}") from exc
