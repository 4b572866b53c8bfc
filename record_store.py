# record_store.py
"""
Record store for tanker loading events.

The whole collection is the unit of persistence: each mutation builds the
new collection, writes it as one JSON value to the key-value table, and only
then swaps it in memory. A failed write leaves memory untouched.
One instance is shared by all sessions, so add, update and delete run under
a lock.
"""

import json
import threading
from dataclasses import asdict, replace
from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import AppConfig
from errors import PersistenceError, Unauthenticated
from logger import log_debug, log_error, log_info, log_warning
from models import IMMUTABLE_FIELDS, Actor, RecordInput, StoredValue, TankerRecord
from timezone_utils import get_local_time, now_iso, today_iso


class KeyValueStorage:
    """Durable string key-value store on top of the stored_values table"""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with self._session_factory() as s:
                row = s.get(StoredValue, key)
                return row.value if row is not None else None
        except SQLAlchemyError as exc:
            log_error(f"Could not read stored value '{key}': {exc}")
            raise PersistenceError(f"Could not read '{key}'") from exc

    def set(self, key: str, value: str) -> None:
        with self._session_factory() as s:
            try:
                s.merge(StoredValue(key=key, value=value))
                s.commit()
            except SQLAlchemyError as exc:
                s.rollback()
                log_error(f"Could not write stored value '{key}': {exc}")
                raise PersistenceError(f"Could not write '{key}'") from exc


class RecordStore:
    """Owns the tanker record collection (newest first)"""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = None,
        clock: Callable[[], datetime] = None,
        id_factory: Callable[[], str] = None,
    ):
        self._storage = storage
        self._key = key or AppConfig.STORE_KEY
        self._clock = clock or get_local_time
        self._id_factory = id_factory or (lambda: str(uuid4()))
        self._records: List[TankerRecord] = []
        # One store serves every Streamlit session; mutations are serialized
        self._lock = threading.Lock()
        self.reload()

    # ---------- loading / saving ----------
    def reload(self) -> None:
        """Replace the in-memory collection with the durable copy"""
        raw = self._storage.get(self._key)
        if raw is None:
            self._records = []
            return
        try:
            self._records = [TankerRecord.from_dict(d) for d in json.loads(raw)]
        except (ValueError, KeyError, TypeError) as exc:
            log_error(f"Stored collection '{self._key}' is unreadable: {exc}")
            raise PersistenceError(f"Stored collection '{self._key}' is corrupt") from exc
        log_debug(f"Loaded {len(self._records)} record(s) from '{self._key}'")

    def _commit(self, records: List[TankerRecord]) -> None:
        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
        self._storage.set(self._key, payload)
        self._records = records

    # ---------- public API ----------
    def list(self) -> List[TankerRecord]:
        """Snapshot of the full collection, newest first"""
        return list(self._records)

    def get(self, record_id: str) -> Optional[TankerRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def add(self, data: RecordInput, actor: Optional[Actor]) -> TankerRecord:
        if actor is None:
            log_warning("Rejected record creation without an authenticated operator")
            raise Unauthenticated("An authenticated operator is required to add records")

        with self._lock:
            now = self._clock()
            record = TankerRecord(
                **asdict(data),
                id=self._id_factory(),
                date=today_iso(now),
                created_by=actor.id,
                created_at=now_iso(now),
            )
            self._commit([record] + self._records)
        log_info(f"Record {record.id} added by {actor.id} (tanker {record.tanker_number})")
        return record

    def update(self, record_id: str, partial: Mapping[str, object]) -> Optional[TankerRecord]:
        """Merge ``partial`` into the record; returns the new record or None if absent"""
        allowed = set(TankerRecord.mutable_fields())
        unknown = [k for k in partial if k not in allowed and k not in IMMUTABLE_FIELDS]
        if unknown:
            raise ValueError(f"Unknown record field(s): {', '.join(sorted(unknown))}")

        changes: Dict[str, object] = {}
        for name, value in partial.items():
            if name in IMMUTABLE_FIELDS:
                log_warning(f"Ignored change to immutable field '{name}' of record {record_id}")
                continue
            changes[name] = value
        # Same rule as TankerRecord.from_dict, so a reload reads back what is held here
        if "exit_time" in changes:
            changes["exit_time"] = changes["exit_time"] or ""

        with self._lock:
            for position, record in enumerate(self._records):
                if record.id == record_id:
                    updated = replace(record, **changes)
                    records = list(self._records)
                    records[position] = updated
                    self._commit(records)
                    log_info(f"Record {record_id} updated: {', '.join(sorted(changes)) or 'no changes'}")
                    return updated

        log_debug(f"Update skipped, record {record_id} not found")
        return None

    def delete(self, record_id: str) -> bool:
        """Remove the record; returns False when it did not exist"""
        with self._lock:
            records = [r for r in self._records if r.id != record_id]
            if len(records) == len(self._records):
                log_debug(f"Delete skipped, record {record_id} not found")
                return False
            self._commit(records)
        log_info(f"Record {record_id} deleted")
        return True
