"""
Document record store: one JSON-serialized array per record kind, held in a
key/value mapping and optionally mirrored to a JSON file on disk.

A write builds the new mapping, saves it, and only then replaces the in-memory
copy, so a failed save leaves the store as it was.
"""
import json
import logging
import os
import tempfile
import threading
import uuid
from datetime import datetime
from zoneinfo import ZoneInfo
from healthlog.errors import StorageError
from .base import (RecordStore, TIMESTAMP_FIELDS, UNTIMESTAMPED_KINDS, check_kind,
                   local_timestamp, to_wire)

logger = logging.getLogger(__name__)

KEY_PREFIX = 'health_'


def _generate_id():
    return uuid.uuid4().hex[:16]


def _sort_key(field):
    def key(record):
        value = record.get(field)
        return (value is None, value if value is not None else '')
    return key


class DocumentStore(RecordStore):
    name = 'document'

    def __init__(self, path=None, timezone='Asia/Tokyo'):
        self.path = path
        self.tz = ZoneInfo(timezone)
        self._items = {}
        self._lock = threading.Lock()
        if path and os.path.exists(path):
            try:
                with open(path, encoding='utf-8') as fh:
                    self._items = json.load(fh)
            except (OSError, ValueError) as exc:
                raise StorageError(f'Cannot load document store {path}: {exc}') from exc

    def _read(self, kind):
        check_kind(kind)
        raw = self._items.get(KEY_PREFIX + kind)
        return json.loads(raw) if raw else []

    def _save(self, items):
        directory = os.path.dirname(self.path) or '.'
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(items, fh, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _write(self, kind, records):
        items = dict(self._items)
        items[KEY_PREFIX + kind] = json.dumps(records, ensure_ascii=False)
        if self.path:
            try:
                self._save(items)
            except OSError as exc:
                logger.warning('Document store save failed: %s', exc)
                raise StorageError(str(exc)) from exc
        self._items = items

    def _normalise(self, kind, data):
        record = {}
        for field, value in data.items():
            if field in TIMESTAMP_FIELDS.get(kind, ()) and value:
                value = local_timestamp(value, self.tz)
            record[field] = to_wire(value)
        return record

    @staticmethod
    def _matches(record, filters):
        return all(record.get(field) == to_wire(value) for field, value in filters.items())

    def _new_record(self, kind, data):
        record = self._normalise(kind, data)
        record['id'] = record.get('id') or _generate_id()
        if kind not in UNTIMESTAMPED_KINDS:
            record['created_at'] = datetime.utcnow().isoformat()
        return record

    def list(self, kind, filters=None, order_by=None, descending=False, limit=None):
        records = self._read(kind)
        if filters:
            records = [r for r in records if self._matches(r, filters)]
        if order_by:
            records = sorted(records, key=_sort_key(order_by), reverse=descending)
        if limit is not None:
            records = records[:limit]
        return records

    def get(self, kind, record_id):
        for record in self._read(kind):
            if str(record.get('id')) == str(record_id):
                return record
        return None

    def insert(self, kind, data):
        with self._lock:
            records = self._read(kind)
            record = self._new_record(kind, data)
            records.append(record)
            self._write(kind, records)
            return record

    def upsert(self, kind, data, key):
        with self._lock:
            records = self._read(kind)
            wanted = to_wire(data[key])
            for index, record in enumerate(records):
                if record.get(key) == wanted:
                    changes = {f: v for f, v in self._normalise(kind, data).items() if f != 'id'}
                    records[index] = {**record, **changes}
                    self._write(kind, records)
                    return records[index]
            record = self._new_record(kind, data)
            records.append(record)
            self._write(kind, records)
            return record

    def update(self, kind, record_id, changes):
        with self._lock:
            records = self._read(kind)
            for index, record in enumerate(records):
                if str(record.get('id')) == str(record_id):
                    changes = {f: v for f, v in self._normalise(kind, changes).items()
                               if f != 'id'}
                    records[index] = {**record, **changes}
                    self._write(kind, records)
                    return records[index]
            return None

    def delete(self, kind, record_id):
        with self._lock:
            records = self._read(kind)
            remaining = [r for r in records if str(r.get('id')) != str(record_id)]
            if len(remaining) == len(records):
                return False
            self._write(kind, remaining)
            return True
