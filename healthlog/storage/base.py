"""
Record store contract shared by the SQL and document backends.

Records cross this boundary as plain dicts. Dates and timestamps are ISO-8601
strings on the way out; either strings or ``date``/``datetime`` objects are
accepted on the way in.
"""
import abc
from datetime import date, datetime

RECORD_KINDS = (
    'blood_pressure',
    'weight',
    'food_log',
    'condition',
    'recipe',
    'medical_visit',
    'exercise_log',
    'daily_mission',
    'streak',
)

# Kinds whose records carry no created_at timestamp
UNTIMESTAMPED_KINDS = ('streak',)

# Fields holding a date and time, stored as local wall-clock time
TIMESTAMP_FIELDS = {
    'blood_pressure': ('measured_at',),
}


def check_kind(kind):
    if kind not in RECORD_KINDS:
        raise ValueError(f'Unknown record kind: {kind!r}')


def local_timestamp(value, tz):
    """
    Naive wall-clock datetime in ``tz`` for an ISO string or datetime.

    Values carrying an offset (including a trailing ``Z``) are converted to
    ``tz`` first; naive values are taken as already local.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if value.tzinfo is not None:
        value = value.astimezone(tz).replace(tzinfo=None)
    return value


def to_wire(value):
    """Convert date/datetime values to ISO strings, leave everything else."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class RecordStore(abc.ABC):
    """Typed collections with list / get / insert / upsert / update / delete."""

    name = 'abstract'

    @abc.abstractmethod
    def list(self, kind, filters=None, order_by=None, descending=False, limit=None):
        """Return records of ``kind`` matching all equality ``filters``.

        Without ``order_by`` records come back in insertion order. Sorting is
        stable, so records with equal sort keys keep insertion order.
        """

    @abc.abstractmethod
    def get(self, kind, record_id):
        """Return one record by id, or None."""

    @abc.abstractmethod
    def insert(self, kind, data):
        """Store a new record and return it with its assigned id."""

    @abc.abstractmethod
    def upsert(self, kind, data, key):
        """Update the record whose ``key`` field equals ``data[key]``, else insert."""

    @abc.abstractmethod
    def update(self, kind, record_id, changes):
        """Apply ``changes`` to one record. Returns the updated record or None."""

    @abc.abstractmethod
    def delete(self, kind, record_id):
        """Delete one record by id. Returns True if something was deleted."""

    def first(self, kind, filters=None):
        records = self.list(kind, filters=filters, limit=1)
        return records[0] if records else None

    def count(self, kind, filters=None):
        return len(self.list(kind, filters=filters))
