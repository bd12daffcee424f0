"""
Relational record store backed by Flask-SQLAlchemy models.
"""
import logging
import uuid
from contextlib import contextmanager
from datetime import date, datetime
from zoneinfo import ZoneInfo
from sqlalchemy.exc import SQLAlchemyError
from healthlog import db
from healthlog.errors import StorageError
from healthlog.models import MODELS
from .base import RecordStore, check_kind, local_timestamp

logger = logging.getLogger(__name__)


class SqlRecordStore(RecordStore):
    name = 'sql'

    def __init__(self, session=None, timezone='Asia/Tokyo'):
        self._session = session
        self.tz = ZoneInfo(timezone)

    @property
    def session(self):
        return self._session or db.session

    def _coerce(self, column, value):
        """Turn wire values (ISO strings) into what the column expects."""
        if value is None or value == '':
            return None
        python_type = column.type.python_type
        if python_type is datetime and isinstance(value, (str, datetime)):
            return local_timestamp(value, self.tz)
        if python_type is date and isinstance(value, str):
            return date.fromisoformat(value[:10])
        if python_type is date and isinstance(value, datetime):
            return value.date()
        return value

    @contextmanager
    def _guard(self):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning('SQL store operation failed: %s', exc)
            raise StorageError(str(exc)) from exc

    @staticmethod
    def _model(kind):
        check_kind(kind)
        return MODELS[kind]

    def _assign(self, model, obj, data, allow_id=False):
        columns = model.__table__.columns
        for field, value in data.items():
            if field not in columns:
                continue
            if field == 'id' and not allow_id:
                continue
            if field == 'created_at':
                continue
            setattr(obj, field, self._coerce(columns[field], value))

    def _find(self, model, record_id):
        pk = model.__table__.columns['id']
        if pk.type.python_type is int:
            try:
                record_id = int(record_id)
            except (TypeError, ValueError):
                return None
        return self.session.get(model, record_id)

    def list(self, kind, filters=None, order_by=None, descending=False, limit=None):
        model = self._model(kind)
        columns = model.__table__.columns
        with self._guard():
            query = model.query
            for field, value in (filters or {}).items():
                query = query.filter(
                    getattr(model, field) == self._coerce(columns[field], value))
            if order_by:
                column = getattr(model, order_by)
                query = query.order_by(column.desc() if descending else column.asc())
            # Ties fall back to insertion order; recipe ids are not sequential
            if 'created_at' in columns:
                query = query.order_by(model.created_at.asc())
            query = query.order_by(model.id.asc())
            if limit is not None:
                query = query.limit(limit)
            return [obj.to_dict() for obj in query.all()]

    def get(self, kind, record_id):
        model = self._model(kind)
        with self._guard():
            obj = self._find(model, record_id)
            return obj.to_dict() if obj else None

    def insert(self, kind, data):
        model = self._model(kind)
        string_pk = model.__table__.columns['id'].type.python_type is str
        with self._guard():
            obj = model()
            self._assign(model, obj, data, allow_id=string_pk)
            if string_pk and not obj.id:
                obj.id = uuid.uuid4().hex[:12]
            self.session.add(obj)
            self.session.commit()
            return obj.to_dict()

    def upsert(self, kind, data, key):
        model = self._model(kind)
        column = model.__table__.columns[key]
        with self._guard():
            wanted = self._coerce(column, data[key])
            obj = model.query.filter(getattr(model, key) == wanted).first()
            if obj is None:
                obj = model()
                self.session.add(obj)
            self._assign(model, obj, data)
            self.session.commit()
            return obj.to_dict()

    def update(self, kind, record_id, changes):
        model = self._model(kind)
        with self._guard():
            obj = self._find(model, record_id)
            if obj is None:
                return None
            self._assign(model, obj, changes)
            self.session.commit()
            return obj.to_dict()

    def delete(self, kind, record_id):
        model = self._model(kind)
        with self._guard():
            obj = self._find(model, record_id)
            if obj is None:
                return False
            self.session.delete(obj)
            self.session.commit()
            return True
