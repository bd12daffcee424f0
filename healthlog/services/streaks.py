"""
Consecutive-day streak counters.

A counter only moves when its qualifying action happens. Nothing decays a
streak in the background: after a gap the stored count stays as it was until
the next qualifying event resets it to 1.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from healthlog.constants import STREAK_TYPES
from healthlog.utils.audit_logger import audit_log


def _as_date(value):
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


@dataclass(frozen=True)
class StreakState:
    current_count: int = 0
    best_count: int = 0
    last_date: Optional[date] = None

    @classmethod
    def from_record(cls, record):
        if not record:
            return cls()
        return cls(
            current_count=record.get('current_count') or 0,
            best_count=record.get('best_count') or 0,
            last_date=_as_date(record.get('last_date')),
        )


def advance_streak(state: StreakState, today: date) -> StreakState:
    """Apply one qualifying event dated ``today``."""
    if state.last_date == today - timedelta(days=1):
        count = state.current_count + 1
    elif state.last_date == today:
        count = state.current_count
    else:
        # Gap, first event ever, or a last_date in the future
        count = 1
    return StreakState(
        current_count=count,
        best_count=max(state.best_count, count),
        last_date=today,
    )


def record_event(store, streak_type, today):
    """Advance the persisted counter for ``streak_type`` and return the stored record."""
    if streak_type not in STREAK_TYPES:
        raise ValueError(f'Unknown streak type: {streak_type!r}')
    today = _as_date(today)

    current = StreakState.from_record(store.first('streak', {'streak_type': streak_type}))
    updated = advance_streak(current, today)
    record = store.upsert('streak', {
        'streak_type': streak_type,
        'current_count': updated.current_count,
        'best_count': updated.best_count,
        'last_date': updated.last_date,
    }, key='streak_type')

    if updated.current_count != current.current_count:
        audit_log('UPDATE', 'streak', resource_id=streak_type,
                  details={'from': current.current_count, 'to': updated.current_count})
    return record


def list_streaks(store):
    """All counters, with a zero row for any type that has never fired."""
    stored = {r['streak_type']: r for r in store.list('streak')}
    result = []
    for streak_type in STREAK_TYPES:
        result.append(stored.get(streak_type) or {
            'id': None,
            'streak_type': streak_type,
            'current_count': 0,
            'best_count': 0,
            'last_date': None,
        })
    return result


def consecutive_days(dates, today):
    """
    Number of consecutive calendar days ending at ``today`` found in ``dates``.
    Dates after ``today`` are ignored.
    """
    logged = {_as_date(d) for d in dates if d}
    streak = 0
    day = _as_date(today)
    while day in logged:
        streak += 1
        day -= timedelta(days=1)
    return streak
