"""
Mission of the day: one template picked per date, completion advances the
mission streak.
"""
import logging
import random

from healthlog.catalog import MISSION_TEMPLATES
from healthlog.utils.audit_logger import audit_log
from .streaks import record_event

logger = logging.getLogger(__name__)


def get_or_assign_mission(store, day, rng=None, templates=None):
    """Return the mission for ``day``, picking and storing one if none exists yet."""
    mission = store.first('daily_mission', {'mission_date': day})
    if mission:
        return mission

    rng = rng or random
    text = rng.choice(templates or MISSION_TEMPLATES)
    mission = store.upsert('daily_mission', {
        'mission_date': day,
        'mission_text': text,
        'completed': False,
    }, key='mission_date')
    logger.info('Assigned mission for %s', day)
    audit_log('CREATE', 'daily_mission', resource_id=str(mission['id']))
    return mission


def set_mission_completed(store, day, completed, rng=None):
    """Mark the mission for ``day`` done or not done.

    Completing it advances the mission streak with ``day`` as the event date.
    Returns ``(mission, streak)``; ``streak`` is None when nothing advanced.
    """
    mission = get_or_assign_mission(store, day, rng=rng)
    mission = store.update('daily_mission', mission['id'], {'completed': bool(completed)})
    audit_log('UPDATE', 'daily_mission', resource_id=str(mission['id']),
              details={'completed': bool(completed)})

    streak = record_event(store, 'mission', day) if completed else None
    return mission, streak
