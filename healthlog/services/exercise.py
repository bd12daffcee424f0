"""
Exercise log helpers.
"""


def summarize_exercise(logs):
    """Totals over the completed entries in ``logs``."""
    done = [log for log in logs if log.get('completed')]
    return {
        'completed_count': len(done),
        'total_duration': sum(log.get('duration_min') or 0 for log in done),
        'total_calories': sum(log.get('calories_burned') or 0 for log in done),
    }


def daily_exercise(store, day):
    logs = store.list('exercise_log', filters={'logged_date': day})
    return logs, summarize_exercise(logs)
