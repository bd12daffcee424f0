"""
Simple trend statistics for blood pressure and weight.
"""


def blood_pressure_stats(readings):
    """Average, min and max over ``readings`` (newest first). None when empty."""
    if not readings:
        return None
    systolic = [r['systolic'] for r in readings]
    diastolic = [r['diastolic'] for r in readings]
    return {
        'count': len(readings),
        'avg_systolic': round(sum(systolic) / len(systolic)),
        'avg_diastolic': round(sum(diastolic) / len(diastolic)),
        'max_systolic': max(systolic),
        'min_systolic': min(systolic),
        'max_diastolic': max(diastolic),
        'min_diastolic': min(diastolic),
    }


def weight_stats(entries):
    """Latest, min, max and change from oldest to latest over ``entries`` (newest first)."""
    if not entries:
        return None
    weights = [e['weight_kg'] for e in entries]
    return {
        'count': len(entries),
        'latest': weights[0],
        'min': min(weights),
        'max': max(weights),
        'change': round(weights[0] - weights[-1], 2),
    }
