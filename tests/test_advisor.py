"""Tests for the advice rules engine."""

from __future__ import annotations

from datetime import datetime

import pytest

from healthlog.clock import FixedClock
from healthlog.services.advisor import (
    Advice,
    AdviceSnapshot,
    build_snapshot,
    generate_advice,
)

EMPTY_NUTRITION = {'date': '2026-10-19', 'calories': 0, 'salt_g': 0, 'carbs_g': 0,
                   'protein_g': 0, 'fiber_g': 0}
NO_EXERCISE = {'completed_count': 0, 'total_duration': 0, 'total_calories': 0}


def make_snapshot(**overrides) -> AdviceSnapshot:
    values = {
        'latest_bp': {'systolic': 120, 'diastolic': 78},
        'nutrition': {**EMPTY_NUTRITION, 'salt_g': 3.0},
        'exercise': {'completed_count': 1, 'total_duration': 5, 'total_calories': 20},
        'condition': {'palpitation': False},
        'visit_count': 1,
        'logging_streak': 0,
        'hour': 10,
    }
    values.update(overrides)
    return AdviceSnapshot(**values)


def codes(snapshot: AdviceSnapshot) -> list[str]:
    return [a.code for a in generate_advice(snapshot)]


def test_empty_evening_scenario() -> None:
    snapshot = AdviceSnapshot(
        latest_bp=None, nutrition=EMPTY_NUTRITION, exercise=NO_EXERCISE,
        condition=None, visit_count=0, logging_streak=0, hour=21,
    )

    advice = generate_advice(snapshot)

    assert [a.code for a in advice] == [
        'bp_missing', 'visit_specialist', 'food_missing', 'exercise_relax', 'condition_missing',
    ]
    assert [a.priority for a in advice] == ['high', 'high', 'medium', 'medium', 'medium']
    assert '168/83' in advice[1].message


def test_output_is_ordered_by_priority() -> None:
    snapshot = make_snapshot(nutrition={**EMPTY_NUTRITION, 'salt_g': 7.0},
                             exercise={'completed_count': 2, 'total_duration': 8,
                                       'total_calories': 25})

    assert codes(snapshot) == ['salt_over', 'bp_good', 'exercise_done']


@pytest.mark.parametrize('reading,expected', [
    ((160, 80), ('bp_stage2', 'high')),
    ((120, 100), ('bp_stage2', 'high')),
    ((139, 90), ('bp_stage1', 'medium')),
    ((135, 80), ('bp_good', 'low')),
    ((118, 76), ('bp_good', 'low')),
])
def test_blood_pressure_rule(reading, expected) -> None:
    systolic, diastolic = reading
    advice = generate_advice(make_snapshot(latest_bp={'systolic': systolic,
                                                      'diastolic': diastolic}))

    bp = [a for a in advice if a.category == 'blood_pressure']
    assert len(bp) == 1
    assert (bp[0].code, bp[0].priority) == expected
    assert f'{systolic}/{diastolic}' in bp[0].message


@pytest.mark.parametrize('salt,expected', [
    (6.1, 'salt_over'),
    (6.0, 'salt_near'),
    (4.9, 'salt_near'),
    (4.8, None),
    (1.0, None),
    (0, 'food_missing'),
])
def test_salt_rule(salt, expected) -> None:
    advice = generate_advice(make_snapshot(nutrition={**EMPTY_NUTRITION, 'salt_g': salt}))

    diet = [a.code for a in advice if a.category == 'diet']
    assert diet == ([expected] if expected else [])


def test_exercise_prompt_before_evening() -> None:
    snapshot = make_snapshot(exercise=NO_EXERCISE, hour=19)

    assert 'exercise_prompt' in codes(snapshot)
    assert 'exercise_relax' not in codes(snapshot)


def test_exercise_summary_when_done() -> None:
    snapshot = make_snapshot(exercise={'completed_count': 3, 'total_duration': 13,
                                       'total_calories': 40})

    done = [a for a in generate_advice(snapshot) if a.code == 'exercise_done']
    assert done[0].title.startswith('3 ')
    assert '13 minutes' in done[0].message
    assert '40 kcal' in done[0].message


def test_palpitation_mentions_carbs() -> None:
    snapshot = make_snapshot(condition={'palpitation': True},
                             nutrition={**EMPTY_NUTRITION, 'salt_g': 3.0, 'carbs_g': 85})

    advice = generate_advice(snapshot)

    assert advice[0].code == 'palpitation'
    assert '85g' in advice[0].message


def test_quiet_condition_gives_no_advice() -> None:
    assert 'palpitation' not in codes(make_snapshot())
    assert 'condition_missing' not in codes(make_snapshot())


@pytest.mark.parametrize('days,shown', [(2, False), (3, True), (10, True)])
def test_logging_streak_rule(days, shown) -> None:
    advice = [a for a in generate_advice(make_snapshot(logging_streak=days))
              if a.code == 'logging_streak']

    assert bool(advice) is shown
    if shown:
        assert str(days) in advice[0].title


def test_custom_rules_keep_their_order_within_a_priority() -> None:
    def first(_):
        return Advice('first', 'x', 'First', '', 'low')

    def second(_):
        return Advice('second', 'x', 'Second', '', 'high')

    def third(_):
        return Advice('third', 'x', 'Third', '', 'low')

    ordered = generate_advice(make_snapshot(), rules=(first, second, third))

    assert [a.code for a in ordered] == ['second', 'first', 'third']


def test_build_snapshot_reads_today(store) -> None:
    clock = FixedClock(datetime(2026, 10, 19, 21, 15))
    store.insert('blood_pressure', {'systolic': 150, 'diastolic': 92,
                                    'measured_at': '2026-10-18T07:00:00'})
    store.insert('blood_pressure', {'systolic': 132, 'diastolic': 84,
                                    'measured_at': '2026-10-19T07:00:00'})
    for day in ('2026-10-17', '2026-10-18', '2026-10-19'):
        store.upsert('condition', {'logged_date': day, 'overall_score': 3,
                                   'palpitation': False}, key='logged_date')
    store.insert('food_log', {'logged_date': '2026-10-19', 'meal_type': 'lunch',
                              'custom_name': 'Soba', 'salt_g': 2.4, 'portion': 1.0})
    store.insert('medical_visit', {'visit_date': '2026-09-01', 'department': 'Cardiology'})

    snapshot = build_snapshot(store, clock)

    assert snapshot.latest_bp['systolic'] == 132
    assert snapshot.nutrition['salt_g'] == pytest.approx(2.4)
    assert snapshot.exercise['completed_count'] == 0
    assert snapshot.condition['logged_date'] == '2026-10-19'
    assert snapshot.visit_count == 1
    assert snapshot.logging_streak == 3
    assert snapshot.hour == 21
    assert codes(snapshot) == ['exercise_relax', 'bp_good', 'logging_streak']
