"""Tests for daily nutrition aggregation."""

from __future__ import annotations

from datetime import date

import pytest

from healthlog.services.nutrition import (
    compare_to_targets,
    daily_nutrition,
    sort_by_meal,
    summarize_day,
)

RECIPE = {
    'id': 'r1', 'name': 'Ginger pork',
    'calories': 300, 'salt_g': 2.0, 'carbs_g': 40, 'protein_g': None, 'fiber_g': None,
}


def test_summary_mixes_recipe_override_and_missing_values() -> None:
    entries = [
        # recipe only, 1.5 portions
        {'meal_type': 'lunch', 'recipe_id': 'r1', 'portion': 1.5},
        # values entered directly, no portion given
        {'meal_type': 'snack', 'custom_name': 'Rice cracker', 'calories': 200, 'salt_g': 1.0},
        # recipe with a salt override, 2 portions
        {'meal_type': 'dinner', 'recipe_id': 'r1', 'salt_g': 0.5, 'portion': 2},
        # nothing known at all
        {'meal_type': 'breakfast', 'custom_name': 'Coffee', 'portion': 1},
    ]

    summary = summarize_day(date(2026, 10, 19), entries, {'r1': RECIPE})

    assert summary['date'] == '2026-10-19'
    assert summary['calories'] == pytest.approx(450 + 200 + 600 + 0)
    assert summary['salt_g'] == pytest.approx(3.0 + 1.0 + 1.0)
    assert summary['carbs_g'] == pytest.approx(60 + 0 + 80)
    assert summary['protein_g'] == 0
    assert summary['fiber_g'] == 0


def test_zero_override_is_kept_instead_of_recipe_value() -> None:
    entries = [{'meal_type': 'lunch', 'recipe_id': 'r1', 'salt_g': 0, 'portion': 1}]

    summary = summarize_day('2026-10-19', entries, {'r1': RECIPE})

    assert summary['salt_g'] == 0
    assert summary['calories'] == pytest.approx(300)


def test_missing_recipe_contributes_only_entry_values() -> None:
    entries = [{'meal_type': 'lunch', 'recipe_id': 'gone', 'calories': 100, 'portion': 1}]

    summary = summarize_day('2026-10-19', entries, {})

    assert summary['calories'] == pytest.approx(100)
    assert summary['salt_g'] == 0


def test_empty_day_is_all_zero() -> None:
    summary = summarize_day('2026-10-19', [])

    assert summary == {
        'date': '2026-10-19',
        'calories': 0, 'salt_g': 0, 'carbs_g': 0, 'protein_g': 0, 'fiber_g': 0,
    }


def test_sort_by_meal_is_stable_within_a_meal() -> None:
    entries = [
        {'id': 1, 'meal_type': 'snack'},
        {'id': 2, 'meal_type': 'dinner'},
        {'id': 3, 'meal_type': 'breakfast'},
        {'id': 4, 'meal_type': 'dinner'},
        {'id': 5, 'meal_type': 'lunch'},
        {'id': 6, 'meal_type': 'breakfast'},
    ]

    ordered = [e['id'] for e in sort_by_meal(entries)]

    assert ordered == [3, 6, 5, 2, 4, 1]


def test_compare_to_targets_flags_overage() -> None:
    summary = {'salt_g': 7.5, 'carbs_g': 60, 'calories': 0, 'protein_g': 60, 'fiber_g': 10}

    comparison = compare_to_targets(summary)

    assert comparison['salt_g']['over'] is True
    assert comparison['salt_g']['ratio'] == pytest.approx(1.25)
    assert comparison['carbs_g']['over'] is False
    assert comparison['protein_g']['over'] is False
    assert comparison['protein_g']['ratio'] == pytest.approx(1.0)


def test_daily_nutrition_reads_only_that_day(store) -> None:
    store.insert('recipe', {**RECIPE, 'category': 'main'})
    store.insert('food_log', {'logged_date': '2026-10-19', 'meal_type': 'dinner',
                              'recipe_id': 'r1', 'portion': 1.0})
    store.insert('food_log', {'logged_date': '2026-10-19', 'meal_type': 'breakfast',
                              'custom_name': 'Toast', 'calories': 150, 'salt_g': 0.7,
                              'portion': 1.0})
    store.insert('food_log', {'logged_date': '2026-10-18', 'meal_type': 'lunch',
                              'custom_name': 'Ramen', 'salt_g': 6.0, 'portion': 1.0})

    entries, summary = daily_nutrition(store, date(2026, 10, 19))

    assert [e['meal_type'] for e in entries] == ['breakfast', 'dinner']
    assert entries[1]['recipe_name'] == 'Ginger pork'
    assert entries[0]['recipe_name'] is None
    assert summary['salt_g'] == pytest.approx(2.7)
    assert summary['calories'] == pytest.approx(450)
