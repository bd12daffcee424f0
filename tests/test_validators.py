"""Tests for input validators."""

from __future__ import annotations

from healthlog.utils.validators import (
    validate_blood_pressure,
    validate_condition,
    validate_flags,
    validate_food_log,
    validate_medical_visit,
    validate_recipe,
    validate_weight,
)


def test_blood_pressure_requires_both_values() -> None:
    errors = validate_blood_pressure({'systolic': 130})

    assert errors == ['Diastolic is required']


def test_blood_pressure_ranges_and_timing() -> None:
    errors = validate_blood_pressure({'systolic': 400, 'diastolic': 'x', 'timing': 'noon'})

    assert 'Systolic must be between 60 and 300' in errors
    assert 'Diastolic must be an integer' in errors
    assert 'Timing must be morning or evening' in errors


def test_valid_blood_pressure() -> None:
    assert validate_blood_pressure({'systolic': 150, 'diastolic': 95, 'pulse': 72,
                                    'timing': 'morning',
                                    'measured_at': '2026-10-19T07:10:00'}) == []


def test_weight_rejects_bad_date() -> None:
    assert validate_weight({'weight_kg': 108, 'measured_at': '2026-13-01'}) == [
        'Measured date is not a valid date'
    ]
    assert validate_weight({}) == ['Weight is required']


def test_food_log_requires_date_meal_and_food() -> None:
    errors = validate_food_log({})

    assert errors == [
        'Logged date is required',
        'Meal type is required',
        'Either a recipe or a food name is required',
    ]


def test_food_log_rejects_unknown_meal() -> None:
    errors = validate_food_log({'logged_date': '2026-10-19', 'meal_type': 'brunch',
                                'custom_name': 'Pancakes'})

    assert errors == ['Meal type must be one of: breakfast, lunch, dinner, snack']


def test_condition_flags_must_be_booleans() -> None:
    assert validate_condition({'palpitation': 'yes'}) == ['palpitation must be true or false']
    assert validate_condition({'overall_score': 6}) == ['Overall score must be between 1 and 5']


def test_medical_visit_partial_update() -> None:
    assert validate_medical_visit({'diagnosis': 'Hypertension'}) == ['Visit date is required']
    assert validate_medical_visit({'diagnosis': 'Hypertension'}, partial=True) == []


def test_recipe_ingredients_shape() -> None:
    errors = validate_recipe({'name': 'Salad', 'category': 'side',
                              'ingredients': ['lettuce']})

    assert errors == ['Ingredients must be a list of {name, amount} objects']


def test_flags_reject_strings_and_numbers() -> None:
    assert validate_flags({'completed': 'false'}, ('completed',)) == [
        'completed must be true or false'
    ]
    assert validate_flags({'completed': 0}, ('completed',)) == [
        'completed must be true or false'
    ]
    assert validate_flags({'completed': False}, ('completed',)) == []
    assert validate_flags({}, ('completed',)) == []
