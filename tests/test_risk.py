"""Tests for blood pressure and BMI classification."""

from __future__ import annotations

import pytest

from healthlog.services.risk import (
    assess_risk,
    calculate_bmi,
    classify_blood_pressure,
    classify_bmi,
)

PROFILE = {'height_cm': 170, 'weight_kg': 110, 'systolic': 168, 'diastolic': 83}


@pytest.mark.parametrize('systolic,diastolic,expected', [
    (160, 0, 'stage 2'),
    (120, 100, 'stage 2'),
    (168, 83, 'stage 2'),
    (159, 99, 'stage 1'),
    (139, 90, 'stage 1'),
    (140, 60, 'stage 1'),
    (130, 85, 'elevated'),
    (135, 70, 'elevated'),
    (129, 84, 'normal'),
    (110, 70, 'normal'),
])
def test_blood_pressure_tiers(systolic: int, diastolic: int, expected: str) -> None:
    assert classify_blood_pressure(systolic, diastolic) == expected


def test_bmi_uses_height_in_metres() -> None:
    assert calculate_bmi(110, 170) == pytest.approx(38.06, abs=0.01)


@pytest.mark.parametrize('weight,expected', [
    (107.15, 'severe obesity'),
    (100.0, 'obesity class 2'),
    (86.5, 'obesity class 1'),
    (70.0, 'normal'),
])
def test_bmi_tiers(weight: float, expected: str) -> None:
    assert classify_bmi(calculate_bmi(weight, 170)) == expected


def test_bmi_boundaries_are_inclusive() -> None:
    assert classify_bmi(35) == 'severe obesity'
    assert classify_bmi(30) == 'obesity class 2'
    assert classify_bmi(25) == 'obesity class 1'
    assert classify_bmi(24.99) == 'normal'


def test_assess_risk_falls_back_to_profile() -> None:
    risk = assess_risk(None, None, PROFILE)

    assert risk['blood_pressure'] == {
        'systolic': 168, 'diastolic': 83, 'category': 'stage 2', 'is_fallback': True,
    }
    assert risk['bmi']['weight_kg'] == 110
    assert risk['bmi']['value'] == pytest.approx(38.1)
    assert risk['bmi']['category'] == 'severe obesity'
    assert risk['bmi']['is_fallback'] is True


def test_assess_risk_prefers_logged_values() -> None:
    risk = assess_risk({'systolic': 128, 'diastolic': 84}, 86.5, PROFILE)

    assert risk['blood_pressure']['category'] == 'normal'
    assert risk['blood_pressure']['is_fallback'] is False
    assert risk['bmi']['category'] == 'obesity class 1'
    assert risk['bmi']['is_fallback'] is False
