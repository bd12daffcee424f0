"""
Blood pressure and BMI risk labels.
"""
from healthlog.constants import BMI_THRESHOLDS, BP_THRESHOLDS

BP_STAGE2 = 'stage 2'
BP_STAGE1 = 'stage 1'
BP_ELEVATED = 'elevated'
BP_NORMAL = 'normal'

BMI_SEVERE_OBESITY = 'severe obesity'
BMI_OBESITY_2 = 'obesity class 2'
BMI_OBESITY_1 = 'obesity class 1'
BMI_NORMAL = 'normal'


def classify_blood_pressure(systolic, diastolic):
    """First tier whose systolic OR diastolic bound is reached wins."""
    for tier, label in (('stage2', BP_STAGE2), ('stage1', BP_STAGE1), ('elevated', BP_ELEVATED)):
        sys_bound, dia_bound = BP_THRESHOLDS[tier]
        if systolic >= sys_bound or diastolic >= dia_bound:
            return label
    return BP_NORMAL


def calculate_bmi(weight_kg, height_cm):
    height_m = height_cm / 100
    return weight_kg / (height_m ** 2)


def classify_bmi(bmi):
    if bmi >= BMI_THRESHOLDS['severe']:
        return BMI_SEVERE_OBESITY
    if bmi >= BMI_THRESHOLDS['obesity2']:
        return BMI_OBESITY_2
    if bmi >= BMI_THRESHOLDS['obesity1']:
        return BMI_OBESITY_1
    return BMI_NORMAL


def assess_risk(latest_bp, latest_weight_kg, profile):
    """
    Risk labels for the latest reading and weight.

    ``profile`` supplies ``height_cm`` and the fallback ``systolic``,
    ``diastolic`` and ``weight_kg`` used until something has been logged.
    """
    if latest_bp:
        systolic, diastolic = latest_bp['systolic'], latest_bp['diastolic']
    else:
        systolic, diastolic = profile['systolic'], profile['diastolic']
    weight = latest_weight_kg or profile['weight_kg']
    bmi = calculate_bmi(weight, profile['height_cm'])

    return {
        'blood_pressure': {
            'systolic': systolic,
            'diastolic': diastolic,
            'category': classify_blood_pressure(systolic, diastolic),
            'is_fallback': not latest_bp,
        },
        'bmi': {
            'weight_kg': weight,
            'height_cm': profile['height_cm'],
            'value': round(bmi, 1),
            'category': classify_bmi(bmi),
            'is_fallback': not latest_weight_kg,
        },
    }
