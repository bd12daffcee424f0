"""
Input validation for logged records. Each validator returns a list of error
strings (empty = valid).
"""
import re
from datetime import datetime
from healthlog.constants import BP_TIMINGS, MEAL_TYPES, NUTRIENT_FIELDS

DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def _check_date(value, label, errors):
    if not DATE_RE.match(str(value)):
        errors.append(f'{label} must be in YYYY-MM-DD format')
        return
    try:
        datetime.strptime(str(value), '%Y-%m-%d')
    except ValueError:
        errors.append(f'{label} is not a valid date')


def _check_int(data, field, label, low, high, errors, required=False):
    value = data.get(field)
    if value is None or value == '':
        if required:
            errors.append(f'{label} is required')
        return
    if isinstance(value, bool):
        errors.append(f'{label} must be an integer')
        return
    try:
        v = int(value)
    except (ValueError, TypeError):
        errors.append(f'{label} must be an integer')
        return
    if v < low or v > high:
        errors.append(f'{label} must be between {low} and {high}')


def _check_number(data, field, label, low, high, errors, required=False):
    value = data.get(field)
    if value is None or value == '':
        if required:
            errors.append(f'{label} is required')
        return
    if isinstance(value, bool):
        errors.append(f'{label} must be a number')
        return
    try:
        v = float(value)
    except (ValueError, TypeError):
        errors.append(f'{label} must be a number')
        return
    if v < low or v > high:
        errors.append(f'{label} must be between {low:g} and {high:g}')


def _check_flag(data, field, errors):
    value = data.get(field)
    if value is not None and not isinstance(value, bool):
        errors.append(f'{field} must be true or false')


def validate_flags(data: dict, fields) -> list:
    """Optional boolean fields must be JSON true/false, not strings or numbers."""
    errors = []
    for field in fields:
        _check_flag(data, field, errors)
    return errors


def validate_blood_pressure(data: dict) -> list:
    """Validate blood pressure reading input."""
    errors = []
    _check_int(data, 'systolic', 'Systolic', 60, 300, errors, required=True)
    _check_int(data, 'diastolic', 'Diastolic', 30, 200, errors, required=True)
    _check_int(data, 'pulse', 'Pulse', 30, 250, errors)

    timing = data.get('timing')
    if timing not in (None, '') and timing not in BP_TIMINGS:
        errors.append('Timing must be morning or evening')

    measured_at = data.get('measured_at')
    if measured_at:
        try:
            datetime.fromisoformat(str(measured_at).replace('Z', '+00:00'))
        except ValueError:
            errors.append('Invalid measured_at format')

    return errors


def validate_weight(data: dict) -> list:
    """Validate weight input."""
    errors = []
    _check_number(data, 'weight_kg', 'Weight', 20, 400, errors, required=True)
    if data.get('measured_at'):
        _check_date(data['measured_at'], 'Measured date', errors)
    return errors


def validate_food_log(data: dict) -> list:
    """Validate food log input. Date and meal type are required."""
    errors = []

    logged_date = data.get('logged_date')
    if not logged_date:
        errors.append('Logged date is required')
    else:
        _check_date(logged_date, 'Logged date', errors)

    meal_type = data.get('meal_type')
    if not meal_type:
        errors.append('Meal type is required')
    elif meal_type not in MEAL_TYPES:
        errors.append('Meal type must be one of: ' + ', '.join(MEAL_TYPES))

    if not data.get('recipe_id') and not (data.get('custom_name') or '').strip():
        errors.append('Either a recipe or a food name is required')

    _check_number(data, 'portion', 'Portion', 0.1, 10, errors)
    for field in NUTRIENT_FIELDS:
        _check_number(data, field, field, 0, 10000, errors)

    return errors


def validate_condition(data: dict) -> list:
    """Validate condition log input."""
    errors = []
    if data.get('logged_date'):
        _check_date(data['logged_date'], 'Logged date', errors)
    _check_int(data, 'overall_score', 'Overall score', 1, 5, errors)
    _check_int(data, 'fatigue_level', 'Fatigue level', 1, 5, errors)
    errors.extend(validate_flags(data, ('palpitation', 'edema', 'cpap_used')))
    return errors


def validate_medical_visit(data: dict, partial: bool = False) -> list:
    """Validate medical visit input. ``partial`` allows updates without visit_date."""
    errors = []
    visit_date = data.get('visit_date')
    if not visit_date:
        if not partial:
            errors.append('Visit date is required')
    else:
        _check_date(visit_date, 'Visit date', errors)

    if data.get('next_visit'):
        _check_date(data['next_visit'], 'Next visit', errors)

    for field, limit in (('department', 100), ('doctor_name', 100)):
        value = data.get(field)
        if value is not None and len(str(value)) > limit:
            errors.append(f'{field} must be {limit} characters or fewer')
    return errors


def validate_recipe(data: dict) -> list:
    """Validate a user-created recipe."""
    errors = []
    name = (data.get('name') or '').strip()
    if not name:
        errors.append('Name is required')
    elif len(name) > 255:
        errors.append('Name must be 255 characters or fewer')

    if not (data.get('category') or '').strip():
        errors.append('Category is required')

    _check_int(data, 'cook_time_min', 'Cook time', 0, 600, errors)
    _check_int(data, 'servings', 'Servings', 1, 50, errors)
    _check_flag(data, 'is_favorite', errors)
    for field in NUTRIENT_FIELDS:
        _check_number(data, field, field, 0, 10000, errors)

    ingredients = data.get('ingredients', [])
    if not isinstance(ingredients, list) or any(
            not isinstance(i, dict) or not i.get('name') for i in ingredients):
        errors.append('Ingredients must be a list of {name, amount} objects')

    for field in ('steps', 'salt_tips', 'sugar_tips'):
        value = data.get(field)
        if value is not None and (not isinstance(value, list)
                                  or not all(isinstance(s, str) for s in value)):
            errors.append(f'{field} must be a list of strings')
    return errors


def validate_exercise_log(data: dict) -> list:
    """Validate exercise log input."""
    errors = []
    if data.get('logged_date'):
        _check_date(data['logged_date'], 'Logged date', errors)
    if not data.get('exercise_id'):
        errors.append('Exercise ID is required')
    _check_int(data, 'duration_min', 'Duration', 0, 600, errors)
    _check_int(data, 'calories_burned', 'Calories burned', 0, 5000, errors)
    _check_flag(data, 'completed', errors)
    return errors
