"""Food log routes."""
from flask import request, jsonify
from healthlog.constants import NUTRIENT_FIELDS
from healthlog.errors import NotFoundError, ValidationError
from healthlog.services.nutrition import compare_to_targets, daily_nutrition
from healthlog.services.streaks import record_event
from healthlog.storage import get_clock, get_store
from healthlog.utils.audit_logger import audit_log, audit_access
from healthlog.utils.validators import validate_food_log
from . import api_bp, json_body, date_arg


@api_bp.route('/food-log', methods=['GET'])
@audit_access('READ', 'food_log')
def get_food_log():
    """Entries for ?date= (default today) with the day's nutrition summary."""
    day = date_arg(default=get_clock().today())
    entries, summary = daily_nutrition(get_store(), day)
    return jsonify({
        'entries': entries,
        'summary': summary,
        'targets': compare_to_targets(summary),
    }), 200


@api_bp.route('/food-log', methods=['POST'])
def create_food_log():
    """Log a meal item and advance the food_log streak."""
    data = json_body()
    errors = validate_food_log(data)
    if errors:
        raise ValidationError(errors)

    store = get_store()
    recipe_id = data.get('recipe_id') or None
    if recipe_id and store.get('recipe', recipe_id) is None:
        raise NotFoundError('Recipe not found')

    record = {
        'logged_date': data['logged_date'],
        'meal_type': data['meal_type'],
        'recipe_id': str(recipe_id) if recipe_id else None,
        'custom_name': (data.get('custom_name') or '').strip() or None,
        'portion': float(data['portion']) if data.get('portion') else 1.0,
        'note': data.get('note') or None,
    }
    for field in NUTRIENT_FIELDS:
        value = data.get(field)
        record[field] = float(value) if value not in (None, '') else None

    entry = store.insert('food_log', record)
    audit_log('CREATE', 'food_log', resource_id=str(entry['id']))

    streak = record_event(store, 'food_log', get_clock().today())

    return jsonify({'entry': entry, 'streak': streak}), 201


@api_bp.route('/food-log', methods=['DELETE'])
@api_bp.route('/food-log/<record_id>', methods=['DELETE'])
def delete_food_log(record_id=None):
    record_id = record_id or request.args.get('id')
    if not record_id:
        raise ValidationError('ID is required')
    if not get_store().delete('food_log', record_id):
        raise NotFoundError('Food log entry not found')
    audit_log('DELETE', 'food_log', resource_id=str(record_id))
    return jsonify({'message': 'Deleted'}), 200
