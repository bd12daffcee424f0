"""Exercise catalog and exercise log routes."""
from flask import request, jsonify
from healthlog.catalog import EXERCISES, EXERCISES_BY_ID
from healthlog.errors import NotFoundError, ValidationError
from healthlog.services.exercise import daily_exercise
from healthlog.storage import get_clock, get_store
from healthlog.utils.audit_logger import audit_log
from healthlog.utils.validators import validate_exercise_log, validate_flags
from . import api_bp, json_body, date_arg


@api_bp.route('/exercises', methods=['GET'])
def list_exercises():
    category = request.args.get('category')
    exercises = [e for e in EXERCISES if not category or e['category'] == category]
    return jsonify({'exercises': exercises}), 200


@api_bp.route('/exercise-log', methods=['GET'])
def get_exercise_log():
    day = date_arg(default=get_clock().today())
    logs, summary = daily_exercise(get_store(), day)
    return jsonify({'logs': logs, 'summary': summary}), 200


@api_bp.route('/exercise-log', methods=['POST'])
def create_exercise_log():
    """Log a catalog exercise. Duration and calories default to the catalog values."""
    data = json_body()
    errors = validate_exercise_log(data)
    if errors:
        raise ValidationError(errors)

    exercise = EXERCISES_BY_ID.get(data['exercise_id'])
    if exercise is None:
        raise NotFoundError('Exercise not found')

    duration = data.get('duration_min')
    calories = data.get('calories_burned')
    log = get_store().insert('exercise_log', {
        'logged_date': data.get('logged_date') or get_clock().today().isoformat(),
        'exercise_id': exercise['id'],
        'exercise_name': exercise['name'],
        'duration_min': int(duration) if duration is not None else exercise['duration_min'],
        'calories_burned': int(calories) if calories is not None else exercise['calories_burned'],
        'completed': bool(data.get('completed', False)),
        'note': data.get('note') or None,
    })
    audit_log('CREATE', 'exercise_log', resource_id=str(log['id']))
    return jsonify({'log': log}), 201


@api_bp.route('/exercise-log/<record_id>', methods=['PATCH'])
def toggle_exercise_log(record_id):
    """Set ``completed`` when given, otherwise flip it."""
    data = request.get_json(silent=True) or {}
    errors = validate_flags(data, ('completed',))
    if errors:
        raise ValidationError(errors)
    store = get_store()
    log = store.get('exercise_log', record_id)
    if log is None:
        raise NotFoundError('Exercise log not found')

    if data.get('completed') is not None:
        completed = data['completed']
    else:
        completed = not log.get('completed')
    log = store.update('exercise_log', record_id, {'completed': completed})
    audit_log('UPDATE', 'exercise_log', resource_id=str(record_id),
              details={'completed': completed})
    return jsonify({'log': log}), 200


@api_bp.route('/exercise-log/<record_id>', methods=['DELETE'])
def delete_exercise_log(record_id):
    if not get_store().delete('exercise_log', record_id):
        raise NotFoundError('Exercise log not found')
    audit_log('DELETE', 'exercise_log', resource_id=str(record_id))
    return jsonify({'message': 'Deleted'}), 200
