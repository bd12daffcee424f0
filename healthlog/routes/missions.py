"""Mission of the day routes."""
from flask import current_app, jsonify
from healthlog.errors import ValidationError
from healthlog.services.missions import get_or_assign_mission, set_mission_completed
from healthlog.storage import get_clock, get_store
from healthlog.utils.validators import validate_flags
from . import api_bp, json_body, date_arg, parse_date


def _mission_rng():
    return current_app.extensions.get('mission_rng')


@api_bp.route('/missions', methods=['GET'])
def get_mission():
    """Mission for ?date= (default today), assigned on first request, plus the mission streak."""
    store = get_store()
    day = date_arg(default=get_clock().today())
    mission = get_or_assign_mission(store, day, rng=_mission_rng())
    streak = store.first('streak', {'streak_type': 'mission'})
    return jsonify({'mission': mission, 'streak': streak}), 200


@api_bp.route('/missions', methods=['POST'])
def complete_mission():
    data = json_body()
    errors = validate_flags(data, ('completed',))
    if errors:
        raise ValidationError(errors)
    if data.get('date'):
        day = parse_date(data['date'])
    else:
        day = get_clock().today()
    completed = bool(data.get('completed'))

    mission, streak = set_mission_completed(get_store(), day, completed, rng=_mission_rng())
    return jsonify({
        'mission': mission,
        'streak': streak,
        'message': 'Mission complete!' if completed else 'Mission reopened',
    }), 200
