"""Condition log routes."""
from flask import jsonify
from healthlog.errors import ValidationError
from healthlog.services.streaks import record_event
from healthlog.storage import get_clock, get_store
from healthlog.utils.audit_logger import audit_log
from healthlog.utils.validators import validate_condition
from . import api_bp, json_body, date_arg, limit_arg


@api_bp.route('/condition', methods=['GET'])
def get_condition():
    """The log for ?date= (or null), otherwise the latest logs."""
    store = get_store()
    day = date_arg()
    if day:
        return jsonify({'condition': store.first('condition', {'logged_date': day})}), 200

    logs = store.list('condition', order_by='logged_date', descending=True, limit=limit_arg())
    return jsonify({'conditions': logs}), 200


@api_bp.route('/condition', methods=['POST'])
def save_condition():
    """Upsert the day's condition. CPAP use advances the cpap streak."""
    data = json_body()
    errors = validate_condition(data)
    if errors:
        raise ValidationError(errors)

    store = get_store()
    day = data.get('logged_date') or get_clock().today().isoformat()
    cpap_used = data.get('cpap_used') is not False

    condition = store.upsert('condition', {
        'logged_date': day,
        'overall_score': int(data.get('overall_score') or 3),
        'palpitation': bool(data.get('palpitation')),
        'edema': bool(data.get('edema')),
        'fatigue_level': int(data.get('fatigue_level') or 3),
        'cpap_used': cpap_used,
        'note': data.get('note') or None,
    }, key='logged_date')
    audit_log('UPDATE', 'condition', resource_id=str(condition['id']), details={'date': day})

    streak = record_event(store, 'cpap', day) if cpap_used else None

    return jsonify({'condition': condition, 'streak': streak}), 200
