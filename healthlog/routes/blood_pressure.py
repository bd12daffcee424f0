"""Blood pressure routes."""
from flask import jsonify
from healthlog.errors import NotFoundError, ValidationError
from healthlog.services.streaks import record_event
from healthlog.storage import get_clock, get_store
from healthlog.utils.audit_logger import audit_log, audit_access
from healthlog.utils.validators import validate_blood_pressure
from . import api_bp, json_body, date_arg, limit_arg


@api_bp.route('/blood-pressure', methods=['GET'])
@audit_access('READ', 'blood_pressure')
def list_blood_pressure():
    """Latest readings first, optionally only those measured on ?date=."""
    store = get_store()
    limit = limit_arg()
    day = date_arg()

    if day:
        readings = store.list('blood_pressure', order_by='measured_at', descending=True)
        readings = [r for r in readings if r['measured_at'][:10] == day.isoformat()][:limit]
    else:
        readings = store.list('blood_pressure', order_by='measured_at',
                              descending=True, limit=limit)

    return jsonify({'readings': readings}), 200


@api_bp.route('/blood-pressure', methods=['POST'])
def create_blood_pressure():
    """Record a reading and advance the bp_record streak."""
    data = json_body()
    errors = validate_blood_pressure(data)
    if errors:
        raise ValidationError(errors)

    clock = get_clock()
    store = get_store()

    measured_at = data.get('measured_at') or clock.now().replace(
        tzinfo=None, microsecond=0).isoformat()

    reading = store.insert('blood_pressure', {
        'measured_at': measured_at,
        'systolic': int(data['systolic']),
        'diastolic': int(data['diastolic']),
        'pulse': int(data['pulse']) if data.get('pulse') not in (None, '') else None,
        'timing': data.get('timing') or None,
        'note': data.get('note') or None,
    })
    audit_log('CREATE', 'blood_pressure', resource_id=str(reading['id']))

    streak = record_event(store, 'bp_record', clock.today())

    return jsonify({'reading': reading, 'streak': streak}), 201


@api_bp.route('/blood-pressure/<record_id>', methods=['DELETE'])
def delete_blood_pressure(record_id):
    if not get_store().delete('blood_pressure', record_id):
        raise NotFoundError('Reading not found')
    audit_log('DELETE', 'blood_pressure', resource_id=str(record_id))
    return jsonify({'message': 'Deleted'}), 200
