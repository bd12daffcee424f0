"""Weight routes."""
from flask import jsonify
from healthlog.errors import NotFoundError, ValidationError
from healthlog.storage import get_clock, get_store
from healthlog.utils.audit_logger import audit_log
from healthlog.utils.validators import validate_weight
from . import api_bp, json_body, limit_arg


@api_bp.route('/weight', methods=['GET'])
def list_weight():
    entries = get_store().list('weight', order_by='measured_at', descending=True,
                               limit=limit_arg())
    return jsonify({'entries': entries}), 200


@api_bp.route('/weight', methods=['POST'])
def save_weight():
    """Upsert the weight for a day (default today)."""
    data = json_body()
    errors = validate_weight(data)
    if errors:
        raise ValidationError(errors)

    day = data.get('measured_at') or get_clock().today().isoformat()
    entry = get_store().upsert('weight', {
        'measured_at': day,
        'weight_kg': round(float(data['weight_kg']), 2),
    }, key='measured_at')
    audit_log('UPDATE', 'weight', resource_id=str(entry['id']), details={'date': day})

    return jsonify({'entry': entry}), 200


@api_bp.route('/weight/<record_id>', methods=['DELETE'])
def delete_weight(record_id):
    if not get_store().delete('weight', record_id):
        raise NotFoundError('Weight entry not found')
    audit_log('DELETE', 'weight', resource_id=str(record_id))
    return jsonify({'message': 'Deleted'}), 200
