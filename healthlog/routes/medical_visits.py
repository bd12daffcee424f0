"""Medical visit routes."""
from flask import jsonify
from healthlog.errors import NotFoundError, ValidationError
from healthlog.storage import get_clock, get_store
from healthlog.utils.audit_logger import audit_log
from healthlog.utils.validators import validate_medical_visit
from . import api_bp, json_body

VISIT_FIELDS = ('visit_date', 'department', 'doctor_name', 'diagnosis',
                'prescription', 'next_visit', 'note')


def next_upcoming(visits, today):
    """The visit whose next_visit is the earliest date on or after today."""
    upcoming = [v for v in visits if v.get('next_visit') and v['next_visit'] >= today.isoformat()]
    if not upcoming:
        return None
    return min(upcoming, key=lambda v: v['next_visit'])


@api_bp.route('/medical-visits', methods=['GET'])
def list_medical_visits():
    visits = get_store().list('medical_visit', order_by='visit_date', descending=True)
    return jsonify({
        'visits': visits,
        'next_visit': next_upcoming(visits, get_clock().today()),
    }), 200


@api_bp.route('/medical-visits', methods=['POST'])
def create_medical_visit():
    data = json_body()
    errors = validate_medical_visit(data)
    if errors:
        raise ValidationError(errors)

    visit = get_store().insert('medical_visit', {
        field: data.get(field) or None for field in VISIT_FIELDS
    })
    audit_log('CREATE', 'medical_visit', resource_id=str(visit['id']))
    return jsonify({'visit': visit}), 201


@api_bp.route('/medical-visits/<record_id>', methods=['PUT'])
def update_medical_visit(record_id):
    data = json_body()
    errors = validate_medical_visit(data, partial=True)
    if errors:
        raise ValidationError(errors)

    changes = {field: data.get(field) or None for field in VISIT_FIELDS if field in data}
    # visit_date can be changed but never cleared
    if 'visit_date' in changes and not changes['visit_date']:
        del changes['visit_date']
    visit = get_store().update('medical_visit', record_id, changes)
    if visit is None:
        raise NotFoundError('Medical visit not found')
    audit_log('UPDATE', 'medical_visit', resource_id=str(record_id),
              details={'fields': sorted(changes)})
    return jsonify({'visit': visit}), 200


@api_bp.route('/medical-visits/<record_id>', methods=['DELETE'])
def delete_medical_visit(record_id):
    if not get_store().delete('medical_visit', record_id):
        raise NotFoundError('Medical visit not found')
    audit_log('DELETE', 'medical_visit', resource_id=str(record_id))
    return jsonify({'message': 'Deleted'}), 200
