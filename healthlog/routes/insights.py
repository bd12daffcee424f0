"""Advice, risk and trend routes."""
from flask import current_app, jsonify
from healthlog.services.advisor import build_snapshot, generate_advice
from healthlog.services.risk import assess_risk
from healthlog.services.stats import blood_pressure_stats, weight_stats
from healthlog.storage import get_clock, get_store
from . import api_bp, limit_arg


def current_profile():
    """Fallback reading, weight and the height used for BMI."""
    config = current_app.config
    return {
        'height_cm': config['PROFILE_HEIGHT_CM'],
        'weight_kg': config['PROFILE_WEIGHT_KG'],
        'systolic': config['PROFILE_SYSTOLIC'],
        'diastolic': config['PROFILE_DIASTOLIC'],
    }


def greeting_for(hour):
    if hour < 12:
        return 'Good morning!'
    if hour < 18:
        return 'Good afternoon!'
    return 'Good evening!'


@api_bp.route('/advice', methods=['GET'])
def get_advice():
    clock = get_clock()
    profile = current_profile()
    snapshot = build_snapshot(get_store(), clock,
                              profile_bp=(profile['systolic'], profile['diastolic']))
    advice = generate_advice(snapshot)
    return jsonify({
        'greeting': greeting_for(snapshot.hour),
        'advice': [a.to_dict() for a in advice],
    }), 200


@api_bp.route('/risk', methods=['GET'])
def get_risk():
    store = get_store()
    latest_bp = store.list('blood_pressure', order_by='measured_at', descending=True, limit=1)
    latest_weight = store.list('weight', order_by='measured_at', descending=True, limit=1)

    risk = assess_risk(
        latest_bp[0] if latest_bp else None,
        latest_weight[0]['weight_kg'] if latest_weight else None,
        current_profile(),
    )
    risk['has_visited'] = store.count('medical_visit') > 0
    return jsonify(risk), 200


@api_bp.route('/stats/blood-pressure', methods=['GET'])
def get_blood_pressure_stats():
    readings = get_store().list('blood_pressure', order_by='measured_at', descending=True,
                                limit=limit_arg(default=7))
    return jsonify({'stats': blood_pressure_stats(readings)}), 200


@api_bp.route('/stats/weight', methods=['GET'])
def get_weight_stats():
    entries = get_store().list('weight', order_by='measured_at', descending=True,
                               limit=limit_arg())
    return jsonify({'stats': weight_stats(entries)}), 200
