"""Streak routes."""
from flask import jsonify
from healthlog.services.streaks import list_streaks
from healthlog.storage import get_store
from . import api_bp


@api_bp.route('/streaks', methods=['GET'])
def get_streaks():
    return jsonify({'streaks': list_streaks(get_store())}), 200
