"""
JSON API routes.
"""
from datetime import date
from flask import Blueprint, request
from healthlog.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from healthlog.errors import ValidationError

api_bp = Blueprint('api', __name__)


def json_body():
    """Return the request's JSON object or raise a validation error."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        raise ValidationError('Request body is required')
    return data


def parse_date(value, label='date'):
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f'Invalid {label} format. Use YYYY-MM-DD')


def date_arg(name='date', default=None):
    """Read a YYYY-MM-DD query argument."""
    value = request.args.get(name)
    if not value:
        return default
    return parse_date(value, name)


def limit_arg(default=DEFAULT_LIST_LIMIT):
    limit = request.args.get('limit', default, type=int)
    if limit is None or limit < 1:
        return default
    return min(limit, MAX_LIST_LIMIT)


# Import submodules to register routes on api_bp
from . import blood_pressure   # noqa: E402, F401
from . import weight           # noqa: E402, F401
from . import food_log         # noqa: E402, F401
from . import condition        # noqa: E402, F401
from . import recipes          # noqa: E402, F401
from . import medical_visits   # noqa: E402, F401
from . import exercise         # noqa: E402, F401
from . import missions         # noqa: E402, F401
from . import streaks          # noqa: E402, F401
from . import insights         # noqa: E402, F401
