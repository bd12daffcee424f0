"""
Audit trail for changes to logged health data.

Events are structlog dicts rendered as one JSON object per line into
AUDIT_LOG_FILE through the stdlib ``audit`` logger.
"""
import os
import logging
from functools import wraps
import structlog
from flask import request, has_request_context

AUDIT_LOGGER_NAME = 'audit'


def setup_audit_logging(app):
    """Point the ``audit`` logger at AUDIT_LOG_FILE and render events as JSON."""
    log_file = app.config.get('AUDIT_LOG_FILE') or 'logs/audit.log'
    if os.path.dirname(log_file):
        os.makedirs(os.path.dirname(log_file), exist_ok=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt='iso', utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    stdlib_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    stdlib_logger.setLevel(logging.INFO)

    # Several apps in one process may share a file
    target = os.path.abspath(log_file)
    if all(getattr(h, 'baseFilename', None) != target for h in stdlib_logger.handlers):
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(message)s'))
        stdlib_logger.addHandler(handler)


def audit_log(action: str, resource_type: str, resource_id: str = None,
              details: dict = None):
    """Record one CREATE / READ / UPDATE / DELETE on a record kind."""
    if has_request_context():
        origin = {'client_ip': request.remote_addr,
                  'user_agent': request.headers.get('User-Agent', 'unknown')}
    else:
        origin = {'client_ip': 'local', 'user_agent': 'n/a'}

    structlog.get_logger(AUDIT_LOGGER_NAME).info(
        'audit_event',
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        details=details or {},
        **origin,
    )


def audit_access(action: str, resource_type: str):
    """Route decorator that audits each call before running the view."""
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            resource_id = kwargs.get('record_id') or kwargs.get('recipe_id')
            audit_log(action, resource_type,
                      resource_id=str(resource_id) if resource_id else None)
            return view(*args, **kwargs)
        return wrapper
    return decorator
