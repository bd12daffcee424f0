import os
from flask import Flask, request, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()


def _load_config(app):
    """Read configuration from the environment."""
    # Relative SQLite paths resolve inside the instance folder
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///health.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['AUTO_CREATE_SCHEMA'] = os.getenv('AUTO_CREATE_SCHEMA', 'true').lower() == 'true'
    app.config['STORAGE_BACKEND'] = os.getenv('STORAGE_BACKEND', 'sql')
    app.config['DOCUMENT_STORE_PATH'] = os.getenv('DOCUMENT_STORE_PATH')
    app.config['APP_TIMEZONE'] = os.getenv('APP_TIMEZONE', 'Asia/Tokyo')
    app.config['AUDIT_LOG_FILE'] = os.getenv('AUDIT_LOG_FILE', 'logs/audit.log')
    app.config['ALLOWED_ORIGINS'] = os.getenv('ALLOWED_ORIGINS', '')

    # Fallback profile used when nothing has been logged yet
    app.config['PROFILE_HEIGHT_CM'] = float(os.getenv('PROFILE_HEIGHT_CM', 170))
    app.config['PROFILE_WEIGHT_KG'] = float(os.getenv('PROFILE_WEIGHT_KG', 110))
    app.config['PROFILE_SYSTOLIC'] = int(os.getenv('PROFILE_SYSTOLIC', 168))
    app.config['PROFILE_DIASTOLIC'] = int(os.getenv('PROFILE_DIASTOLIC', 83))

    # Request size limit (1 MB)
    app.config['MAX_CONTENT_LENGTH'] = 1 * 1024 * 1024


def create_app(test_config=None, clock=None):
    app = Flask(__name__)

    is_production = os.getenv('FLASK_ENV') == 'production'

    _load_config(app)
    if test_config:
        app.config.update(test_config)

    database_url = app.config['SQLALCHEMY_DATABASE_URI']
    if database_url.startswith('sqlite:///'):
        os.makedirs(app.instance_path, exist_ok=True)
    if not database_url.startswith('sqlite'):
        app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {
            'pool_pre_ping': True,
            'pool_recycle': 300,
        })

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # CORS: restrict origins
    allowed_origins = app.config['ALLOWED_ORIGINS']
    if allowed_origins:
        origins_list = [o.strip() for o in allowed_origins.split(',') if o.strip()]
    elif is_production:
        raise RuntimeError(
            'ALLOWED_ORIGINS environment variable is required in production'
        )
    else:
        # Development: allow localhost variants
        origins_list = [
            'http://localhost:*',
            'http://127.0.0.1:*',
        ]

    CORS(app, resources={r"/api/*": {"origins": origins_list}})

    # Security headers
    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate'
        response.headers['Referrer-Policy'] = 'no-referrer'
        return response

    # Reject non-JSON bodies on write requests
    @app.before_request
    def validate_content_type():
        if request.method in ('POST', 'PUT', 'PATCH') and request.path != '/health':
            content_type = request.content_type or ''
            if 'application/json' not in content_type:
                return jsonify({'error': 'Content-Type must be application/json'}), 415

    # Setup audit logging
    from healthlog.utils.audit_logger import setup_audit_logging
    setup_audit_logging(app)

    # Clock and record store are injected so tests can replace them
    from healthlog.clock import Clock
    from healthlog.storage import build_store
    app.extensions['clock'] = clock or Clock(app.config['APP_TIMEZONE'])
    app.extensions['record_store'] = build_store(app)

    from healthlog.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from healthlog.routes import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    # Health check endpoint
    @app.route('/health')
    def health():
        return {'status': 'healthy', 'storage': app.config['STORAGE_BACKEND']}, 200

    @app.cli.command('init-db')
    def init_db():
        """Create database tables if they do not exist yet."""
        from healthlog import models  # noqa: F401
        db.create_all()
        print('Database schema is up to date.')

    return app
