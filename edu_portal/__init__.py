"""
Application Factory
Creates and configures the Flask application
"""
import logging

from flask import Flask

from edu_portal.config import get_config
from edu_portal.errors import register_error_handlers
from edu_portal.extensions import db, socketio, cors
from edu_portal.services.file_storage import LocalFileStorage


def configure_logging(app):
    """Apply LOG_LEVEL / LOG_FORMAT to the root logger"""
    level = getattr(logging, app.config['LOG_LEVEL'], logging.INFO)
    logging.basicConfig(level=level, format=app.config['LOG_FORMAT'])
    logging.getLogger('edu_portal').setLevel(level)
    app.logger.setLevel(level)


def create_app(config_name=None, config_overrides=None):
    """
    Application factory pattern
    Creates and configures Flask app
    """
    app = Flask(__name__)

    # Load configuration
    if config_name:
        from edu_portal.config import config
        app.config.from_object(config[config_name])
    else:
        app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})
    socketio.init_app(
        app,
        cors_allowed_origins=app.config['SOCKETIO_CORS_ALLOWED_ORIGINS'],
        async_mode=app.config['SOCKETIO_ASYNC_MODE']
    )

    # Upload storage
    storage = LocalFileStorage(app.config['UPLOAD_FOLDER'], app.config['UPLOAD_URL_PREFIX'])
    storage.init_directory()
    app.extensions['file_storage'] = storage

    register_error_handlers(app)

    # Register blueprints
    from edu_portal.routes import auth_bp, content_bp, quiz_bp, teacher_bp, public_bp

    app.register_blueprint(content_bp, url_prefix='/api')
    app.register_blueprint(quiz_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/api')

    # Teacher dashboard routes (prefixed with /api/teacher)
    app.register_blueprint(teacher_bp, url_prefix='/api/teacher')

    # Uploaded files (no prefix)
    app.register_blueprint(public_bp)

    # Register Socket.IO events
    from edu_portal.sockets import register_socket_events
    register_socket_events()

    # Create database tables
    with app.app_context():
        db.create_all()
        app.logger.info('Database tables created/verified')

    return app
