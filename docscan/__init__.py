"""
DocScan Application Factory
"""
import os

from flask import Flask, render_template
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from docscan.config import config as configs
from docscan.settings import Settings

db = SQLAlchemy()


def create_app(config_name='default', test_config=None):
    app = Flask(__name__)
    app.config.from_object(configs[config_name])
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    settings = Settings.from_config(app.config)

    if settings.persistence_enabled:
        app.config['SQLALCHEMY_DATABASE_URI'] = settings.database_url
        if settings.database_url.startswith('sqlite'):
            app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {}
        db.init_app(app)
    else:
        app.logger.warning('DATABASE_URL not set - processed documents will not be persisted')

    if not settings.gemini_configured:
        app.logger.warning('GEMINI_API_KEY missing - uploads will fail at summarization')

    os.makedirs(settings.upload_dir, exist_ok=True)

    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    from docscan.storage import DocumentStore
    from docscan.summarizer import Summarizer

    app.extensions['docscan'] = {
        'settings': settings,
        'store': DocumentStore(settings.persistence_enabled),
        'summarizer': Summarizer(settings),
    }

    # Register blueprints
    from docscan.api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.route('/')
    def index():
        return render_template(
            'index.html',
            max_upload_mb=settings.max_upload_bytes // (1024 * 1024),
            upload_field=settings.upload_field,
        )

    # Handle database initialization
    if settings.persistence_enabled:
        with app.app_context():
            from docscan import models  # noqa: F401
            try:
                db.create_all()
            except Exception as e:
                app.logger.warning(f'Could not create tables, persistence will be skipped: {e}')

    return app
