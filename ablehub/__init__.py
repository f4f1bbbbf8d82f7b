import os
import logging
from logging.handlers import RotatingFileHandler
import click
from flask import Flask
from flasgger import Swagger
from flask_jwt_extended import create_access_token
from ablehub.config import config
from ablehub.extensions import db, jwt, cors, limiter, migrate
from ablehub.errors import register_error_handlers
from ablehub.utils.db_initializer import init_db

logger = logging.getLogger(__name__)


def create_app(config_class=None):
    if config_class is None:
        config_class = os.environ.get('APP_ENV', 'development')
    if isinstance(config_class, str):
        config_class = config[config_class]

    app = Flask(__name__)
    app.config.from_object(config_class)

    # --- SWAGGER AYARLARI ---
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec_1',
                "route": '/apispec_1.json',
                "rule_filter": lambda rule: True,
                "model_filter": lambda tag: True,
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs"
    }

    template = {
        "swagger": "2.0",
        "info": {
            "title": "AbleHub API",
            "description": "Erişilebilirlik Ayarları API Dokümantasyonu",
            "version": "1.0.0"
        },
        "securityDefinitions": {
            "Bearer": {
                "type": "apiKey",
                "name": "Authorization",
                "in": "header",
                "description": "JWT Token başına 'Bearer ' ekleyerek giriniz. Örn: 'Bearer eyJhb...'"
            }
        },
        "definitions": {
            "AccessibilitySettings": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "userId": {"type": "string"},
                    "voiceNavigation": {"type": "boolean"},
                    "screenReader": {"type": "boolean"},
                    "highContrast": {"type": "boolean"},
                    "largeText": {"type": "boolean"},
                    "keyboardNav": {"type": "boolean"},
                    "createdAt": {"type": "string", "format": "date-time"},
                    "updatedAt": {"type": "string", "format": "date-time"}
                }
            }
        },
        "security": [
            {
                "Bearer": []
            }
        ]
    }

    Swagger(app, config=swagger_config, template=template)

    configure_logging(app)

    # Eklentileri Başlat
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})
    limiter.init_app(app)
    migrate.init_app(app, db)

    register_error_handlers(app)

    # Blueprint'leri Kaydet
    from ablehub.api.accessibility import accessibility_bp
    from ablehub.api.health import health_bp

    app.register_blueprint(accessibility_bp)
    app.register_blueprint(health_bp)

    register_commands(app)

    init_db(app)

    return app


def configure_logging(app):
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(module)s:%(lineno)d]: %(message)s'
    )
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)

    handlers = []
    if app.config.get('LOG_TO_FILE'):
        log_dir = os.path.dirname(app.config['LOG_FILE'])
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = RotatingFileHandler(app.config['LOG_FILE'], maxBytes=10240000, backupCount=10)
        handlers.append(file_handler)

    handlers.append(logging.StreamHandler())

    # Modül logger'ları (ablehub.*) aynı handler'lara yazar
    package_logger = logging.getLogger('ablehub')
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    app.logger.setLevel(level)
    app.logger.info('✅ AbleHub Backend Başlatıldı.')


def register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Tabloları oluşturur."""
        db.create_all()
        click.echo('✅ Veritabanı tabloları oluşturuldu.')

    @app.cli.command('issue-token')
    @click.argument('user_id')
    def issue_token_command(user_id):
        """Geliştirme için verilen kimliğe JWT üretir."""
        click.echo(create_access_token(identity=user_id))
