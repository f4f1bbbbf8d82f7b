import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Güvenlik
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-ablehub-key")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)

    # Veritabanı
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///ablehub.db")
    if SQLALCHEMY_DATABASE_URI.startswith("postgres://"):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace("postgres://", "postgresql://", 1)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")

    # Loglama
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE = _env_flag("LOG_TO_FILE", True)
    LOG_FILE = os.getenv("LOG_FILE", "logs/ablehub.log")

    # Kimlik: X-User-Id header'ı ve otomatik kullanıcı oluşturma sadece geliştirme içindir
    ALLOW_HEADER_IDENTITY = _env_flag("ALLOW_HEADER_IDENTITY", True)
    AUTO_PROVISION_USERS = _env_flag("AUTO_PROVISION_USERS", True)

    EXPOSE_ERROR_DETAILS = True

    RATELIMIT_ENABLED = True
    ACCESSIBILITY_RATE_LIMIT = os.getenv("ACCESSIBILITY_RATE_LIMIT", "120 per minute")


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite://")
    LOG_TO_FILE = False
    RATELIMIT_ENABLED = False
    ALLOW_HEADER_IDENTITY = True
    AUTO_PROVISION_USERS = True
    JWT_SECRET_KEY = "testing-jwt-secret-key-with-enough-length"


class ProductionConfig(Config):
    DEBUG = False
    EXPOSE_ERROR_DETAILS = False
    ALLOW_HEADER_IDENTITY = _env_flag("ALLOW_HEADER_IDENTITY", False)
    AUTO_PROVISION_USERS = _env_flag("AUTO_PROVISION_USERS", False)


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
