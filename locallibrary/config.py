import os

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def _flag(name, default="false"):
    return (os.environ.get(name) or default).lower() in ("1", "true", "yes")


class Config:
    # SECURITY: set a secure random key in production via env var
    SECRET_KEY = os.environ.get('LOCALLIBRARY_SECRET') or 'change-this-secret-in-production'
    SQLALCHEMY_DATABASE_URI = (os.environ.get('LOCALLIBRARY_DATABASE_URL')
                               or "sqlite:///" + os.path.join(BASE_DIR, "locallibrary.db"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOCALLIBRARY_LOG_LEVEL') or 'INFO'
    FORCE_HTTPS = _flag('LOCALLIBRARY_FORCE_HTTPS')
    # None means "follow app.debug"
    SHOW_ERROR_DETAILS = None
    # Security headers (Talisman); Bootstrap is served from jsdelivr
    CONTENT_SECURITY_POLICY = {
        'default-src': ["'self'"],
        'script-src': ["'self'", "https://cdn.jsdelivr.net"],
        'style-src': ["'self'", "https://cdn.jsdelivr.net", "'unsafe-inline'"],
        'img-src': ["'self'", "data:"],
    }


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOCALLIBRARY_LOG_LEVEL') or 'DEBUG'


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    FORCE_HTTPS = False
    SHOW_ERROR_DETAILS = False


CONFIGS = {
    "default": Config,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}
