"""
LocalLibrary: a server-rendered library catalog built with Flask.

Features:
- Authors / Genres / Books / Book instances CRUD through HTML forms
- Validation, sanitization and cross-field date rules on every write
- Derived display values (names, lifespans, formatted dates, detail URLs)
- Delete confirmation pages that refuse while dependents exist
- CSRF protection (Flask-WTF) and security headers (Flask-Talisman)
"""
import logging
import os

from flask import Flask, redirect, render_template, url_for
from jinja2 import DictLoader

from .config import CONFIGS
from .derived import FILTERS
from .extensions import csrf, db, talisman
from .persistence import PersistenceError
from .templates import PAGES

logger = logging.getLogger(__name__)


def configure_logging(app):
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).setLevel(app.config['LOG_LEVEL'])


def register_error_handlers(app):
    def show_details():
        flag = app.config.get('SHOW_ERROR_DETAILS')
        return app.debug if flag is None else flag

    @app.errorhandler(404)
    def not_found(e):
        return render_template("error_page.html", title="Not Found",
                               message=e.description or "The requested resource was not found."), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return render_template("error_page.html", title="Method Not Allowed",
                               message="This action does not accept that request method."), 405

    @app.errorhandler(PersistenceError)
    def database_error(e):
        return render_template("error_page.html", title="Database Error",
                               message="The change could not be saved.",
                               error=str(e) if show_details() else None), 500

    @app.errorhandler(500)
    def internal_error(e):
        original = getattr(e, "original_exception", None)
        logger.error("Unhandled error: %r", original)
        return render_template("error_page.html", title="Server Error",
                               message="Something went wrong.",
                               error=repr(original) if show_details() and original else None), 500


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.environ.get('LOCALLIBRARY_CONFIG') or "default"
    app.config.from_object(CONFIGS[config_name])

    configure_logging(app)

    db.init_app(app)
    csrf.init_app(app)
    talisman.init_app(app, force_https=app.config['FORCE_HTTPS'],
                      session_cookie_secure=app.config['FORCE_HTTPS'],
                      content_security_policy=app.config['CONTENT_SECURITY_POLICY'])

    app.jinja_loader = DictLoader(PAGES)
    app.jinja_env.filters.update(FILTERS)

    from .catalog import catalog
    app.register_blueprint(catalog)

    @app.route('/')
    def home():
        return redirect(url_for('catalog.index'))

    register_error_handlers(app)

    from .cli import init_db
    app.cli.add_command(init_db)

    logger.debug("LocalLibrary app created with %s config", config_name)
    return app
