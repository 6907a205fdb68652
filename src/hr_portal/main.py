from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, redirect, render_template, request, url_for

from .common.datetime_utils import format_date, format_datetime_local
from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import InvalidIdentifierError, NotFoundError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

from .api.controller import register as register_api
from .employees.controller import register as register_employees
from .timesheets.controller import register as register_timesheets


def _register_error_pages(app: Flask) -> None:
    def _back_link() -> tuple[str, str]:
        if request.path.startswith("/timesheets"):
            return url_for("timesheets"), "Back to Timesheets"
        return url_for("employees"), "Back to Employees"

    def _render(status: int, e: Exception):
        back_url, back_label = _back_link()
        return (
            render_template("errors/error.html", status=status, message=str(e), back_url=back_url, back_label=back_label),
            status,
        )

    @app.errorhandler(InvalidIdentifierError)
    def invalid_identifier(e: InvalidIdentifierError):
        return _render(400, e)

    @app.errorhandler(NotFoundError)
    def not_found(e: NotFoundError):
        return _render(404, e)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config)
            app.logger.info("demo seed ready")

        container = build_container(db_config=db_config, settings=settings)

    app.extensions["hr_portal"] = container
    app.add_template_filter(format_date, "date")
    app.add_template_filter(format_datetime_local, "datetime_local")

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("employees"))

    _register_error_pages(app)
    register_employees(app, container)
    register_timesheets(app, container)
    register_api(app, container)

    return app
