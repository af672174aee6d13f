from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.service import AttendancePolicy
from .branches.controller import register as register_branches
from .common.responses import fail
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .core.exceptions import DomainError, OutOfRangeError
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .holidays.controller import register as register_holidays
from .payroll.controller import register as register_payroll
from .requests.controller import register as register_requests
from .settings.controller import register as register_settings
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def policy_from_settings(settings) -> AttendancePolicy:
    return AttendancePolicy(
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", 5)),
        early_checkin_minutes=int(getattr(settings, "EARLY_CHECKIN_MINUTES", 0)),
        min_rest_minutes=int(getattr(settings, "MIN_REST_MINUTES", 60)),
        require_branch=bool(getattr(settings, "REQUIRE_BRANCH", True)),
        timezone=getattr(settings, "TIMEZONE", None),
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, OutOfRangeError) and e.distance is not None:
            return fail(str(e), e.status_code, distance=round(e.distance, 1))
        return fail(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return fail("Server error: Please try again later.", 500)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(days=DEFAULT_SESSION_DAYS)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            policy=policy_from_settings(settings),
            overtime_threshold_minutes=int(getattr(settings, "OVERTIME_THRESHOLD_MINUTES", 30)),
        )

    app.extensions["container"] = container

    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_branches(app, container)
    register_shifts(app, container)
    register_settings(app, container)
    register_holidays(app, container)
    register_requests(app, container)
    register_payroll(app, container)

    return app
