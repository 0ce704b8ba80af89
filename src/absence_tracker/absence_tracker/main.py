from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .codes.controller import register as register_codes
from .common.logging_handler import setup_logger
from .container import Container, build_container
from .employees.controller import register as register_employees
from .exports.controller import register as register_exports
from .ledger.controller import register as register_ledger

logger = logging.getLogger(__name__)


def load_settings(settings_module: Optional[str] = None):
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    settings = load_settings(settings_module)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logger(
        "absence_tracker",
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_file=getattr(settings, "LOG_FILE", None),
    )

    if container is None:
        data_config = getattr(settings, "DATA_CONFIG")
        logger.info(
            "Loading data: employees=%s codes=%s",
            data_config["employees_file"],
            data_config["codes_file"],
        )
        container = build_container(data_config=data_config)

    register_ledger(app, container)
    register_employees(app, container)
    register_codes(app, container)
    register_exports(app, container)

    return app
