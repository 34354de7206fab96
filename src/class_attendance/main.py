from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .common.logging_utils import configure_logging
from .config import get_settings_module
from .container import build_container
from .server.controller import register as register_document_routes

logger = logging.getLogger(__name__)


def load_settings() -> Any:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(settings: Optional[Any] = None) -> Flask:
    """Flask app serving the shared attendance document."""
    settings = settings or load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_container(settings=settings)
    app.extensions["class_attendance"] = container

    register_document_routes(app, container, route=container.document_route)

    if app.config["DEBUG"]:
        logger.debug(
            "settings=%s document=%s route=%s",
            getattr(settings, "__name__", type(settings).__name__),
            getattr(settings, "SERVER_DOCUMENT_PATH", "?"),
            container.document_route,
        )
    return app
