from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .roster.controller import register as register_roster

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    seed = bool(getattr(settings, "SEED_DEMO_ROSTER", False))
    container = build_container(seed_demo_roster=seed)
    app.extensions["roster_container"] = container

    logging.getLogger(__name__).info(
        "roster-manager ready (settings=%s, students=%d)",
        settings_module,
        len(container.roster_repo.get_all()),
    )

    register_roster(app, container)

    return app
