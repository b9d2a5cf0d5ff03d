from __future__ import annotations

import pytest

from src.roster_manager.roster_manager.container import build_container, demo_roster
from src.roster_manager.roster_manager.main import create_app
from src.roster_manager.roster_manager.roster.id_counter import IdCounter


@pytest.fixture
def students():
    return tuple(demo_roster())


@pytest.fixture
def counter():
    return IdCounter(start=6)


@pytest.fixture
def container():
    return build_container(seed_demo_roster=True)


@pytest.fixture
def service(container):
    return container.roster_service


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
