from datetime import date

import pytest

from app.resources.factory import RecordFactory
from app.resources.registry import Registry
from app.session.session_log import SessionLog


@pytest.fixture()
def current_year() -> int:
    return date.today().year


@pytest.fixture()
def registry() -> Registry:
    return Registry(RecordFactory())


@pytest.fixture()
def session_log() -> SessionLog:
    return SessionLog()


@pytest.fixture()
def dune_digital() -> dict[str, object]:
    """The canonical valid digital submission."""
    return {"title": "Dune", "author": "Herbert", "year": 1965, "size": 2.5}


@pytest.fixture()
def dune_print() -> dict[str, object]:
    """The canonical valid print submission."""
    return {"title": "Dune", "author": "Herbert", "year": 1965, "pages": 412}
