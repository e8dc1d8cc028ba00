import logging

import pytest
from fastapi.testclient import TestClient

from playlist_api.app.core.config import Settings
from playlist_api.app.core.logging_config import HANDLER_PREFIX
from playlist_api.app.main import create_app
from playlist_api.app.services.song_service import SongStore


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def store():
    # Fresh demo playlist (ids 1-5) for every test
    return SongStore.with_defaults()


@pytest.fixture
def app(store):
    return create_app(Settings(), store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
