import logging

from playlist_api.app.core.config import Settings
from playlist_api.app.core.logging_config import HANDLER_PREFIX, setup_logging


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "DOCS_URL", "CORS_ORIGINS", "SEED_SONGS", "PROJECT_NAME"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.port == 3000
    assert s.host == "0.0.0.0"
    assert s.docs_url == "/api-docs"
    assert s.cors_origin_list == ["*"]
    assert s.seed_songs is True
    assert s.project_name == "Playlist API"


def test_port_comes_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080


def test_invalid_or_empty_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert Settings().port == 3000
    monkeypatch.setenv("PORT", "")
    assert Settings().port == 3000


def test_cors_origins_are_split_and_trimmed(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,,")
    assert Settings().cors_origin_list == ["http://a.example", "http://b.example"]


def test_seed_flag_parsing(monkeypatch):
    monkeypatch.setenv("SEED_SONGS", "No")
    assert Settings().seed_songs is False
    monkeypatch.setenv("SEED_SONGS", "YES")
    assert Settings().seed_songs is True


def _playlist_handlers():
    return [h for h in logging.getLogger().handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def test_setup_logging_uses_settings_format_and_file(monkeypatch, tmp_path):
    logfile = tmp_path / "playlist.log"
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", str(logfile))
    monkeypatch.setenv("LOG_FORMAT", "%(levelname)s|%(name)s|%(message)s")

    handlers = setup_logging(Settings())
    assert [h.get_name() for h in handlers] == ["playlist.console", "playlist.file"]
    assert logging.getLogger().level == logging.DEBUG

    logging.getLogger("playlist.test").info("hello file")
    handlers[1].flush()
    assert "INFO|playlist.test|hello file" in logfile.read_text(encoding="utf-8")


def test_setup_logging_replaces_its_own_handlers(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    foreign = logging.NullHandler()
    logging.getLogger().addHandler(foreign)
    try:
        setup_logging(Settings())
        setup_logging(Settings())
        assert len(_playlist_handlers()) == 1
        assert foreign in logging.getLogger().handlers
    finally:
        logging.getLogger().removeHandler(foreign)


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    setup_logging(Settings())
    assert logging.getLogger().level == logging.INFO
