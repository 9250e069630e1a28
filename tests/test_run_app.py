import logging

import pytest
from flask import Flask

from career_advisor import run_app

ENV_KEYS = (
    "DATABASE_URL", "DB_HOST", "DB_USER", "DB_PASS", "DB_NAME",
    "GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_TIMEOUT", "PORT", "LOG_LEVEL",
)


@pytest.fixture
def environ(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of these tests
    monkeypatch.setattr("career_advisor.config.load_dotenv", lambda *a, **kw: False)
    root = logging.getLogger()
    level = root.level
    yield monkeypatch
    root.setLevel(level)


@pytest.fixture
def served(monkeypatch):
    calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))
    return calls


def test_missing_configuration_exits_1(environ, served):
    with pytest.raises(SystemExit) as exc:
        run_app.main()

    assert exc.value.code == 1
    assert served == []


def test_bad_log_level_exits_1(environ, served):
    environ.setenv("DATABASE_URL", "sqlite://")
    environ.setenv("GEMINI_API_KEY", "k")
    environ.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(SystemExit) as exc:
        run_app.main()

    assert exc.value.code == 1
    assert served == []


def test_unreachable_store_exits_1(environ, served, tmp_path):
    environ.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'missing' / 'nested' / 'db.sqlite'}")
    environ.setenv("GEMINI_API_KEY", "k")

    with pytest.raises(SystemExit) as exc:
        run_app.main()

    assert exc.value.code == 1
    assert served == []


def test_serves_on_configured_port(environ, served, tmp_path):
    environ.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'career_advisor.db'}")
    environ.setenv("GEMINI_API_KEY", "k")
    environ.setenv("PORT", "8123")

    run_app.main()

    assert served == [{"host": "0.0.0.0", "port": 8123, "threaded": True}]
