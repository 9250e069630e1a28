import pytest

from career_advisor import create_app
from career_advisor.config import Settings


class StubGenerator:
    """Stands in for GeminiClient; returns a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else {}
        self.error = error
        self.prompts = []

    def generate_content(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'career_advisor.db'}",
        gemini_api_key="test-key",
        password_hash_method="pbkdf2:sha256:1000",
    )


@pytest.fixture
def generator():
    return StubGenerator()


@pytest.fixture
def app(settings, generator):
    app = create_app(settings, generator=generator)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    with app.app_context():
        yield app.extensions["career_advisor"]


@pytest.fixture
def count_rows(app):
    def _count(table):
        with app.app_context():
            store = app.extensions["career_advisor"].store
            return store.execute(f"SELECT COUNT(*) AS n FROM {table}").first()["n"]
    return _count
