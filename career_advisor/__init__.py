from dataclasses import dataclass

from flask import Flask
from flask_cors import CORS

from career_advisor.config import Settings
from career_advisor.database import Store, init_db
from career_advisor.services import CredentialManager, GeminiClient, RecommendationService


@dataclass
class Services:
    store: Store
    credentials: CredentialManager
    recommender: RecommendationService


def create_app(settings=None, generator=None, engine_options=None):
    """
    Build the Flask app in a fixed order: settings, store, schema,
    provider client, routes. Any failure before routes are registered
    propagates, so a process never serves without a working store.
    """
    if settings is None:
        settings = Settings.from_env()

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    CORS(app, origins="*", send_wildcard=True)

    # init DB
    store = init_db(app, settings.database_url, engine_options)
    with app.app_context():
        store.ensure_schema()

    if generator is None:
        generator = GeminiClient(
            settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout,
        )

    app.extensions["career_advisor"] = Services(
        store=store,
        credentials=CredentialManager(store, hash_method=settings.password_hash_method),
        recommender=RecommendationService(store, generator),
    )

    # register routes blueprint
    from career_advisor.api import api
    app.register_blueprint(api)

    return app
