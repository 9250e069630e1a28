# career_advisor/database.py
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from career_advisor.errors import StoreError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def init_db(app, database_uri, engine_options=None):
    app.config["SQLALCHEMY_DATABASE_URI"] = database_uri
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {"pool_pre_ping": True, **(engine_options or {})}
    db.init_app(app)
    return Store(db)


@dataclass
class QueryResult:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    lastrowid: Optional[int] = None

    def first(self):
        return self.rows[0] if self.rows else None


class Store:
    """
    Thin persistence layer over the Flask-SQLAlchemy handle.

    Every statement goes through `execute` with bound parameters; driver
    errors are rolled back, logged and re-raised as StoreError.
    """

    def __init__(self, database: SQLAlchemy):
        self.db = database

    def ensure_schema(self):
        # models must be imported so their tables are registered on the metadata
        from career_advisor.models import User, SkillSubmission

        try:
            with self.db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("Connected to database %s", self.db.engine.url.render_as_string(hide_password=True))

            # create_all only issues CREATE TABLE for tables that are missing
            self.db.metadata.create_all(bind=self.db.engine, tables=[User.__table__])
            logger.info("Users table ready")
            self.db.metadata.create_all(bind=self.db.engine, tables=[SkillSubmission.__table__])
            logger.info("Skills table ready")
        except SQLAlchemyError as e:
            logger.error("Schema setup failed: %s", e)
            raise StoreError("Schema setup failed") from e

    def execute(self, query: str, params: Optional[Dict[str, Any]] = None) -> QueryResult:
        try:
            result = self.db.session.execute(text(query), params or {})
            if result.returns_rows:
                out = QueryResult(rows=[dict(r) for r in result.mappings()])
                out.rowcount = len(out.rows)
            else:
                out = QueryResult(rowcount=result.rowcount, lastrowid=getattr(result, "lastrowid", None))
            self.db.session.commit()
            return out
        except IntegrityError as e:
            self.db.session.rollback()
            logger.warning("Integrity violation: %s", e.orig)
            raise StoreError("Integrity violation", integrity=True) from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error("Query failed: %s", e)
            raise StoreError() from e
