# career_advisor/models/user.py
from career_advisor.database import db
from sqlalchemy.sql import func
from werkzeug.security import generate_password_hash, check_password_hash

DEFAULT_HASH_METHOD = "scrypt"


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    # column keeps the name the existing MySQL schema uses
    password_hash = db.Column("password", db.String(255), nullable=False)
    created_at = db.Column(db.TIMESTAMP, server_default=func.current_timestamp())

    @staticmethod
    def hash_password(raw, method=DEFAULT_HASH_METHOD):
        return generate_password_hash(raw, method=method)

    @staticmethod
    def check_password(password_hash, raw):
        return check_password_hash(password_hash, raw)
