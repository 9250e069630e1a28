# career_advisor/services/credentials.py
import logging

from career_advisor.database import Store
from career_advisor.errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    StoreError,
    ValidationError,
)
from career_advisor.models.user import DEFAULT_HASH_METHOD, User

logger = logging.getLogger(__name__)


class CredentialManager:
    """
    Account creation and authentication against the `users` table.

    Nothing is issued on login (no session, token or cookie); callers get the
    public user fields back and decide what "logged in" means themselves.
    """

    def __init__(self, store: Store, hash_method: str = DEFAULT_HASH_METHOD):
        self.store = store
        self.hash_method = hash_method

    def signup(self, name, email, password):
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        # the UNIQUE constraint on users.email is the real guard, this only saves a hash
        existing = self.store.execute("SELECT id FROM users WHERE email = :email", {"email": email})
        if existing.rows:
            raise DuplicateUserError("User already exists")

        password_hash = User.hash_password(password, method=self.hash_method)
        try:
            result = self.store.execute(
                "INSERT INTO users (name, email, password) VALUES (:name, :email, :password)",
                {"name": name, "email": email, "password": password_hash},
            )
        except StoreError as e:
            if e.integrity:
                raise DuplicateUserError("User already exists") from e
            raise

        logger.info("Registered user id=%s", result.lastrowid)
        return {"id": result.lastrowid, "name": name, "email": email}

    def login(self, email, password):
        if not email or not password:
            raise ValidationError("All fields are required")

        found = self.store.execute(
            "SELECT id, name, email, password FROM users WHERE email = :email",
            {"email": email},
        ).first()
        if found is None:
            raise InvalidCredentialsError("Invalid credentials")
        if not User.check_password(found["password"], password):
            logger.info("Failed login for user id=%s", found["id"])
            raise InvalidCredentialsError("Invalid credentials")

        return {"id": found["id"], "name": found["name"], "email": found["email"]}
