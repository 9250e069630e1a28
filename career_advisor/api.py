# career_advisor/api.py
import logging

from flask import Blueprint, current_app, jsonify, request

from career_advisor.errors import (
    DuplicateUserError,
    GenerationError,
    InvalidCredentialsError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------
# SETUP
# ---------------------------------------------------------------
api = Blueprint("api", __name__)


def _services():
    return current_app.extensions["career_advisor"]


def _payload():
    # a missing or non-JSON body is treated as an empty object
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------
# HEALTH
# ---------------------------------------------------------------
@api.route("/")
def health():
    return jsonify({"status": "ok", "app": "career_advisor"})


# ---------------------------------------------------------------
# SIGNUP
# ---------------------------------------------------------------
@api.route("/auth/signup", methods=["POST"])
def signup():
    data = _payload()
    try:
        user = _services().credentials.signup(data.get("name"), data.get("email"), data.get("password"))
    except (ValidationError, DuplicateUserError) as e:
        return jsonify({"success": False, "message": e.message}), 400
    except Exception:
        logger.exception("Signup error")
        return jsonify({"success": False, "message": "Server error"}), 500

    return jsonify({"success": True, "user": user})


# ---------------------------------------------------------------
# LOGIN
# ---------------------------------------------------------------
@api.route("/auth/login", methods=["POST"])
def login():
    data = _payload()
    try:
        user = _services().credentials.login(data.get("email"), data.get("password"))
    except (ValidationError, InvalidCredentialsError) as e:
        return jsonify({"success": False, "message": e.message}), 400
    except Exception:
        logger.exception("Login error")
        return jsonify({"success": False, "message": "Server error"}), 500

    return jsonify({"success": True, "user": user})


# ---------------------------------------------------------------
# RECOMMENDATION
# ---------------------------------------------------------------
@api.route("/recommendation", methods=["POST"])
def recommendation():
    data = _payload()
    try:
        text = _services().recommender.recommend(data.get("skill"))
    except ValidationError as e:
        return jsonify({"recommendation": e.message}), 400
    except (GenerationError, StoreError) as e:
        logger.exception("Recommendation failed: %s", e.message)
        return jsonify({"recommendation": "AI error"}), 500
    except Exception:
        logger.exception("Recommendation error")
        return jsonify({"recommendation": "AI error"}), 500

    return jsonify({"recommendation": text})
