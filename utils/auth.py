# utils/auth.py
from functools import wraps

from flask import jsonify
from flask_jwt_extended import jwt_required, current_user

from extensions import db, jwt
from users.models import User
from utils.errors import Forbidden


# -------- JWT callbacks (bearer token -> User) --------
@jwt.user_lookup_loader
def load_user_from_token(_jwt_header, jwt_data):
    identity = jwt_data.get("sub")
    try:
        return db.session.get(User, int(identity))
    except (TypeError, ValueError):
        return None


@jwt.user_lookup_error_loader
def user_not_found(_jwt_header, _jwt_data):
    return jsonify({"message": "Not authorized, user not found"}), 401


@jwt.expired_token_loader
def token_expired(_jwt_header, _jwt_data):
    return jsonify({"message": "Not authorized, token expired"}), 401


@jwt.invalid_token_loader
def token_invalid(reason):
    return jsonify({"message": f"Not authorized, token failed: {reason}"}), 401


@jwt.unauthorized_loader
def token_missing(reason):
    return jsonify({"message": "Not authorized, no token"}), 401


# -------- Capability checks --------
def is_admin(user):
    return user is not None and user.role == "admin"


def can_access(user, complaint):
    """Admins see everything, students only what they own."""
    return is_admin(user) or complaint.user_id == user.id


def ensure_admin(user):
    if not is_admin(user):
        raise Forbidden("Not authorized as an admin")


def role_required(*roles):
    """Route decorator: valid bearer token and one of ``roles``."""
    def wrapper(fn):
        @wraps(fn)
        @jwt_required()
        def decorator(*args, **kwargs):
            if current_user.role not in roles:
                raise Forbidden("Not authorized as an admin" if roles == ("admin",) else "Forbidden")
            return fn(*args, **kwargs)
        return decorator
    return wrapper


admin_required = role_required("admin")
