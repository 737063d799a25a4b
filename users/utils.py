import logging
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError

from extensions import db
from users.models import User, ROLES
from utils.errors import ValidationError, Conflict
from utils.http import optional_str

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

DEMO_ACCOUNTS = [
    {
        "name": "Demo Student",
        "email": "student@demo.com",
        "password": "demo123",
        "role": "student",
        "department": "Computer Science",
        "roll_number": "CS2024001",
    },
    {
        "name": "Admin User",
        "email": "admin@demo.com",
        "password": "admin123",
        "role": "admin",
        "department": "Administration",
        "roll_number": None,
    },
]


def generate_jwt(user):
    # expiry comes from JWT_ACCESS_TOKEN_EXPIRES (30 days)
    return create_access_token(identity=str(user.id))


def normalize_email(email):
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


def register_user(name, email, password, role=None, department=None, roll_number=None):
    for field, value in (("name", name), ("email", email), ("password", password),
                         ("department", department), ("rollNumber", roll_number)):
        optional_str(value, field)

    name = (name or "").strip()
    email = normalize_email(email)
    role = role or "student"

    if not name or not email or not password:
        raise ValidationError("Name, email and password are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if role not in ROLES:
        raise ValidationError("Invalid role")

    if User.query.filter_by(email=email).first():
        raise Conflict("User already exists")

    user = User(
        name=name,
        email=email,
        role=role,
        department=department,
        roll_number=roll_number if role == "student" else None,
    )
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # lost the race against a concurrent registration
        db.session.rollback()
        raise Conflict("User already exists")

    logger.info("Registered %s user id=%s", user.role, user.id)
    return user


def authenticate(email, password):
    """Return the matching user or None."""
    if not isinstance(password, str):
        return None
    user = User.query.filter_by(email=normalize_email(email)).first()
    if user and user.check_password(password):
        return user
    return None


def seed_demo_accounts():
    """Create the demo student/admin pair; existing accounts are left alone."""
    created = []
    for account in DEMO_ACCOUNTS:
        if User.query.filter_by(email=account["email"]).first():
            continue
        user = User(
            name=account["name"],
            email=account["email"],
            role=account["role"],
            department=account["department"],
            roll_number=account["roll_number"],
        )
        user.set_password(account["password"])
        db.session.add(user)
        created.append(account["email"])

    if created:
        db.session.commit()
        logger.info("Seeded demo accounts: %s", ", ".join(created))
    return created
