"""
CampusAlert - Test Configuration and Fixtures
"""
import pytest
from faker import Faker
from flask_jwt_extended import create_access_token

from app import create_app
from config import TestingConfig
from extensions import db
from users.models import User

fake = Faker()


@pytest.fixture
def app():
    """Fresh app and in-memory schema for each test"""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Factory for persisted users"""
    def _make_user(role="student", name=None, email=None, password="password123", **extra):
        user = User(
            name=name or fake.name(),
            email=email or fake.unique.email(),
            role=role,
            department=extra.get("department", "Computer Science"),
            roll_number=extra.get("roll_number", fake.bothify("CS####") if role == "student" else None),
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def student(make_user):
    return make_user(role="student", name="Test Student")


@pytest.fixture
def other_student(make_user):
    return make_user(role="student", name="Other Student")


@pytest.fixture
def admin(make_user):
    return make_user(role="admin", name="Test Admin", department="Administration")


@pytest.fixture
def headers_for(app):
    """Bearer headers for a given user"""
    def _headers_for(user):
        token = create_access_token(identity=str(user.id))
        return {"Authorization": f"Bearer {token}"}
    return _headers_for


@pytest.fixture
def create_complaint(client, headers_for):
    """Create a complaint through the API and return the response JSON"""
    def _create(user, **overrides):
        payload = {
            "title": "AC broken",
            "description": "Hostel room AC not working",
            "category": "Hostel",
        }
        payload.update(overrides)
        response = client.post("/api/complaints", json=payload, headers=headers_for(user))
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create
