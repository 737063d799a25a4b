from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, current_user

from users.utils import register_user, authenticate, generate_jwt, seed_demo_accounts
from utils.errors import ValidationError, Unauthenticated
from utils.http import json_body

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


def _user_with_token(user):
    payload = user.to_dict()
    payload["token"] = generate_jwt(user)
    return payload


# ✅ Register
@auth_bp.route('/register', methods=['POST'])
def register():
    data = json_body()

    user = register_user(
        name=data.get('name'),
        email=data.get('email'),
        password=data.get('password'),
        role=data.get('role'),
        department=data.get('department'),
        roll_number=data.get('rollNumber'),
    )
    return jsonify(_user_with_token(user)), 201


# ✅ Login
@auth_bp.route('/login', methods=['POST'])
def login():
    data = json_body()
    email = data.get('email')
    password = data.get('password')

    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ValidationError("Email and password are required")

    user = authenticate(email, password)
    if not user:
        raise Unauthenticated("Invalid email or password")

    return jsonify(_user_with_token(user)), 200


# ✅ Current user profile
@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    return jsonify(current_user.to_dict()), 200


# ✅ Demo accounts (idempotent)
@auth_bp.route('/seed', methods=['POST'])
def seed():
    seed_demo_accounts()
    return jsonify({"message": "Demo accounts created successfully"}), 200
