import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

class Config:
    # --- Flask Core ---
    SECRET_KEY = os.getenv('SECRET_KEY', 'fallback-secret-key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///campusalert.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ENVIRONMENT = os.getenv('APP_ENV', os.getenv('FLASK_ENV', 'development'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # --- CORS ---
    FRONTEND_URL = os.getenv('FRONTEND_URL')
    CORS_ORIGINS = [o for o in ['http://localhost:3000', 'http://localhost:5173', FRONTEND_URL] if o]

    # --- JWT Authentication (Bearer header) ---
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt-secret")
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_ERROR_MESSAGE_KEY = "message"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=30)

    # --- Complaint listing ---
    DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', '10'))
    MAX_PAGE_SIZE = int(os.getenv('MAX_PAGE_SIZE', '100'))

    # --- Landing page stats ---
    # Shown instead of zeros while the store is still empty (demo mode)
    STATS_USE_FALLBACKS = os.getenv('STATS_USE_FALLBACKS', 'true').lower() == 'true'
    STATS_FALLBACKS = {
        "totalComplaints": 1250,
        "resolvedComplaints": 1180,
        "totalStudents": 850,
        "satisfactionRate": 98,
    }


class TestingConfig(Config):
    TESTING = True
    ENVIRONMENT = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    JWT_SECRET_KEY = 'test-jwt-secret-key-for-testing-only'
    LOG_LEVEL = 'WARNING'
