# server/mindvault/config.py

import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

DEV_SECRET_KEY = "dev-secret-change-this-in-production"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY") or DEV_SECRET_KEY
    FLASK_ENV = "production"

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or "sqlite:///mindvault.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true"

    # Tokens
    JWT_ALGORITHM = "HS256"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)

    # Credentials
    BCRYPT_LOG_ROUNDS = int(os.getenv("BCRYPT_LOG_ROUNDS", 12))
    MIN_PASSWORD_LENGTH = 6

    # Folders and sharing
    DEFAULT_FOLDER_COLOR = "#3B82F6"
    SHARE_HASH_LENGTH = int(os.getenv("SHARE_HASH_LENGTH", 10))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,https://mind-valut-frontend.vercel.app"
        ).split(",")
        if origin.strip()
    ]

    SERVICE_NAME = "mindvault-backend"
    SERVICE_VERSION = "1.0.0"


class DevelopmentConfig(Config):
    FLASK_ENV = "development"
    DEBUG = True


class ProductionConfig(Config):
    FLASK_ENV = "production"
    DEBUG = False


class TestingConfig(Config):
    FLASK_ENV = "testing"
    TESTING = True
    SECRET_KEY = "test-secret-key-for-hs256-signing-only"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    BCRYPT_LOG_ROUNDS = 4
    AUTO_CREATE_TABLES = True


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(name=None):
    """Resolve a configuration class from an environment name"""
    if name is None:
        name = os.getenv("FLASK_ENV", "production")
    if not isinstance(name, str):
        return name
    return config_by_name.get(name.lower(), ProductionConfig)
