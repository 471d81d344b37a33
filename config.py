"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from dotenv import load_dotenv

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Load variables from a local .env file if one exists
load_dotenv(os.path.join(BASE_DIR, '.env'))


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///meal_planner.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # CORS origins allowed to call /api/*
    ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.environ.get('ALLOWED_ORIGINS', 'http://localhost:5173').split(',')
        if origin.strip()
    ]

    # Seed the sample recipes on startup when the recipes table is empty
    SEED_SAMPLE_DATA = _env_flag('SEED_SAMPLE_DATA', 'true')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Upload settings
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'static', 'uploads'))
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 10 * 1024 * 1024))  # 10MB max request


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SEED_SAMPLE_DATA = _env_flag('SEED_SAMPLE_DATA', 'false')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SEED_SAMPLE_DATA = False
    LOG_LEVEL = 'WARNING'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
