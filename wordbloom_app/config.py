# File: wordbloom_app/config.py
# Application configuration loaded from the environment.

import os
from dotenv import load_dotenv

load_dotenv()

# config.py lives in wordbloom_app/, the project root is one level up.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Local SQLite database backing the persistent store
DATABASE_PATH = os.path.join(BASE_DIR, "database", "wordbloom.db")


class Config:
    """WordBloom application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Calendar day boundaries (streaks, "reviewed today") use this zone
    APP_TIMEZONE = os.environ.get('APP_TIMEZONE', 'UTC')

    GRADE_LEVELS = ('middle1', 'middle2', 'middle3')
    DEFAULT_GRADE = 'middle1'
    DEFAULT_DAILY_GOAL = 10

    # Gemini
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY') or os.environ.get('API_KEY')
    GEMINI_TEXT_MODEL = os.environ.get('GEMINI_TEXT_MODEL', 'gemini-2.5-flash')
    GEMINI_IMAGE_MODEL = os.environ.get('GEMINI_IMAGE_MODEL', 'imagen-3.0-generate-002')
    AI_QUOTA_COOLDOWN_MINUTES = int(os.environ.get('AI_QUOTA_COOLDOWN_MINUTES', 15))
    # None keeps the per-feature delays; tests set 0
    AI_RETRY_BASE_DELAY_SECONDS = None

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes to."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
