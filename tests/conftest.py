import pytest

from wordbloom_app import create_app, db
from wordbloom_app.config import Config
from wordbloom_app.modules.vocabulary.schemas import WordData


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    APP_TIMEZONE = 'UTC'
    GEMINI_API_KEY = None
    AI_RETRY_BASE_DELAY_SECONDS = 0
    LOG_DIR = None


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def learner(app):
    """A finished first-run setup for a middle1 learner with a goal of 5."""
    from wordbloom_app.modules.user_profile.services.settings_service import SettingsService

    return SettingsService.complete_setup({'username': 'mina', 'grade': 'middle1', 'daily_goal': 5})


def make_word(word_id, term=None, grade='middle1', meaning=None, is_custom=False, unit=None):
    """Plain ``WordData`` for the pure logic tests."""
    return WordData(
        id=word_id,
        term=term or f'term-{word_id}',
        part_of_speech='명사',
        meaning=meaning or f'meaning-{word_id}',
        example_sentence=f'This is {term or word_id}.',
        grade_level=grade,
        unit=unit,
        is_custom=is_custom,
    )


@pytest.fixture
def word_factory():
    return make_word
