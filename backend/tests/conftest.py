import os
import sys
import pytest

# Ensure the backend root (containing the `gamezee` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from sqlalchemy.exc import OperationalError

from gamezee import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    DATABASE_URL = 'sqlite://'
    DATABASE_KEY = 'test-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['http://localhost:3000']
    POPULAR_GAMES_LIMIT = 8
    SIMILAR_GAMES_LIMIT = 4
    SEARCH_TEXT_CONFIG = 'english'
    # In-memory SQLite is a single connection; keep page fetches on one thread
    CATALOG_PARALLEL_FETCH = False


class UnconfiguredConfig(TestConfig):
    DATABASE_URL = None
    DATABASE_KEY = None
    CATALOG_PARALLEL_FETCH = True


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import gamezee.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def seeded(flask_app):
    """Demo catalog; returns {'categories': {slug: id}, 'games': {slug: id}}."""
    from gamezee.models import Category, Game
    from gamezee.seed import seed_catalog
    seed_catalog(db.session)
    return {
        'categories': {c.slug: c.id for c in Category.query.all()},
        'games': {g.slug: g.id for g in Game.query.all()},
    }


@pytest.fixture()
def catalog(flask_app):
    from gamezee.services.catalog import get_catalog
    return get_catalog()


@pytest.fixture()
def unconfigured_app():
    application = create_app(UnconfiguredConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def unconfigured_client(unconfigured_app):
    return unconfigured_app.test_client()


class BrokenSession:
    """Stands in for a session whose store connection is down."""

    def __init__(self):
        self.executed = 0
        self.rollbacks = 0

    def execute(self, *args, **kwargs):
        self.executed += 1
        raise OperationalError('SELECT 1', {}, Exception('connection refused'))

    def rollback(self):
        self.rollbacks += 1

    def commit(self):
        pass

    def get_bind(self):
        return db.engine


@pytest.fixture()
def broken_session():
    return BrokenSession()
