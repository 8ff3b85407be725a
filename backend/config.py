import os

from sqlalchemy.engine import make_url


def build_database_uri(url, key=None):
    """Combine the store endpoint and access key into a SQLAlchemy URI.

    Returns None when no endpoint is set. Hosted providers hand out
    ``postgres://`` URLs, which SQLAlchemy no longer accepts.
    """
    if not url:
        return None
    if url.startswith('postgres://'):
        url = 'postgresql://' + url[len('postgres://'):]
    parsed = make_url(url)
    if key and parsed.password is None and parsed.get_backend_name() != 'sqlite':
        parsed = parsed.set(password=key)
    return parsed.render_as_string(hide_password=False)


def _split_origins(value):
    return [o.strip() for o in value.split(',') if o.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Store endpoint and access key. Without both, the catalog serves fallback data.
    DATABASE_URL = os.environ.get('DATABASE_URL')
    DATABASE_KEY = os.environ.get('DATABASE_KEY')
    SQLALCHEMY_DATABASE_URI = build_database_uri(DATABASE_URL, DATABASE_KEY) or 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = _split_origins(os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:3000,http://127.0.0.1:3000',
    ))
    # Home page "trending" list size
    POPULAR_GAMES_LIMIT = int(os.environ.get('POPULAR_GAMES_LIMIT', '8'))
    # Can lower the similar-games list below 4, never raise it
    SIMILAR_GAMES_LIMIT = int(os.environ.get('SIMILAR_GAMES_LIMIT', '4'))
    # PostgreSQL text search configuration used for title search
    SEARCH_TEXT_CONFIG = os.environ.get('SEARCH_TEXT_CONFIG', 'english')
    # Fetch the two independent lists of a page on worker threads
    CATALOG_PARALLEL_FETCH = os.environ.get('CATALOG_PARALLEL_FETCH', '1') != '0'
