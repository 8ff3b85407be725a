"""Catalog access: games and categories with fallback data.

Routes build a Catalog per request through ``get_catalog`` and decide
themselves how to treat not-found and unavailable results.
"""

from concurrent.futures import ThreadPoolExecutor

from flask import current_app

from gamezee import db
from .catalog import MAX_SIMILAR_GAMES, Catalog, is_degenerate_slug
from .fallback import ALL_CATEGORY_SLUG, DEFAULT_FALLBACK, FALLBACK_GAME_ID, FallbackData
from .results import CatalogResult


def store_configured(config) -> bool:
    return bool(config.get('DATABASE_URL') and config.get('DATABASE_KEY'))


def get_catalog() -> Catalog:
    app = current_app
    return Catalog(
        db.session,
        fallback=app.extensions.get('catalog_fallback', DEFAULT_FALLBACK),
        configured=store_configured(app.config),
        logger=app.logger,
        similar_limit=int(app.config.get('SIMILAR_GAMES_LIMIT', 4)),
        search_config=app.config.get('SEARCH_TEXT_CONFIG', 'english'),
    )


def fetch_pair(first, second):
    """Run two independent catalog calls, each with its own catalog.

    Each worker pushes its own app context, so it gets its own session.
    Set CATALOG_PARALLEL_FETCH to False to run them in order on one session.
    """
    app = current_app._get_current_object()
    if not app.config.get('CATALOG_PARALLEL_FETCH', True):
        catalog = get_catalog()
        return first(catalog), second(catalog)

    def run(fn):
        with app.app_context():
            return fn(get_catalog())

    with ThreadPoolExecutor(max_workers=2) as pool:
        first_future = pool.submit(run, first)
        second_future = pool.submit(run, second)
        return first_future.result(), second_future.result()


__all__ = [
    'ALL_CATEGORY_SLUG',
    'Catalog',
    'CatalogResult',
    'DEFAULT_FALLBACK',
    'FALLBACK_GAME_ID',
    'FallbackData',
    'MAX_SIMILAR_GAMES',
    'fetch_pair',
    'get_catalog',
    'is_degenerate_slug',
    'store_configured',
]
