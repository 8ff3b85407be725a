from flask import Blueprint, jsonify, request, current_app
from gamezee.services.catalog import CatalogResult, get_catalog


catalog_api = Blueprint('catalog_api', __name__)


def _respond(result: CatalogResult):
    """Map a catalog result onto an HTTP response.

    Fallback data is still served with 200 so clients can render it; the
    body's ``status`` tells them it is not live data.
    """
    if result.ok:
        code = 200
    elif result.not_found:
        code = 404
    elif result.value is not None:
        code = 200
    else:
        code = 503
    return jsonify(result.to_dict()), code


@catalog_api.route('/categories', methods=['GET'])
def list_categories():
    return _respond(get_catalog().list_categories())


@catalog_api.route('/categories/<string:slug>', methods=['GET'])
def get_category(slug):
    return _respond(get_catalog().get_category_by_slug(slug))


@catalog_api.route('/categories/<string:slug>/games', methods=['GET'])
def list_category_games(slug):
    catalog = get_catalog()
    category = catalog.get_category_by_slug(slug)
    if not category.ok:
        return _respond(category)
    return _respond(catalog.list_games_by_category(category.value['id']))


@catalog_api.route('/games', methods=['GET'])
def list_popular_games():
    default_limit = int(current_app.config.get('POPULAR_GAMES_LIMIT', 8))
    try:
        limit = int(request.args.get('limit', default_limit))
    except (TypeError, ValueError):
        return jsonify({'status': 'error', 'error': 'limit must be an integer'}), 400
    if limit < 1:
        return jsonify({'status': 'error', 'error': 'limit must be positive'}), 400
    return _respond(get_catalog().list_popular_games(limit))


@catalog_api.route('/games/<string:slug>', methods=['GET'])
def get_game(slug):
    return _respond(get_catalog().get_game_by_slug(slug))


@catalog_api.route('/games/<string:slug>/similar', methods=['GET'])
def list_similar_games(slug):
    catalog = get_catalog()
    game = catalog.get_game_by_slug(slug)
    if not game.ok:
        # No similar games for unknown or placeholder records
        return _respond(game if game.not_found else CatalogResult.degraded(game.error, []))
    return _respond(catalog.list_similar_games(game.value['id'], game.value['category_id']))


@catalog_api.route('/search', methods=['GET'])
def search_games():
    query = request.args.get('q', '')
    category_id = request.args.get('category') or None
    return _respond(get_catalog().search_games(query, category_id))


@catalog_api.route('/games/<string:slug>/views', methods=['POST'])
def increment_views(slug):
    catalog = get_catalog()
    game = catalog.get_game_by_slug(slug)
    if not game.ok:
        return _respond(game if game.not_found else CatalogResult.degraded(game.error))
    return _respond(catalog.increment_views(game.value))
