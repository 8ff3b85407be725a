from flask import Blueprint, abort, current_app, render_template, request
from gamezee.services.catalog import fetch_pair, get_catalog, is_degenerate_slug

pages = Blueprint('pages', __name__)


@pages.route('/')
def home():
    limit = int(current_app.config.get('POPULAR_GAMES_LIMIT', 8))
    games, categories = fetch_pair(
        lambda catalog: catalog.list_popular_games(limit).unwrap_or([]),
        lambda catalog: catalog.list_categories().unwrap_or([]),
    )
    return render_template('index.html', games=games, categories=categories)


@pages.route('/category/<string:slug>')
def category_page(slug):
    result = get_catalog().get_category_by_slug(slug)
    if not result.ok:
        abort(404)
    category = result.value
    games, categories = fetch_pair(
        lambda catalog: catalog.list_games_by_category(category['id']).unwrap_or([]),
        lambda catalog: catalog.list_categories().unwrap_or([]),
    )
    return render_template(
        'category.html',
        category=category,
        games=games,
        categories=categories,
        related_categories=[c for c in categories if c['id'] != category['id']],
    )


@pages.route('/game/<string:slug>')
def game_page(slug):
    if is_degenerate_slug(slug):
        abort(404)
    catalog = get_catalog()
    result = catalog.get_game_by_slug(slug)
    if result.not_found:
        abort(404)
    game = result.value
    similar_games = []
    if result.ok:
        views = catalog.increment_views(game)
        if views.ok:
            game['views'] = views.value
        else:
            current_app.logger.warning(f"[game] view count not updated slug={slug}: {views.error}")
        similar_games = catalog.list_similar_games(game['id'], game['category_id']).unwrap_or([])
    return render_template(
        'game.html',
        game=game,
        similar_games=similar_games,
        is_placeholder=result.unavailable,
    )


@pages.route('/search')
def search_page():
    query = request.args.get('q', '')
    category_id = request.args.get('category') or None
    results, categories = fetch_pair(
        lambda catalog: catalog.search_games(query, category_id).unwrap_or([]),
        lambda catalog: catalog.list_categories().unwrap_or([]),
    )
    selected_category = None
    if category_id:
        selected_category = next((c for c in categories if c['id'] == category_id), None)
    return render_template(
        'search.html',
        query=query,
        games=results,
        categories=categories,
        category_id=category_id,
        selected_category=selected_category,
    )


@pages.app_errorhandler(404)
def not_found(error):
    if request.path.startswith('/api/'):
        return {'status': 'not_found', 'data': None, 'error': 'not found'}, 404
    return render_template('not_found.html'), 404
