import threading

from gamezee.models import Game
from gamezee.services.catalog import fetch_pair


def test_home_lists_trending_and_categories(client, seeded):
    res = client.get('/')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'Trending Games' in html
    assert 'Block Drop' in html
    assert 'Strategy' in html
    # Only the top 8 by views are shown
    assert 'Kingdom Builder' not in html


def test_home_without_store_uses_fallback_categories(unconfigured_client):
    res = unconfigured_client.get('/')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    for name in ('Action', 'Adventure', 'Puzzle', 'Racing', 'Sports', 'Strategy'):
        assert name in html


def test_category_page(client, seeded):
    res = client.get('/category/racing')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'Racing Games' in html
    assert '2 Racing Games' in html
    assert 'Turbo Drift' in html
    assert 'Block Drop' not in html


def test_all_category_page(client, seeded):
    res = client.get('/category/all')
    assert res.status_code == 200
    assert f"{len(seeded['games'])} All Games" in res.get_data(as_text=True)


def test_unknown_category_is_404(client, seeded):
    res = client.get('/category/board-games')
    assert res.status_code == 404
    assert 'Game Not Found' in res.get_data(as_text=True)


def test_game_page_counts_view(client, seeded):
    before = Game.query.filter_by(slug='moto-hill').first().views
    res = client.get('/game/moto-hill')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'Moto Hill' in html
    assert 'Similar Games' in html
    assert 'Turbo Drift' in html
    assert Game.query.filter_by(slug='moto-hill').first().views == before + 1


def test_game_page_unknown_slug_is_404(client, seeded):
    assert client.get('/game/not-a-game').status_code == 404


def test_game_page_degenerate_slug_is_404(client, seeded):
    assert client.get('/game/:').status_code == 404


def test_game_page_without_store_shows_placeholder(unconfigured_client):
    res = unconfigured_client.get('/game/ninja-run')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'Fallback Game' in html
    assert 'placeholder data' in html
    assert 'Similar Games' not in html


def test_search_page(client, seeded):
    res = client.get('/search?q=hoop')
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'Showing results for &#34;hoop&#34;' in html
    assert '1 Game Found' in html
    assert 'Hoop Shot' in html


def test_search_page_with_category(client, seeded):
    sports = seeded['categories']['sports']
    res = client.get(f'/search?q=hoop&category={sports}')
    html = res.get_data(as_text=True)
    assert 'Hoop Shot' in html
    assert 'in Sports' in html

    res = client.get(f"/search?q=hoop&category={seeded['categories']['racing']}")
    assert '0 Games Found' in res.get_data(as_text=True)


def test_search_page_empty_query(client, seeded):
    res = client.get('/search')
    assert res.status_code == 200
    assert 'Enter a search term to find games' in res.get_data(as_text=True)


def test_unknown_route_renders_not_found(client):
    res = client.get('/nope/nothing')
    assert res.status_code == 404
    assert 'Back to Home' in res.get_data(as_text=True)


def test_fetch_pair_runs_on_worker_threads(unconfigured_app):
    seen = []

    def categories(catalog):
        seen.append(threading.get_ident())
        return catalog.list_categories().unwrap_or([])

    def popular(catalog):
        seen.append(threading.get_ident())
        return catalog.list_popular_games().unwrap_or([])

    cats, games = fetch_pair(categories, popular)
    assert len(cats) == 6
    assert games == []
    assert threading.get_ident() not in seen


def test_fetch_pair_sequential_when_disabled(flask_app, seeded):
    seen = []

    def categories(catalog):
        seen.append(threading.get_ident())
        return catalog.list_categories().value

    games, cats = fetch_pair(lambda catalog: catalog.list_popular_games(2).value, categories)
    assert [g['slug'] for g in games] == ['block-drop', 'turbo-drift']
    assert len(cats) == 6
    assert seen == [threading.get_ident()]
