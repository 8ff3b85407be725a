from gamezee.models import Category, Game


SEED_CATEGORIES = [
    ('Action', 'action'),
    ('Adventure', 'adventure'),
    ('Puzzle', 'puzzle'),
    ('Racing', 'racing'),
    ('Sports', 'sports'),
    ('Strategy', 'strategy'),
]

# (title, slug, category slug, tags, views)
SEED_GAMES = [
    ('Pixel Blaster', 'pixel-blaster', 'action', ['shooter', 'retro'], 1520),
    ('Ninja Run', 'ninja-run', 'action', ['runner', 'platformer'], 980),
    ('Lost Temple', 'lost-temple', 'adventure', ['exploration'], 640),
    ('Sky Quest', 'sky-quest', 'adventure', ['flying', 'exploration'], 410),
    ('Block Drop', 'block-drop', 'puzzle', ['tetromino', 'classic'], 2210),
    ('Word Grid', 'word-grid', 'puzzle', ['words'], 730),
    ('Turbo Drift', 'turbo-drift', 'racing', ['cars', '3d'], 1880),
    ('Moto Hill', 'moto-hill', 'racing', ['bikes', 'physics'], 1105),
    ('Penalty Kick', 'penalty-kick', 'sports', ['football'], 860),
    ('Hoop Shot', 'hoop-shot', 'sports', ['basketball'], 515),
    ('Tower Siege', 'tower-siege', 'strategy', ['tower-defense'], 1340),
    ('Kingdom Builder', 'kingdom-builder', 'strategy', ['city-building', 'medieval'], 295),
]


def seed_catalog(session):
    """Insert the demo categories and games. Returns (categories, games) counts."""
    categories = {}
    for name, slug in SEED_CATEGORIES:
        category = Category(name=name, slug=slug)
        session.add(category)
        categories[slug] = category
    session.flush()

    for title, slug, category_slug, tags, views in SEED_GAMES:
        session.add(Game(
            title=title,
            slug=slug,
            description=f'Play {title} right in your browser. No downloads required!',
            thumbnail=f'https://placehold.co/400x300?text={slug}',
            category_id=categories[category_slug].id,
            tags=tags,
            embed_url=f'https://example.com/embed/{slug}',
            views=views,
        ))
    session.commit()
    return len(SEED_CATEGORIES), len(SEED_GAMES)
