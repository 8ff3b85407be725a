from gamezee.models import Category, Game
from gamezee.seed import SEED_CATEGORIES, SEED_GAMES


def test_db_reset_seeds_catalog(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['db-reset'])
    assert result.exit_code == 0
    assert 'Catalog has been reset' in result.output
    assert Category.query.count() == len(SEED_CATEGORIES)
    assert Game.query.count() == len(SEED_GAMES)
    assert all(g.category is not None for g in Game.query.all())
