from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config, fallback=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    # Only the JSON API is meant for cross-origin clients
    CORS(flask_app, resources={r'/api/*': {'origins': flask_app.config.get('CORS_ORIGINS', [])}})

    from gamezee.services.catalog import DEFAULT_FALLBACK, store_configured
    flask_app.extensions['catalog_fallback'] = fallback or DEFAULT_FALLBACK
    if not store_configured(flask_app.config):
        flask_app.logger.warning("[startup] DATABASE_URL/DATABASE_KEY not set; serving fallback catalog data")

    from gamezee.pages import pages
    flask_app.register_blueprint(pages)

    from gamezee.api.catalog import catalog_api
    flask_app.register_blueprint(catalog_api, url_prefix='/api')

    from gamezee.templating import register_template_helpers
    register_template_helpers(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the catalog."""
        from gamezee.seed import seed_catalog
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            categories, games = seed_catalog(db.session)
            click.echo(f'Catalog has been reset: {categories} categories, {games} games.')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
