from datetime import datetime


CATEGORY_EMOJI = {
    'action': '🔥',
    'adventure': '🗺️',
    'puzzle': '🧩',
    'racing': '🏎️',
    'sports': '⚽',
    'strategy': '♟️',
}
DEFAULT_EMOJI = '🎮'


def category_emoji(slug):
    return CATEGORY_EMOJI.get(slug, DEFAULT_EMOJI)


def format_date(value):
    """Render an ISO timestamp as e.g. 'March 4, 2025'. Unparseable input is returned as-is."""
    if not value:
        return ''
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return f"{value:%B} {value.day}, {value.year}"


def pluralize_games(count):
    return 'Game' if count == 1 else 'Games'


def register_template_helpers(app):
    app.add_template_filter(category_emoji)
    app.add_template_filter(format_date)
    app.add_template_filter(pluralize_games)
    app.jinja_env.globals['site_name'] = 'Gamezee'
