from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple
import copy


FALLBACK_GAME_ID = 'fallback-id'
ALL_CATEGORY_SLUG = 'all'


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _category(id_, name, slug, created_at):
    return {'id': id_, 'name': name, 'slug': slug, 'created_at': created_at}


def _default_categories():
    now = _now_iso()
    return tuple(
        _category(str(i), name, name.lower(), now)
        for i, name in enumerate(
            ['Action', 'Adventure', 'Puzzle', 'Racing', 'Sports', 'Strategy'], start=1)
    )


def _default_game():
    now = _now_iso()
    return {
        'id': FALLBACK_GAME_ID,
        'title': 'Fallback Game',
        'slug': 'fallback-game',
        'description': 'This is a fallback game used for testing when the database connection fails.',
        'thumbnail': 'https://i.imgur.com/uHE8xGu.png',
        'category_id': 'fallback-category',
        'tags': ['fallback', 'test'],
        'embed_url': 'https://www.addictinggames.com/embed/html5-games/24614',
        'views': 100,
        'created_at': now,
        'updated_at': now,
        'category': _category('fallback-category', 'Test Category', 'test-category', now),
    }


def _default_all_category():
    return _category(ALL_CATEGORY_SLUG, 'All', ALL_CATEGORY_SLUG, _now_iso())


@dataclass(frozen=True)
class FallbackData:
    """Static records served when the store cannot be reached.

    Handed to each Catalog; accessors return copies so callers can't
    mutate the shared records.
    """
    categories: Tuple[dict, ...] = field(default_factory=_default_categories)
    game: dict = field(default_factory=_default_game)
    all_category: dict = field(default_factory=_default_all_category)

    def category_list(self):
        return [dict(c) for c in self.categories]

    def game_for(self, slug):
        record = copy.deepcopy(self.game)
        record['slug'] = slug
        return record

    def all_category_record(self):
        return dict(self.all_category)

    def is_fallback_game(self, record) -> bool:
        return bool(record) and record.get('id') == self.game['id']


DEFAULT_FALLBACK = FallbackData()
