import logging
from typing import Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from gamezee.models import Category, Game
from .fallback import ALL_CATEGORY_SLUG, DEFAULT_FALLBACK, FallbackData
from .results import CatalogResult


DEGENERATE_SLUGS = {'', ':'}
MAX_SIMILAR_GAMES = 4


def _escape_like(term):
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def is_degenerate_slug(slug) -> bool:
    return slug is None or slug.strip() in DEGENERATE_SLUGS


class Catalog:
    """Read access to games and categories, plus view counting.

    One instance per request. Nothing raised by the store escapes: every
    operation returns a CatalogResult.
    """

    def __init__(self, session, fallback: FallbackData = DEFAULT_FALLBACK,
                 configured: bool = True, logger: Optional[logging.Logger] = None,
                 similar_limit: int = 4, search_config: str = 'english'):
        self.session = session
        self.fallback = fallback
        self.configured = configured
        self.logger = logger or logging.getLogger(__name__)
        # Configuration can only lower the similar-games cap
        self.similar_limit = max(0, min(similar_limit, MAX_SIMILAR_GAMES))
        self.search_config = search_config

    def _games_query(self):
        return select(Game).options(joinedload(Game.category))

    def _fetch_games(self, stmt):
        return [g.to_dict() for g in self.session.execute(stmt).scalars().unique().all()]

    def _failed(self, action, exc, fallback=None):
        self.session.rollback()
        self.logger.error(f"[catalog] {action} failed: {exc}")
        return CatalogResult.degraded(f"{action} failed", fallback)

    def _unconfigured(self, action, fallback=None):
        self.logger.warning(f"[catalog] store credentials missing; {action} not attempted")
        return CatalogResult.degraded('store not configured', fallback)

    def get_category_by_slug(self, slug: str) -> CatalogResult:
        if slug == ALL_CATEGORY_SLUG:
            return CatalogResult.success(self.fallback.all_category_record())
        if not self.configured:
            return self._unconfigured('category lookup')
        try:
            category = self.session.execute(
                select(Category).where(Category.slug == slug)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            return self._failed(f"category lookup slug={slug}", exc)
        if category is None:
            self.logger.info(f"[catalog] no category with slug={slug}")
            return CatalogResult.missing(f"no category with slug {slug}")
        return CatalogResult.success(category.to_dict())

    def list_games_by_category(self, category_id: str) -> CatalogResult:
        if not self.configured:
            return self._unconfigured('games by category', [])
        stmt = self._games_query()
        if category_id != ALL_CATEGORY_SLUG:
            stmt = stmt.where(Game.category_id == category_id)
        stmt = stmt.order_by(Game.views.desc(), Game.title)
        try:
            return CatalogResult.success(self._fetch_games(stmt))
        except SQLAlchemyError as exc:
            return self._failed(f"games by category={category_id}", exc, [])

    def list_categories(self) -> CatalogResult:
        if not self.configured:
            return self._unconfigured('category listing', self.fallback.category_list())
        try:
            categories = self.session.execute(
                select(Category).order_by(Category.name)
            ).scalars().all()
        except SQLAlchemyError as exc:
            return self._failed('category listing', exc, self.fallback.category_list())
        return CatalogResult.success([c.to_dict() for c in categories])

    def list_popular_games(self, limit: int = 8) -> CatalogResult:
        if not self.configured:
            return self._unconfigured('popular games', [])
        stmt = self._games_query().order_by(Game.views.desc(), Game.title).limit(limit)
        try:
            games = self._fetch_games(stmt)
        except SQLAlchemyError as exc:
            return self._failed('popular games', exc, [])
        self.logger.info(f"[catalog] fetched {len(games)} popular games")
        return CatalogResult.success(games)

    def get_game_by_slug(self, slug: str) -> CatalogResult:
        """Look up one game.

        Bad slugs, missing credentials and store errors all degrade to the
        placeholder game carrying the requested slug. Only a slug the store
        does not know is reported as not found.
        """
        if is_degenerate_slug(slug):
            self.logger.error(f"[catalog] invalid game slug {slug!r}")
            return CatalogResult.degraded('invalid slug', self.fallback.game_for(slug or ''))
        if not self.configured:
            return self._unconfigured(f"game lookup slug={slug}", self.fallback.game_for(slug))
        try:
            game = self.session.execute(
                self._games_query().where(Game.slug == slug)
            ).scalars().unique().one_or_none()
        except SQLAlchemyError as exc:
            return self._failed(f"game lookup slug={slug}", exc, self.fallback.game_for(slug))
        if game is None:
            self.logger.info(f"[catalog] no game with slug={slug}")
            return CatalogResult.missing(f"no game with slug {slug}")
        return CatalogResult.success(game.to_dict())

    def list_similar_games(self, game_id: str, category_id: str,
                           limit: Optional[int] = None) -> CatalogResult:
        if not self.configured:
            return self._unconfigured('similar games', [])
        if not game_id or not category_id:
            self.logger.error(f"[catalog] similar games needs ids, got game={game_id!r} category={category_id!r}")
            return CatalogResult.success([])
        limit = self.similar_limit if limit is None else min(limit, self.similar_limit)
        if limit < 1:
            return CatalogResult.success([])
        stmt = (
            self._games_query()
            .where(Game.category_id == category_id, Game.id != game_id)
            .order_by(Game.views.desc(), Game.title)
            .limit(limit)
        )
        try:
            return CatalogResult.success(self._fetch_games(stmt))
        except SQLAlchemyError as exc:
            return self._failed(f"similar games game={game_id}", exc, [])

    def _title_matches(self, query: str, dialect: str):
        if dialect == 'postgresql':
            return func.to_tsvector(self.search_config, Game.title).op('@@')(
                func.websearch_to_tsquery(self.search_config, query))
        return and_(*[Game.title.ilike(f"%{_escape_like(t)}%", escape="\\") for t in query.split()])

    def build_search_statement(self, query: str, category_id: Optional[str], dialect: str):
        """Title search narrowed by category, most viewed first."""
        stmt = self._games_query().where(self._title_matches(query, dialect))
        if category_id and category_id != ALL_CATEGORY_SLUG:
            stmt = stmt.where(Game.category_id == category_id)
        return stmt.order_by(Game.views.desc(), Game.title)

    def search_games(self, query: str, category_id: Optional[str] = None) -> CatalogResult:
        query = (query or '').strip()
        if not query:
            return CatalogResult.success([])
        if not self.configured:
            return self._unconfigured('search', [])
        try:
            stmt = self.build_search_statement(query, category_id, self.session.get_bind().dialect.name)
            games = self._fetch_games(stmt)
        except SQLAlchemyError as exc:
            return self._failed(f"search q={query!r}", exc, [])
        return CatalogResult.success(games)

    def increment_views(self, game: dict) -> CatalogResult:
        """Add one view to a stored game and return the new count."""
        if self.fallback.is_fallback_game(game):
            return CatalogResult.degraded('placeholder game has no stored views')
        if not self.configured:
            return self._unconfigured('view count update')
        game_id = game.get('id')
        try:
            result = self.session.execute(
                update(Game)
                .where(Game.id == game_id)
                .values(views=Game.views + 1)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.rollback()
                return CatalogResult.missing(f"no game with id {game_id}")
            self.session.commit()
            views = self.session.execute(
                select(Game.views).where(Game.id == game_id)
            ).scalar_one()
        except SQLAlchemyError as exc:
            return self._failed(f"view count update game={game_id}", exc)
        return CatalogResult.success(views)
