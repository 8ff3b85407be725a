from gamezee import db
from datetime import datetime, timezone
import uuid


def generate_id():
    """Generate a string identifier for catalog rows."""
    return str(uuid.uuid4())


def _utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    if not value:
        return None
    # SQLite drops the offset; stored values are always UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class Category(db.Model):
    __tablename__ = 'categories'
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(64), nullable=False)
    slug = db.Column(db.String(64), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    games = db.relationship('Game', back_populates='category')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'created_at': _isoformat(self.created_at),
        }


class Game(db.Model):
    __tablename__ = 'games'
    __table_args__ = (
        db.CheckConstraint('views >= 0', name='ck_games_views_non_negative'),
    )
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default='')
    thumbnail = db.Column(db.String(512), nullable=True)
    category_id = db.Column(db.String(36), db.ForeignKey('categories.id'), nullable=False, index=True)
    tags = db.Column(db.JSON, nullable=False, default=list)  # unordered set of short strings
    embed_url = db.Column(db.String(512), nullable=False)
    views = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
    category = db.relationship('Category', back_populates='games')

    def to_dict(self, include_category=True):
        data = {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'description': self.description,
            'thumbnail': self.thumbnail,
            'category_id': self.category_id,
            'tags': sorted(set(self.tags or [])),
            'embed_url': self.embed_url,
            'views': self.views,
            'created_at': _isoformat(self.created_at),
            'updated_at': _isoformat(self.updated_at),
        }
        if include_category:
            data['category'] = self.category.to_dict() if self.category else None
        return data
