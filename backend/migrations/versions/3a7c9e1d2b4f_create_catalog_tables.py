"""create categories and games tables

Revision ID: 3a7c9e1d2b4f
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e1d2b4f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('slug', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_categories_slug', 'categories', ['slug'], unique=True)

    op.create_table(
        'games',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('thumbnail', sa.String(length=512), nullable=True),
        sa.Column('category_id', sa.String(length=36), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('embed_url', sa.String(length=512), nullable=False),
        sa.Column('views', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('views >= 0', name='ck_games_views_non_negative'),
    )
    op.create_index('ix_games_slug', 'games', ['slug'], unique=True)
    op.create_index('ix_games_category_id', 'games', ['category_id'])

    # Title search index; only PostgreSQL has tsvector
    if op.get_bind().dialect.name == 'postgresql':
        op.execute(
            "CREATE INDEX ix_games_title_fts ON games "
            "USING gin (to_tsvector('english', title))"
        )


def downgrade():
    if op.get_bind().dialect.name == 'postgresql':
        op.execute("DROP INDEX IF EXISTS ix_games_title_fts")
    op.drop_index('ix_games_category_id', table_name='games')
    op.drop_index('ix_games_slug', table_name='games')
    op.drop_table('games')
    op.drop_index('ix_categories_slug', table_name='categories')
    op.drop_table('categories')
