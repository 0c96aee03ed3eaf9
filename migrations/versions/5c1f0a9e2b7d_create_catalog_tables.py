"""Create catalog tables

Revision ID: 5c1f0a9e2b7d
Revises: 
Create Date: 2026-10-19 09:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1f0a9e2b7d'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table('library',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('scope', sa.String(length=255), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('scope')
    )
    op.create_index('idx_library_active', 'library', ['active'])

    op.create_table('author',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('library_id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(['library_id'], ['library.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_author_library_name', 'author', ['library_id', 'last_name', 'first_name'])

    # Series, stories and volumes share the same named entity layout
    for table in ('series', 'story'):
        op.create_table(table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('library_id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=500), nullable=False),
            sa.Column('copyright', sa.String(length=50), nullable=True),
            sa.Column('active', sa.Boolean(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            *timestamps(),
            sa.ForeignKeyConstraint(['library_id'], ['library.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('library_id', 'name', name=f'uix_{table}_library_name')
        )
        op.create_index(f'idx_{table}_library_id', table, ['library_id'])

    op.create_table('volume',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('library_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=500), nullable=False),
        sa.Column('copyright', sa.String(length=50), nullable=True),
        sa.Column('isbn', sa.String(length=20), nullable=True),
        sa.Column('google_id', sa.String(length=255), nullable=True),
        sa.Column('location', sa.String(length=50), nullable=True),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(['library_id'], ['library.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('library_id', 'name', name='uix_volume_library_name')
    )
    op.create_index('idx_volume_library_id', 'volume', ['library_id'])
    op.create_index('idx_volume_isbn', 'volume', ['isbn'])

    # Join tables
    for table, parent, child in (
        ('authors_series', 'author', 'series'),
        ('authors_stories', 'author', 'story'),
        ('authors_volumes', 'author', 'volume'),
    ):
        op.create_table(table,
            sa.Column(f'{parent}_id', sa.Integer(), nullable=False),
            sa.Column(f'{child}_id', sa.Integer(), nullable=False),
            sa.Column('principal', sa.Boolean(), nullable=False),
            *timestamps(),
            sa.ForeignKeyConstraint([f'{parent}_id'], [f'{parent}.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint([f'{child}_id'], [f'{child}.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint(f'{parent}_id', f'{child}_id')
        )

    op.create_table('series_stories',
        sa.Column('series_id', sa.Integer(), nullable=False),
        sa.Column('story_id', sa.Integer(), nullable=False),
        sa.Column('ordinal', sa.Integer(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(['series_id'], ['series.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['story_id'], ['story.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('series_id', 'story_id')
    )

    op.create_table('volumes_stories',
        sa.Column('volume_id', sa.Integer(), nullable=False),
        sa.Column('story_id', sa.Integer(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['volume_id'], ['volume.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['story_id'], ['story.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('volume_id', 'story_id')
    )

    # Users and their tokens
    op.create_table('user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('scope', sa.String(length=1024), nullable=False),
        sa.Column('google_books_api_key', sa.String(length=255), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username')
    )

    op.create_table('access_token',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(length=255), nullable=False),
        sa.Column('expires', sa.DateTime(timezone=True), nullable=False),
        sa.Column('scope', sa.String(length=1024), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token')
    )
    op.create_index('idx_access_token_user_id', 'access_token', ['user_id'])

    op.create_table('refresh_token',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(length=255), nullable=False),
        sa.Column('access_token', sa.String(length=255), nullable=False),
        sa.Column('expires', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token')
    )
    op.create_index('idx_refresh_token_user_id', 'refresh_token', ['user_id'])


def downgrade() -> None:
    op.drop_index('idx_refresh_token_user_id', table_name='refresh_token')
    op.drop_table('refresh_token')
    op.drop_index('idx_access_token_user_id', table_name='access_token')
    op.drop_table('access_token')
    op.drop_table('user')

    for table in ('volumes_stories', 'series_stories', 'authors_volumes', 'authors_stories', 'authors_series'):
        op.drop_table(table)

    op.drop_index('idx_volume_isbn', table_name='volume')
    op.drop_index('idx_volume_library_id', table_name='volume')
    op.drop_table('volume')
    for table in ('story', 'series'):
        op.drop_index(f'idx_{table}_library_id', table_name=table)
        op.drop_table(table)
    op.drop_index('idx_author_library_name', table_name='author')
    op.drop_table('author')
    op.drop_index('idx_library_active', table_name='library')
    op.drop_table('library')
