"""movies, reviews and user profiles

Revision ID: 4c1e2a9d7b30
Revises:
Create Date: 2026-10-19 10:12:41.218904

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4c1e2a9d7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    op.create_table(
        'movie',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('release_year', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Numeric(precision=3, scale=1), nullable=False),
        sa.Column('genre', sa.Text(), nullable=False),
        sa.Column('director', sa.Text(), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('poster_url', sa.Text(), nullable=True),
        sa.CheckConstraint('rating BETWEEN 0 AND 10', name=op.f('ck_movie_rating_0_10')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_movie')),
        schema='cinereview'
    )
    op.create_index('ix_movie_genre', 'movie', ['genre'], unique=False, schema='cinereview')

    op.create_table(
        'review',
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('movie_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.String(length=128), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name=op.f('ck_review_rating_1_5')),
        sa.CheckConstraint('length(btrim(body)) > 0', name=op.f('ck_review_body_not_blank')),
        sa.CheckConstraint('last_updated >= date_created', name=op.f('ck_review_updated_after_created')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_review')),
        sa.UniqueConstraint('movie_id', 'author_id', name='uq_review_movie_author'),
        schema='cinereview'
    )
    op.create_index('ix_review_movie_created', 'review', ['movie_id', 'date_created'], unique=False, schema='cinereview')
    op.create_index('ix_review_author_created', 'review', ['author_id', 'date_created'], unique=False, schema='cinereview')

    op.create_table(
        'user_profile',
        sa.Column('uid', sa.String(length=128), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('photo_url', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('uid', name=op.f('pk_user_profile')),
        schema='cinereview'
    )


def downgrade() -> None:
    op.drop_table('user_profile', schema='cinereview')
    op.drop_index('ix_review_author_created', table_name='review', schema='cinereview')
    op.drop_index('ix_review_movie_created', table_name='review', schema='cinereview')
    op.drop_table('review', schema='cinereview')
    op.drop_index('ix_movie_genre', table_name='movie', schema='cinereview')
    op.drop_table('movie', schema='cinereview')
