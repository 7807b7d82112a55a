"""create tuiter tables

Revision ID: 5b7d2c1e9a40
Revises:
Create Date: 2026-10-18 09:12:44.517203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b7d2c1e9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('profile_photo', sa.String(length=500), nullable=True),
        sa.Column('header_image', sa.String(length=500), nullable=True),
        sa.Column('account_type', sa.Enum('PERSONAL', 'ACADEMIC', 'PROFESSIONAL', name='accounttype'), nullable=False),
        sa.Column('marital_status', sa.Enum('MARRIED', 'SINGLE', 'WIDOWED', name='maritalstatus'), nullable=False),
        sa.Column('biography', sa.Text(), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('joined', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('location', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='users_pkey'),
    )
    op.create_index('users_id_idx', 'users', ['id'], unique=False)
    op.create_index('users_username_idx', 'users', ['username'], unique=True)

    op.create_table(
        'tuits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tuit', sa.Text(), nullable=False),
        sa.Column('posted_by_id', sa.Integer(), nullable=False),
        sa.Column('posted_on', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('likes_count', sa.Integer(), nullable=False),
        sa.Column('dislikes_count', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['posted_by_id'], ['users.id'], name='tuits_posted_by_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='tuits_pkey'),
    )
    op.create_index('tuits_id_idx', 'tuits', ['id'], unique=False)
    op.create_index('tuits_posted_by_id_idx', 'tuits', ['posted_by_id'], unique=False)

    op.create_table(
        'likes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tuit_id', sa.Integer(), nullable=False),
        sa.Column('liked_by_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tuit_id'], ['tuits.id'], name='likes_tuit_id_fkey'),
        sa.ForeignKeyConstraint(['liked_by_id'], ['users.id'], name='likes_liked_by_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='likes_pkey'),
        sa.UniqueConstraint('tuit_id', 'liked_by_id', name='likes_tuit_id_liked_by_id_key'),
    )
    op.create_index('likes_id_idx', 'likes', ['id'], unique=False)
    op.create_index('likes_tuit_id_idx', 'likes', ['tuit_id'], unique=False)
    op.create_index('likes_liked_by_id_idx', 'likes', ['liked_by_id'], unique=False)

    op.create_table(
        'dislikes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tuit_id', sa.Integer(), nullable=False),
        sa.Column('disliked_by_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tuit_id'], ['tuits.id'], name='dislikes_tuit_id_fkey'),
        sa.ForeignKeyConstraint(['disliked_by_id'], ['users.id'], name='dislikes_disliked_by_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='dislikes_pkey'),
        sa.UniqueConstraint('tuit_id', 'disliked_by_id', name='dislikes_tuit_id_disliked_by_id_key'),
    )
    op.create_index('dislikes_id_idx', 'dislikes', ['id'], unique=False)
    op.create_index('dislikes_tuit_id_idx', 'dislikes', ['tuit_id'], unique=False)
    op.create_index('dislikes_disliked_by_id_idx', 'dislikes', ['disliked_by_id'], unique=False)

    op.create_table(
        'bookmarks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('bookmarked_tuit_id', sa.Integer(), nullable=False),
        sa.Column('bookmarked_by_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['bookmarked_tuit_id'], ['tuits.id'], name='bookmarks_bookmarked_tuit_id_fkey'),
        sa.ForeignKeyConstraint(['bookmarked_by_id'], ['users.id'], name='bookmarks_bookmarked_by_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='bookmarks_pkey'),
        sa.UniqueConstraint('bookmarked_tuit_id', 'bookmarked_by_id', name='bookmarks_bookmarked_tuit_id_bookmarked_by_id_key'),
    )
    op.create_index('bookmarks_id_idx', 'bookmarks', ['id'], unique=False)
    op.create_index('bookmarks_bookmarked_tuit_id_idx', 'bookmarks', ['bookmarked_tuit_id'], unique=False)
    op.create_index('bookmarks_bookmarked_by_id_idx', 'bookmarks', ['bookmarked_by_id'], unique=False)

    op.create_table(
        'follows',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_following_id', sa.Integer(), nullable=False),
        sa.Column('user_followed_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_following_id'], ['users.id'], name='follows_user_following_id_fkey'),
        sa.ForeignKeyConstraint(['user_followed_id'], ['users.id'], name='follows_user_followed_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='follows_pkey'),
        sa.UniqueConstraint('user_following_id', 'user_followed_id', name='follows_user_following_id_user_followed_id_key'),
    )
    op.create_index('follows_id_idx', 'follows', ['id'], unique=False)
    op.create_index('follows_user_following_id_idx', 'follows', ['user_following_id'], unique=False)
    op.create_index('follows_user_followed_id_idx', 'follows', ['user_followed_id'], unique=False)

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('from_user_id', sa.Integer(), nullable=False),
        sa.Column('to_user_id', sa.Integer(), nullable=False),
        sa.Column('sent_on', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['from_user_id'], ['users.id'], name='messages_from_user_id_fkey'),
        sa.ForeignKeyConstraint(['to_user_id'], ['users.id'], name='messages_to_user_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='messages_pkey'),
    )
    op.create_index('messages_id_idx', 'messages', ['id'], unique=False)
    op.create_index('messages_from_user_id_idx', 'messages', ['from_user_id'], unique=False)
    op.create_index('messages_to_user_id_idx', 'messages', ['to_user_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table in ('messages', 'follows', 'bookmarks', 'dislikes', 'likes', 'tuits', 'users'):
        op.drop_table(table)
    sa.Enum(name='maritalstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='accounttype').drop(op.get_bind(), checkfirst=True)
