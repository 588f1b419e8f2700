"""Create users, otps, media, media_tags and contacts tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Initial schema for the media gallery backend.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the gallery tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=True),
        sa.Column('role', sa.Enum('user', 'admin', name='user_role'), nullable=False, server_default='user'),
        sa.Column('avatar', sa.String(length=500), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('oauth_id', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'otps',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('code', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_otps_email', 'otps', ['email'])

    op.create_table(
        'media',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(length=1000), nullable=False),
        sa.Column('storage_key', sa.String(length=500), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('is_shared', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['user_id'],
            ['users.id'],
            name='fk_media_user_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_media_user_id', 'media', ['user_id'])
    op.create_index('ix_media_is_shared', 'media', ['is_shared'])
    op.create_index('ix_media_created_at', 'media', ['created_at'])

    op.create_table(
        'media_tags',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('media_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['media_id'],
            ['media.id'],
            name='fk_media_tags_media_id',
            ondelete='CASCADE'
        ),
        sa.UniqueConstraint('media_id', 'name', name='uq_media_tags_media_name'),
    )
    op.create_index('ix_media_tags_media_id', 'media_tags', ['media_id'])
    op.create_index('ix_media_tags_name', 'media_tags', ['name'])

    op.create_table(
        'contacts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['user_id'],
            ['users.id'],
            name='fk_contacts_user_id',
            ondelete='SET NULL'
        ),
    )
    op.create_index('ix_contacts_user_id', 'contacts', ['user_id'])
    op.create_index('ix_contacts_created_at', 'contacts', ['created_at'])


def downgrade() -> None:
    """Drop the gallery tables."""
    op.drop_index('ix_contacts_created_at', table_name='contacts')
    op.drop_index('ix_contacts_user_id', table_name='contacts')
    op.drop_table('contacts')
    op.drop_index('ix_media_tags_name', table_name='media_tags')
    op.drop_index('ix_media_tags_media_id', table_name='media_tags')
    op.drop_table('media_tags')
    op.drop_index('ix_media_created_at', table_name='media')
    op.drop_index('ix_media_is_shared', table_name='media')
    op.drop_index('ix_media_user_id', table_name='media')
    op.drop_table('media')
    op.drop_index('ix_otps_email', table_name='otps')
    op.drop_table('otps')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # Drop the enum type (PostgreSQL keeps it as a separate object)
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS user_role")
