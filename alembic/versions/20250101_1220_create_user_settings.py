"""create user_settings table

Revision ID: 20250101_1220_create_user_settings
Revises: 20250101_1210_create_trips
Create Date: 2025-01-01 12:20:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20250101_1220_create_user_settings'
down_revision = '20250101_1210_create_trips'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'user_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('key', sa.String(64), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.UniqueConstraint('user_id', 'key', name='uq_user_settings_user_key'),
    )

def downgrade() -> None:
    op.drop_table('user_settings')
