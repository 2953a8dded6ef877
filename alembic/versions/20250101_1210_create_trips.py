"""create trips table

Revision ID: 20250101_1210_create_trips
Revises: 20250101_1200_create_users
Create Date: 2025-01-01 12:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20250101_1210_create_trips'
down_revision = '20250101_1200_create_users'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('destination', sa.String(255), nullable=False),
        sa.Column('departure_date', sa.Date(), nullable=False, index=True),
        sa.Column('return_date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('return_date >= departure_date', name='ck_trips_date_order'),
    )

def downgrade() -> None:
    op.drop_table('trips')
