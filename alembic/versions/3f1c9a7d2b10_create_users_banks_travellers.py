"""create_users_banks_travellers

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 09:12:44.118302

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the tenant-owned entity tables.

    Creates:
    - users table (mirrors JWT subjects)
    - banks table
    - travellers table with tenant/state/owner composite indexes

    business_id is an opaque tenant reference on every table; there is no
    tenants table in this service.
    """
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('auth_user_id', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('user_type', sa.String(length=14), nullable=False),
        sa.Column('business_id', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_auth_user_id'), 'users', ['auth_user_id'], unique=True)
    op.create_index(op.f('ix_users_business_id'), 'users', ['business_id'], unique=False)
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'], unique=False)

    op.create_table(
        'banks',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('account_number', sa.String(length=64), nullable=False),
        sa.Column('ifsc_code', sa.String(length=32), nullable=False),
        sa.Column('account_type', sa.String(length=7), nullable=False),
        sa.Column('business_id', sa.String(length=64), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_banks_business_id'), 'banks', ['business_id'], unique=False)
    op.create_index(op.f('ix_banks_created_at'), 'banks', ['created_at'], unique=False)

    op.create_table(
        'travellers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('business_id', sa.String(length=64), nullable=False),
        sa.Column('owner_id', sa.String(length=64), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_travellers_business_id'), 'travellers', ['business_id'], unique=False)
    op.create_index(op.f('ix_travellers_created_at'), 'travellers', ['created_at'], unique=False)
    op.create_index('ix_travellers_business_created', 'travellers', ['business_id', 'created_at'], unique=False)
    op.create_index('ix_travellers_business_deleted', 'travellers', ['business_id', 'is_deleted'], unique=False)
    op.create_index('ix_travellers_business_owner', 'travellers', ['business_id', 'owner_id'], unique=False)


def downgrade() -> None:
    """Drop the entity tables."""
    op.drop_table('travellers')
    op.drop_table('banks')
    op.drop_index(op.f('ix_users_created_at'), table_name='users')
    op.drop_index(op.f('ix_users_business_id'), table_name='users')
    op.drop_index(op.f('ix_users_auth_user_id'), table_name='users')
    op.drop_table('users')
