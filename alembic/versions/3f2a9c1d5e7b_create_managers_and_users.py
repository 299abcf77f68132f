"""create managers and users

Revision ID: 3f2a9c1d5e7b
Revises:
Create Date: 2026-10-19 10:12:44.518203
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d5e7b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'managers',
        sa.Column('manager_id', sa.String(length=36), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.PrimaryKeyConstraint('manager_id'),
    )
    op.create_table(
        'users',
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('mob_num', sa.String(length=10), nullable=False),
        sa.Column('pan_num', sa.String(length=10), nullable=False),
        sa.Column('manager_id', sa.String(length=36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.ForeignKeyConstraint(['manager_id'], ['managers.manager_id']),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_users_mob_num'), 'users', ['mob_num'], unique=False)
    op.create_index(op.f('ix_users_manager_id'), 'users', ['manager_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_users_manager_id'), table_name='users')
    op.drop_index(op.f('ix_users_mob_num'), table_name='users')
    op.drop_table('users')
    op.drop_table('managers')
