"""Add history timeline table

Revision ID: 7d4e8a2c5b61
Revises: 3f1c2b7e9a10
Create Date: 2025-07-14 16:40:22.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7d4e8a2c5b61'
down_revision = '3f1c2b7e9a10'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'history',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('event', sa.String(length=2000), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('year >= 1900 AND year <= 2100', name='history_year_range'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_history_year', 'history', ['year'])


def downgrade():
    op.drop_index('ix_history_year', table_name='history')
    op.drop_table('history')
