"""Initial site content schema

Revision ID: 3f1c2b7e9a10
Revises:
Create Date: 2025-06-02 10:14:03.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2b7e9a10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=80), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'team_members',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('role', sa.String(length=100), nullable=False),
        sa.Column('image', sa.Text(), nullable=False),
        sa.Column('bio', sa.String(length=500), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_team_members_created_at', 'team_members', ['created_at'])

    op.create_table(
        'courses',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('duration', sa.String(length=100), nullable=True),
        sa.Column('levelitem1', sa.String(length=200), nullable=True),
        sa.Column('levelitem2', sa.String(length=200), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('link', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_courses_created_at', 'courses', ['created_at'])

    op.create_table(
        'study_abroad',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('program_name', sa.String(length=200), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=False),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('link', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_study_abroad_created_at', 'study_abroad', ['created_at'])

    op.create_table(
        'contact_info',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'contact_info_socials',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('contact_info_id', sa.String(length=36), nullable=False),
        sa.Column('platform', sa.String(length=50), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['contact_info_id'], ['contact_info.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('contact_info_id', 'platform', name='contact_info_socials_platform_key')
    )


def downgrade():
    op.drop_table('contact_info_socials')
    op.drop_table('contact_info')
    op.drop_index('ix_study_abroad_created_at', table_name='study_abroad')
    op.drop_table('study_abroad')
    op.drop_index('ix_courses_created_at', table_name='courses')
    op.drop_table('courses')
    op.drop_index('ix_team_members_created_at', table_name='team_members')
    op.drop_table('team_members')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
