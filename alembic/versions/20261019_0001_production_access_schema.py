"""Initial schema - projects, ownership chain, permissions

Revision ID: 0001
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # Users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), unique=True, nullable=False, index=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('role', sa.String(50), nullable=False, default='member', index=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
    )
    
    # Projects table
    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), unique=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
    )
    
    # Project permissions: one row per (user, project)
    op.create_table(
        'project_permissions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('role', sa.String(20), nullable=False, default='viewer'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'project_id', name='uq_project_permissions_user_project'),
    )
    op.create_index('ix_project_permissions_project_role', 'project_permissions', ['project_id', 'role'])
    
    # Ownership chain
    op.create_table(
        'episodes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), unique=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('ep_number', sa.Integer(), nullable=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True, index=True),
        *_timestamps(),
    )
    op.create_table(
        'sequences',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), unique=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('cut_order', sa.Integer(), nullable=True),
        sa.Column('episode_id', sa.Integer(), sa.ForeignKey('episodes.id', ondelete='CASCADE'), nullable=True, index=True),
        *_timestamps(),
    )
    op.create_table(
        'shots',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), unique=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('sequence_number', sa.Integer(), nullable=True),
        sa.Column('sequence_id', sa.Integer(), sa.ForeignKey('sequences.id', ondelete='CASCADE'), nullable=True, index=True),
        *_timestamps(),
    )
    
    # Assets and versions
    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), unique=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('asset_type', sa.String(50), nullable=False, default='prop'),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True, index=True),
        *_timestamps(),
    )
    op.create_table(
        'versions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('latest', sa.Boolean(), nullable=False, default=True),
        sa.Column('entity_id', sa.Integer(), nullable=True),
        sa.Column('entity_type', sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_versions_entity', 'versions', ['entity_id', 'entity_type'])


def downgrade() -> None:
    op.drop_index('ix_versions_entity', table_name='versions')
    op.drop_table('versions')
    op.drop_table('assets')
    op.drop_table('shots')
    op.drop_table('sequences')
    op.drop_table('episodes')
    op.drop_index('ix_project_permissions_project_role', table_name='project_permissions')
    op.drop_table('project_permissions')
    op.drop_table('projects')
    op.drop_table('users')
