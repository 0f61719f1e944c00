"""create_group_invite_member_tables

Revision ID: 4b7e19c2d0a1
Revises:
Create Date: 2026-10-18 10:02:11.402318

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e19c2d0a1'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create groups, invites and members tables."""
    op.create_table('groups',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_groups_created_at', 'groups', ['created_at'], unique=False)

    op.create_table('invites',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('group_id', sa.String(length=64), nullable=False),
        sa.Column('invite_code', sa.String(length=64), nullable=False),
        sa.Column('created_by', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('invite_code'),
    )
    op.create_index('ix_invites_group_id', 'invites', ['group_id'], unique=False)

    op.create_table('members',
        sa.Column('group_id', sa.String(length=64), nullable=False),
        sa.Column('device_id', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='member'),
        sa.Column('joined_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("role IN ('creator', 'member')", name='ck_members_role'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('group_id', 'device_id'),
    )
    op.create_index('ix_members_device_id', 'members', ['device_id'], unique=False)


def downgrade() -> None:
    """Drop members, invites and groups tables."""
    op.drop_index('ix_members_device_id', table_name='members')
    op.drop_table('members')
    op.drop_index('ix_invites_group_id', table_name='invites')
    op.drop_table('invites')
    op.drop_index('ix_groups_created_at', table_name='groups')
    op.drop_table('groups')
