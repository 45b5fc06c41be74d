"""create_users_and_road_damage_reports

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 09:12:41.503127

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b64'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('avatar_url', sqlmodel.sql.sqltypes.AutoString(length=2048), nullable=True),
        sa.Column('provider', sa.Enum('google', 'email', name='authprovider'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'road_damage_reports',
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('reporter_name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('reporter_phone', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('reporter_address', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('report_date', sa.Date(), nullable=False),
        sa.Column('damage_description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('photo_url', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('pending', 'in_progress', 'resolved', 'rejected', name='reportstatus'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_road_damage_reports_created_at'), 'road_damage_reports', ['created_at'], unique=False)
    op.create_index(op.f('ix_road_damage_reports_status'), 'road_damage_reports', ['status'], unique=False)
    op.create_index(op.f('ix_road_damage_reports_user_id'), 'road_damage_reports', ['user_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_road_damage_reports_user_id'), table_name='road_damage_reports')
    op.drop_index(op.f('ix_road_damage_reports_status'), table_name='road_damage_reports')
    op.drop_index(op.f('ix_road_damage_reports_created_at'), table_name='road_damage_reports')
    op.drop_table('road_damage_reports')

    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_created_at'), table_name='users')
    op.drop_table('users')

    # Drop the enum types (PostgreSQL)
    sa.Enum(name='reportstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='authprovider').drop(op.get_bind(), checkfirst=True)
