"""create drive sessions, speed samples and user preferences tables

Revision ID: 20251019_create_drive_tables
Revises:
Create Date: 2025-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20251019_create_drive_tables"
down_revision = None
branch_labels = None
depends_on = None


session_status = sa.Enum("ACTIVE", "COMPLETED", name="drive_session_status")


def upgrade() -> None:
    op.create_table(
        'drive_sessions',
        sa.Column('id', sa.String(25), primary_key=True, index=True),
        sa.Column('user_id', sa.String(64), nullable=False, index=True),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=True),
        sa.Column('status', session_status, nullable=False),
        sa.Column('max_speed', sa.Float(), nullable=False, server_default='0'),
        sa.Column('avg_speed', sa.Float(), nullable=False, server_default='0'),
        sa.Column('distance_traveled', sa.Float(), nullable=False, server_default='0'),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()')),
    )
    op.create_index('ix_drive_session_user_start', 'drive_sessions', ['user_id', 'start_time'])
    # One ACTIVE session per user
    op.create_index(
        'uq_drive_session_user_active',
        'drive_sessions',
        ['user_id'],
        unique=True,
        postgresql_where=sa.text("status = 'ACTIVE'"),
    )

    op.create_table(
        'speed_samples',
        sa.Column('id', sa.String(25), primary_key=True, index=True),
        sa.Column('session_id', sa.String(25), sa.ForeignKey('drive_sessions.id'), nullable=False, index=True),
        sa.Column('speed', sa.Float(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()')),
    )
    op.create_index('ix_speed_sample_session_time', 'speed_samples', ['session_id', 'timestamp'])

    op.create_table(
        'user_preferences',
        sa.Column('id', sa.String(25), primary_key=True, index=True),
        sa.Column('user_id', sa.String(64), nullable=False, unique=True, index=True),
        sa.Column('moderate_speed_threshold', sa.Integer(), nullable=True),
        sa.Column('high_speed_threshold', sa.Integer(), nullable=True),
        sa.Column('auto_enable_drive_mode', sa.Boolean(), nullable=True),
        sa.Column('notification_exceptions', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()')),
    )


def downgrade() -> None:
    op.drop_table('user_preferences')

    op.drop_index('ix_speed_sample_session_time', table_name='speed_samples')
    op.drop_table('speed_samples')

    op.drop_index('uq_drive_session_user_active', table_name='drive_sessions')
    op.drop_index('ix_drive_session_user_start', table_name='drive_sessions')
    op.drop_table('drive_sessions')

    session_status.drop(op.get_bind(), checkfirst=True)
