"""Unique queue booking reference and operator work logs

Revision ID: 8b4e61d2c5a3
Revises: 3f1c2a9b7d10
Create Date: 2026-10-17 14:30:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '8b4e61d2c5a3'
down_revision = '3f1c2a9b7d10'
branch_labels = None
depends_on = None


def upgrade():
    # A booking admits at most one queue item
    op.drop_index('ix_queue_booking_id', table_name='queue')
    op.create_index('ix_queue_booking_id', 'queue', ['booking_id'], unique=True)

    op.create_table(
        'work_logs',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('crane_id', sa.String(length=32), nullable=False),
        sa.Column('operator_id', sa.String(length=64), nullable=False),
        sa.Column('operator_name', sa.String(length=200), nullable=False),
        sa.Column('work_date', sa.Date(), nullable=False),
        sa.Column('shift', sa.String(length=16), nullable=False, server_default='morning'),
        sa.Column('actual_work', sa.String(), nullable=False),
        sa.Column('actual_time', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='normal'),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.CheckConstraint('actual_time > 0', name='check_work_log_time_positive'),
        sa.ForeignKeyConstraint(['crane_id'], ['cranes.id'], name='fk_work_logs_crane_id'),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_work_logs_crane_id', 'crane_id'),
        sa.Index('ix_work_logs_operator_id', 'operator_id'),
        sa.Index('ix_work_logs_shift', 'shift'),
        sa.Index('ix_work_logs_status', 'status'),
        sa.Index('ix_work_logs_created_at', 'created_at'),
    )


def downgrade():
    op.drop_table('work_logs')
    op.drop_index('ix_queue_booking_id', table_name='queue')
    op.create_index('ix_queue_booking_id', 'queue', ['booking_id'])
