"""Create crane queue tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c2a9b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'cranes',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'queue',
        sa.Column('crane_id', sa.String(length=32), nullable=False),
        sa.Column('ord', sa.Integer(), nullable=False),
        sa.Column('piece', sa.String(length=200), nullable=False),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='pending'),
        sa.Column('started_at', sa.BigInteger(), nullable=True),
        sa.Column('ended_at', sa.BigInteger(), nullable=True),
        sa.Column('booking_id', sa.String(length=32), nullable=True),

        # Direct-queue descriptive fields
        sa.Column('requester', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('purpose', sa.String(), nullable=True),
        sa.Column('start_ts', sa.BigInteger(), nullable=True),
        sa.Column('end_ts', sa.BigInteger(), nullable=True),
        sa.Column('work_type', sa.String(), nullable=True),

        sa.CheckConstraint('ord >= 1', name='check_queue_ord_positive'),
        sa.ForeignKeyConstraint(['crane_id'], ['cranes.id'], name='fk_queue_crane_id'),
        sa.PrimaryKeyConstraint('crane_id', 'ord'),
        sa.Index('ix_queue_status', 'status'),
        sa.Index('ix_queue_booking_id', 'booking_id'),
    )

    op.create_table(
        'bookings',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('crane', sa.String(length=32), nullable=False),
        sa.Column('item', sa.String(), nullable=False),
        sa.Column('requester', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('purpose', sa.String(), nullable=False),
        sa.Column('start_ts', sa.BigInteger(), nullable=False),
        sa.Column('end_ts', sa.BigInteger(), nullable=False),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='awaiting-approval'),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_bookings_crane', 'crane'),
        sa.Index('ix_bookings_status', 'status'),
        sa.Index('ix_bookings_created_at', 'created_at'),
    )

    op.create_table(
        'history',
        sa.Column('id', sa.String(length=96), nullable=False),
        sa.Column('crane', sa.String(length=32), nullable=False),
        sa.Column('piece', sa.String(), nullable=False),
        sa.Column('start_ts', sa.BigInteger(), nullable=True),
        sa.Column('end_ts', sa.BigInteger(), nullable=True),
        sa.Column('duration_min', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_history_crane', 'crane'),
        sa.Index('ix_history_end_ts', 'end_ts'),
    )


def downgrade():
    op.drop_table('history')
    op.drop_table('bookings')
    op.drop_table('queue')
    op.drop_table('cranes')
