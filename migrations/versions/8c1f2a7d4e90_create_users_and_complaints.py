"""create users, complaints, messages and status history

Revision ID: 8c1f2a7d4e90
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8c1f2a7d4e90'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('email', sa.String(120), nullable=False),
        sa.Column('password_hash', sa.String(256), nullable=False),
        sa.Column('role', sa.String(20), nullable=False, server_default='student'),
        sa.Column('department', sa.String(120)),
        sa.Column('roll_number', sa.String(50)),
        sa.Column('created_at', sa.DateTime()),
    )
    # store-level guard against duplicate registrations
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'complaints',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(32), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Submitted'),
        sa.Column('priority', sa.String(20), nullable=False, server_default='Medium'),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('admin_response', sa.Text()),
        sa.Column('expected_resolution_date', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_complaints_user_id', 'complaints', ['user_id'])
    op.create_index('ix_complaints_category', 'complaints', ['category'])
    op.create_index('ix_complaints_status', 'complaints', ['status'])
    op.create_index('ix_complaints_created_at', 'complaints', ['created_at'])

    op.create_table(
        'status_history',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('complaint_id', sa.Integer(), sa.ForeignKey('complaints.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('changed_at', sa.DateTime(), nullable=False),
        sa.Column('changed_by_id', sa.Integer(), sa.ForeignKey('users.id')),
    )
    op.create_index('ix_status_history_complaint_id', 'status_history', ['complaint_id'])

    op.create_table(
        'complaint_messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('complaint_id', sa.Integer(), sa.ForeignKey('complaints.id', ondelete='CASCADE'), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('sender_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('sender_role', sa.String(20), nullable=False),
        sa.Column('sender_name', sa.String(120), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_complaint_messages_complaint_id', 'complaint_messages', ['complaint_id'])


def downgrade():
    op.drop_index('ix_complaint_messages_complaint_id', table_name='complaint_messages')
    op.drop_table('complaint_messages')
    op.drop_index('ix_status_history_complaint_id', table_name='status_history')
    op.drop_table('status_history')
    op.drop_index('ix_complaints_created_at', table_name='complaints')
    op.drop_index('ix_complaints_status', table_name='complaints')
    op.drop_index('ix_complaints_category', table_name='complaints')
    op.drop_index('ix_complaints_user_id', table_name='complaints')
    op.drop_table('complaints')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
