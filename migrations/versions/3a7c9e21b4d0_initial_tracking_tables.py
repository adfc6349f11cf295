"""initial tracking tables

Revision ID: 3a7c9e21b4d0
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e21b4d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        'daily_goals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('daily_calories', sa.Numeric(8, 2), nullable=False),
        sa.Column('daily_protein', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('daily_carbs', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('daily_fats', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('daily_fluid', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_daily_goals_user_id', 'daily_goals', ['user_id'])

    op.create_table(
        'food_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('calories_per_100g', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('protein_per_100g', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('carbs_per_100g', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('fats_per_100g', sa.Numeric(8, 2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_food_items_name', 'food_items', ['name'])

    op.create_table(
        'food_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('food_item_id', sa.Integer(), sa.ForeignKey('food_items.id'), nullable=False),
        sa.Column('portion_size', sa.Numeric(8, 2), nullable=False),
        sa.Column('consumed_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_food_logs_user_consumed', 'food_logs', ['user_id', 'consumed_at'])

    op.create_table(
        'fluid_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('fluid_type', sa.String(length=100), nullable=False),
        sa.Column('volume', sa.Numeric(8, 2), nullable=False),
        sa.Column('consumed_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_fluid_logs_user_consumed', 'fluid_logs', ['user_id', 'consumed_at'])

    # One row per user per day; the upsert in summary_service conflicts on this
    op.create_table(
        'daily_summaries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('summary_date', sa.Date(), nullable=False),
        sa.Column('total_calories', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('total_protein', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('total_carbs', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('total_fats', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('total_fluid', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('user_id', 'summary_date', name='uq_daily_summaries_user_date'),
    )


def downgrade():
    op.drop_table('daily_summaries')
    op.drop_index('ix_fluid_logs_user_consumed', table_name='fluid_logs')
    op.drop_table('fluid_logs')
    op.drop_index('ix_food_logs_user_consumed', table_name='food_logs')
    op.drop_table('food_logs')
    op.drop_index('ix_food_items_name', table_name='food_items')
    op.drop_table('food_items')
    op.drop_index('ix_daily_goals_user_id', table_name='daily_goals')
    op.drop_table('daily_goals')
    op.drop_table('users')
