"""initial health log schema

Revision ID: 3b7e1f2a9c40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e1f2a9c40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('blood_pressure',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('systolic', sa.Integer(), nullable=False),
        sa.Column('diastolic', sa.Integer(), nullable=False),
        sa.Column('pulse', sa.Integer(), nullable=True),
        sa.Column('timing', sa.String(10), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('measured_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_blood_pressure_measured_at', 'blood_pressure', ['measured_at'])

    op.create_table('weight_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('measured_at', sa.Date(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('measured_at')
    )

    op.create_table('recipes',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('cook_time_min', sa.Integer(), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.Column('salt_g', sa.Float(), nullable=True),
        sa.Column('carbs_g', sa.Float(), nullable=True),
        sa.Column('protein_g', sa.Float(), nullable=True),
        sa.Column('fiber_g', sa.Float(), nullable=True),
        sa.Column('potassium_mg', sa.Float(), nullable=True),
        sa.Column('ingredients', sa.JSON(), nullable=False),
        sa.Column('steps', sa.JSON(), nullable=False),
        sa.Column('salt_tips', sa.JSON(), nullable=True),
        sa.Column('sugar_tips', sa.JSON(), nullable=True),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_recipes_category', 'recipes', ['category'])

    op.create_table('food_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('logged_date', sa.Date(), nullable=False),
        sa.Column('meal_type', sa.String(20), nullable=False),
        sa.Column('recipe_id', sa.String(64), nullable=True),
        sa.Column('custom_name', sa.String(255), nullable=True),
        sa.Column('portion', sa.Float(), nullable=False, server_default='1.0'),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.Column('salt_g', sa.Float(), nullable=True),
        sa.Column('carbs_g', sa.Float(), nullable=True),
        sa.Column('protein_g', sa.Float(), nullable=True),
        sa.Column('fiber_g', sa.Float(), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_food_log_logged_date', 'food_log', ['logged_date'])

    op.create_table('condition_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('logged_date', sa.Date(), nullable=False),
        sa.Column('overall_score', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('palpitation', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('edema', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('fatigue_level', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('cpap_used', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('logged_date')
    )

    op.create_table('medical_visits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('visit_date', sa.Date(), nullable=False),
        sa.Column('department', sa.String(100), nullable=True),
        sa.Column('doctor_name', sa.String(100), nullable=True),
        sa.Column('diagnosis', sa.Text(), nullable=True),
        sa.Column('prescription', sa.Text(), nullable=True),
        sa.Column('next_visit', sa.Date(), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_medical_visits_visit_date', 'medical_visits', ['visit_date'])

    op.create_table('exercise_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('logged_date', sa.Date(), nullable=False),
        sa.Column('exercise_id', sa.String(20), nullable=False),
        sa.Column('exercise_name', sa.String(255), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('calories_burned', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_exercise_log_logged_date', 'exercise_log', ['logged_date'])

    op.create_table('daily_missions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mission_date', sa.Date(), nullable=False),
        sa.Column('mission_text', sa.Text(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('mission_date')
    )

    op.create_table('streaks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('streak_type', sa.String(20), nullable=False),
        sa.Column('current_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('best_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('streak_type')
    )


def downgrade():
    op.drop_table('streaks')
    op.drop_table('daily_missions')
    op.drop_index('ix_exercise_log_logged_date', table_name='exercise_log')
    op.drop_table('exercise_log')
    op.drop_index('ix_medical_visits_visit_date', table_name='medical_visits')
    op.drop_table('medical_visits')
    op.drop_table('condition_log')
    op.drop_index('ix_food_log_logged_date', table_name='food_log')
    op.drop_table('food_log')
    op.drop_index('ix_recipes_category', table_name='recipes')
    op.drop_table('recipes')
    op.drop_table('weight_log')
    op.drop_index('ix_blood_pressure_measured_at', table_name='blood_pressure')
    op.drop_table('blood_pressure')
