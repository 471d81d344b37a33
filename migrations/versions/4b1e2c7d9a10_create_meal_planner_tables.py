"""Create recipes, recipe_ingredients, meal_plan and grocery_list tables

Revision ID: 4b1e2c7d9a10
Revises:
Create Date: 2026-10-19 09:12:40.118273

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4b1e2c7d9a10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('meal_type', sa.String(length=20), nullable=True),
        sa.Column('cuisine', sa.Text(), nullable=True),
        sa.Column('dish_type', sa.Text(), nullable=True),
        sa.Column('protein_type', sa.Text(), nullable=True),
        sa.Column('cooking_method', sa.Text(), nullable=True),
        sa.Column('cook_time', sa.Integer(), nullable=True),
        sa.Column('serving_size', sa.Integer(), nullable=True),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.CheckConstraint("meal_type IN ('breakfast', 'lunch', 'dinner', 'snack')", name='ck_recipes_meal_type'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table('recipes', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipes_name'), ['name'], unique=False)
        batch_op.create_index(batch_op.f('ix_recipes_meal_type'), ['meal_type'], unique=False)

    op.create_table(
        'recipe_ingredients',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_name', sa.Text(), nullable=False),
        sa.Column('quantity', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table('recipe_ingredients', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_ingredients_recipe_id'), ['recipe_id'], unique=False)

    op.create_table(
        'meal_plan',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.String(length=10), nullable=False),
        sa.Column('meal_type', sa.String(length=20), nullable=False),
        sa.Column('week_start_date', sa.String(length=10), nullable=False),
        sa.CheckConstraint(
            "day_of_week IN ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')",
            name='ck_meal_plan_day_of_week',
        ),
        sa.CheckConstraint("meal_type IN ('breakfast', 'lunch', 'dinner')", name='ck_meal_plan_meal_type'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table('meal_plan', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_meal_plan_recipe_id'), ['recipe_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_plan_week_start_date'), ['week_start_date'], unique=False)

    op.create_table(
        'grocery_list',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('item_name', sa.Text(), nullable=False),
        sa.Column('quantity', sa.Text(), nullable=True),
        sa.Column('is_checked', sa.Boolean(), nullable=False),
        sa.Column('week_start_date', sa.String(length=10), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    with op.batch_alter_table('grocery_list', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_grocery_list_week_start_date'), ['week_start_date'], unique=False)


def downgrade():
    with op.batch_alter_table('grocery_list', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_grocery_list_week_start_date'))
    op.drop_table('grocery_list')

    with op.batch_alter_table('meal_plan', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_meal_plan_week_start_date'))
        batch_op.drop_index(batch_op.f('ix_meal_plan_recipe_id'))
    op.drop_table('meal_plan')

    with op.batch_alter_table('recipe_ingredients', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_recipe_ingredients_recipe_id'))
    op.drop_table('recipe_ingredients')

    with op.batch_alter_table('recipes', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_recipes_meal_type'))
        batch_op.drop_index(batch_op.f('ix_recipes_name'))
    op.drop_table('recipes')
