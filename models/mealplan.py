"""
Meal Plan Model

Contains the MealPlan model for weekly meal planning.
"""

from .base import db


class MealPlan(db.Model):
    """Assignment of one recipe to a (day, meal type) slot of a week."""
    __tablename__ = 'meal_plan'
    __table_args__ = (
        db.CheckConstraint(
            "day_of_week IN ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')",
            name='ck_meal_plan_day_of_week',
        ),
        db.CheckConstraint("meal_type IN ('breakfast', 'lunch', 'dinner')", name='ck_meal_plan_meal_type'),
        {'sqlite_autoincrement': True},
    )

    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), nullable=False, index=True)
    day_of_week = db.Column(db.String(10), nullable=False)
    meal_type = db.Column(db.String(20), nullable=False)
    week_start_date = db.Column(db.String(10), nullable=False, index=True)  # ISO date of the Monday
    recipe = db.relationship('Recipe', back_populates='meal_plan_entries')

    def to_dict(self):
        return {
            'id': self.id,
            'day_of_week': self.day_of_week,
            'meal_type': self.meal_type,
            'week_start_date': self.week_start_date,
            'recipe_id': self.recipe_id,
            'recipe_name': self.recipe.name if self.recipe else None,
            'cook_time': self.recipe.cook_time if self.recipe else None,
            'cuisine': self.recipe.cuisine if self.recipe else None,
        }
