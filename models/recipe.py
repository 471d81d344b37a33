"""
Recipe Models

Contains the Recipe and RecipeIngredient models for managing
recipes and their ingredient lines.
"""

from .base import db


class Recipe(db.Model):
    """Recipe with browse metadata and free-text ingredient lines."""
    __tablename__ = 'recipes'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False, index=True)
    meal_type = db.Column(
        db.String(20),
        db.CheckConstraint("meal_type IN ('breakfast', 'lunch', 'dinner', 'snack')", name='ck_recipes_meal_type'),
        nullable=True,
        index=True,
    )
    cuisine = db.Column(db.Text)
    dish_type = db.Column(db.Text)
    protein_type = db.Column(db.Text)
    cooking_method = db.Column(db.Text)
    cook_time = db.Column(db.Integer)
    serving_size = db.Column(db.Integer)
    instructions = db.Column(db.Text)  # newline-delimited steps
    image_url = db.Column(db.Text)

    ingredients = db.relationship(
        'RecipeIngredient', backref='recipe', lazy=True,
        cascade='all, delete-orphan', passive_deletes=True,
        order_by='RecipeIngredient.id',
    )
    meal_plan_entries = db.relationship(
        'MealPlan', back_populates='recipe', lazy=True,
        cascade='all, delete-orphan', passive_deletes=True,
    )

    def to_dict(self, include_ingredients=False):
        data = {
            'id': self.id,
            'name': self.name,
            'meal_type': self.meal_type,
            'cuisine': self.cuisine,
            'dish_type': self.dish_type,
            'protein_type': self.protein_type,
            'cooking_method': self.cooking_method,
            'cook_time': self.cook_time,
            'serving_size': self.serving_size,
            'instructions': self.instructions,
            'image_url': self.image_url,
        }
        if include_ingredients:
            data['ingredients'] = [ri.to_dict() for ri in self.ingredients]
        return data

    @property
    def steps(self):
        """Instruction steps, one per non-blank line."""
        if not self.instructions:
            return []
        return [line.strip() for line in self.instructions.splitlines() if line.strip()]


class RecipeIngredient(db.Model):
    """One ingredient line of a recipe. Quantity is opaque text ("1 lb", "2 cloves")."""
    __tablename__ = 'recipe_ingredients'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient_name = db.Column(db.Text, nullable=False)
    quantity = db.Column(db.Text, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'ingredient_name': self.ingredient_name,
            'quantity': self.quantity,
        }
