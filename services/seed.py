"""
Sample Data

Seeds the starter recipes into an empty database.
"""

import logging

from constants.sample_recipes import SAMPLE_RECIPES
from models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)


def seed_sample_data(session, recipes=None):
    """
    Insert the sample recipes if the recipes table is empty.

    Returns:
        Number of recipes inserted (0 when data already exists)
    """
    if session.query(Recipe.id).first() is not None:
        logger.debug("Recipes already present, skipping sample data")
        return 0

    if recipes is None:
        recipes = SAMPLE_RECIPES

    for sample in recipes:
        fields = {key: value for key, value in sample.items() if key != 'ingredients'}
        recipe = Recipe(**fields)
        recipe.ingredients = [
            RecipeIngredient(ingredient_name=name, quantity=quantity)
            for name, quantity in sample.get('ingredients', [])
        ]
        session.add(recipe)
    session.commit()

    logger.info("Seeded %d sample recipes", len(recipes))
    return len(recipes)
