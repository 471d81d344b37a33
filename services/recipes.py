"""
Recipe Service

CRUD operations for recipes and their ingredient lines.
"""

import logging
import os

from models import Recipe, RecipeIngredient
from utils.image_handler import ImageValidationError, allowed_file, remove_image, validate_and_process_image
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Columns offered as exact-match filters, in display order
FILTER_COLUMNS = {
    'cuisine': Recipe.cuisine,
    'dish_type': Recipe.dish_type,
    'protein_type': Recipe.protein_type,
    'cooking_method': Recipe.cooking_method,
}

UPLOAD_URL_PREFIX = '/uploads'


def _image_filename(recipe_id):
    return f"recipe_{recipe_id}.jpg"


def list_recipes(session, meal_type=None, cuisine=None, dish_type=None, protein_type=None,
                 cooking_method=None, search=None):
    """
    Recipes matching every given filter, ordered by name.

    Filters are exact matches; search is a case-insensitive substring
    match on the recipe name.
    """
    query = session.query(Recipe)
    if meal_type:
        query = query.filter(Recipe.meal_type == meal_type)
    for field, value in (('cuisine', cuisine), ('dish_type', dish_type),
                         ('protein_type', protein_type), ('cooking_method', cooking_method)):
        if value:
            query = query.filter(FILTER_COLUMNS[field] == value)
    if search:
        query = query.filter(Recipe.name.ilike(f"%{search}%"))
    return query.order_by(Recipe.name).all()


def list_filter_options(session):
    """Distinct non-empty values for each filter column."""
    options = {}
    for field, column in FILTER_COLUMNS.items():
        rows = (
            session.query(column)
            .filter(column.isnot(None), column != '')
            .distinct()
            .order_by(column)
            .all()
        )
        options[field] = [row[0] for row in rows]
    return options


def get_recipe(session, recipe_id):
    recipe = session.get(Recipe, recipe_id)
    if recipe is None:
        raise NotFoundError('Recipe not found')
    return recipe


def _ingredient_rows(lines):
    return [RecipeIngredient(ingredient_name=line.ingredient_name, quantity=line.quantity) for line in lines]


def create_recipe(session, data):
    """Create a recipe (RecipeCreate) with its inline ingredient lines."""
    fields = data.model_dump(exclude={'ingredients'})
    recipe = Recipe(**fields)
    recipe.ingredients = _ingredient_rows(data.ingredients or [])
    session.add(recipe)
    session.commit()
    logger.info("Created recipe %s (%s) with %d ingredients", recipe.id, recipe.name, len(recipe.ingredients))
    return recipe


def update_recipe(session, recipe_id, data):
    """
    Apply a partial update (RecipeUpdate).

    Only fields present in the request change. A supplied ingredients
    list replaces every existing line.
    """
    recipe = get_recipe(session, recipe_id)
    changes = data.model_dump(exclude_unset=True, exclude={'ingredients'})
    for field, value in changes.items():
        setattr(recipe, field, value)

    if 'ingredients' in data.model_fields_set:
        recipe.ingredients = _ingredient_rows(data.ingredients or [])

    session.commit()
    logger.info("Updated recipe %s (fields: %s)", recipe.id, ', '.join(sorted(data.model_fields_set)) or 'none')
    return recipe


def delete_recipe(session, recipe_id, upload_folder=None):
    """
    Delete a recipe; its ingredient lines and meal-plan entries cascade.

    Only the recipe's own upload (recipe_<id>.jpg) is removed, whatever
    image_url points at.
    """
    recipe = get_recipe(session, recipe_id)
    name = recipe.name

    session.delete(recipe)
    session.commit()

    if upload_folder:
        filename = _image_filename(recipe_id)
        try:
            remove_image(upload_folder, filename)
        except OSError:
            logger.warning("Could not remove image %s for deleted recipe %s", filename, recipe_id)

    logger.info("Deleted recipe %s (%s)", recipe_id, name)


def set_recipe_image(session, recipe_id, file_storage, upload_folder):
    """
    Store an uploaded image for a recipe and point image_url at it.

    The image is validated and re-encoded as JPEG, replacing any previous
    upload for the same recipe.
    """
    recipe = get_recipe(session, recipe_id)

    if file_storage is None or not file_storage.filename:
        raise ValidationError('No image selected')
    if not allowed_file(file_storage.filename):
        raise ValidationError('Invalid file type. Use PNG, JPG, GIF, or WEBP.')

    os.makedirs(upload_folder, exist_ok=True)
    target = os.path.join(upload_folder, _image_filename(recipe.id))
    try:
        final_path = validate_and_process_image(file_storage, target)
    except ImageValidationError as e:
        raise ValidationError(f"Invalid image: {e}") from e

    recipe.image_url = f"{UPLOAD_URL_PREFIX}/{os.path.basename(final_path)}"
    session.commit()
    logger.info("Stored image for recipe %s at %s", recipe.id, final_path)
    return recipe
