"""
JSON API

REST endpoints under /api. Request bodies and query strings are parsed
into pydantic schemas before any service call; service errors map to
400/404 and database failures to 500.
"""

import logging
from datetime import datetime

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError as InputValidationError
from sqlalchemy.exc import SQLAlchemyError

import services
from models import db
from services.errors import MealPlannerError, ValidationError
from utils.validators import (
    GroceryItemCreate,
    GroceryItemUpdate,
    MealPlanInput,
    RecipeCreate,
    RecipeFilters,
    RecipeUpdate,
    WeekQuery,
    describe_validation_error,
)

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def _week_from_args():
    return WeekQuery.model_validate(request.args.to_dict()).week_start


# ============================================
# ERROR HANDLERS
# ============================================

@api.errorhandler(MealPlannerError)
def handle_service_error(e):
    return jsonify({'error': e.message}), e.status_code


@api.errorhandler(InputValidationError)
def handle_invalid_input(e):
    return jsonify({'error': describe_validation_error(e)}), 400


@api.errorhandler(SQLAlchemyError)
def handle_database_error(e):
    db.session.rollback()
    logger.exception("Database error on %s %s", request.method, request.path)
    return jsonify({'error': str(getattr(e, 'orig', None) or e)}), 500


# ============================================
# RECIPES
# ============================================

@api.route('/recipes', methods=['GET'])
def recipes_list():
    filters = RecipeFilters.model_validate(request.args.to_dict())
    recipes = services.list_recipes(db.session, **filters.model_dump(exclude_none=True))
    return jsonify([recipe.to_dict() for recipe in recipes])


@api.route('/recipes/filters', methods=['GET'])
def recipes_filter_options():
    return jsonify(services.list_filter_options(db.session))


@api.route('/recipes/<int:recipe_id>', methods=['GET'])
def recipe_detail(recipe_id):
    recipe = services.get_recipe(db.session, recipe_id)
    return jsonify(recipe.to_dict(include_ingredients=True))


@api.route('/recipes', methods=['POST'])
def recipe_create():
    data = RecipeCreate.model_validate(_json_body())
    recipe = services.create_recipe(db.session, data)
    return jsonify({'id': recipe.id, 'message': 'Recipe created successfully'}), 201


@api.route('/recipes/<int:recipe_id>', methods=['PUT'])
def recipe_update(recipe_id):
    data = RecipeUpdate.model_validate(_json_body())
    services.update_recipe(db.session, recipe_id, data)
    return jsonify({'message': 'Recipe updated successfully'})


@api.route('/recipes/<int:recipe_id>', methods=['DELETE'])
def recipe_delete(recipe_id):
    services.delete_recipe(db.session, recipe_id, upload_folder=current_app.config['UPLOAD_FOLDER'])
    return jsonify({'message': 'Recipe deleted successfully'})


@api.route('/recipes/<int:recipe_id>/image', methods=['POST'])
def recipe_upload_image(recipe_id):
    recipe = services.set_recipe_image(
        db.session, recipe_id, request.files.get('image'), current_app.config['UPLOAD_FOLDER']
    )
    return jsonify({'id': recipe.id, 'image_url': recipe.image_url, 'message': 'Image uploaded'})


# ============================================
# MEAL PLAN
# ============================================

@api.route('/meal-plan', methods=['GET'])
def meal_plan_list():
    week_start = _week_from_args()
    entries = services.list_meal_plan(db.session, week_start)
    return jsonify([entry.to_dict() for entry in entries])


@api.route('/meal-plan', methods=['POST'])
def meal_plan_assign():
    data = MealPlanInput.model_validate(_json_body())
    entry, created = services.assign_meal(db.session, data)
    if created:
        return jsonify({'id': entry.id, 'message': 'Meal added to plan'}), 201
    return jsonify({'id': entry.id, 'message': 'Meal plan updated'})


@api.route('/meal-plan/<int:entry_id>', methods=['DELETE'])
def meal_plan_remove(entry_id):
    services.remove_meal(db.session, entry_id)
    return jsonify({'message': 'Meal removed from plan'})


# ============================================
# GROCERY LIST
# ============================================

@api.route('/grocery-list', methods=['GET'])
def grocery_list():
    week_start = _week_from_args()
    items = services.list_grocery_items(db.session, week_start)
    return jsonify([item.to_dict() for item in items])


@api.route('/grocery-list/generate', methods=['POST'])
def grocery_generate():
    week_start = WeekQuery.model_validate(_json_body()).week_start
    items = services.generate_grocery_list(db.session, week_start)
    return jsonify({'message': 'Grocery list generated', 'items': [item.to_dict() for item in items]})


@api.route('/grocery-list', methods=['POST'])
def grocery_add():
    data = GroceryItemCreate.model_validate(_json_body())
    item = services.add_grocery_item(db.session, data)
    return jsonify({'id': item.id, 'message': 'Item added to grocery list'}), 201


@api.route('/grocery-list/<int:item_id>', methods=['PUT'])
def grocery_update(item_id):
    data = GroceryItemUpdate.model_validate(_json_body())
    services.update_grocery_item(db.session, item_id, data)
    return jsonify({'message': 'Item updated'})


@api.route('/grocery-list/<int:item_id>', methods=['DELETE'])
def grocery_delete(item_id):
    services.delete_grocery_item(db.session, item_id)
    return jsonify({'message': 'Item deleted'})


# ============================================
# HEALTH
# ============================================

@api.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'healthy', 'timestamp': datetime.now().isoformat()})
