"""
Web Views

Server-rendered pages for browsing recipes, planning the week and
checking off the grocery list. Form posts redirect back to the page
they came from; validation problems are shown with flash messages.
"""

import logging
from datetime import date

from flask import (
    Blueprint, abort, current_app, flash, redirect, render_template,
    request, send_from_directory, url_for,
)
from pydantic import ValidationError as InputValidationError

import services
from constants.validation import PLAN_MEAL_TYPES, RECIPE_MEAL_TYPES
from models import db
from services.errors import NotFoundError, ValidationError
from utils.dates import current_week_id, shift_week, week_days, week_start_for
from utils.validators import (
    GroceryItemCreate,
    MealPlanInput,
    RecipeCreate,
    RecipeFilters,
    RecipeUpdate,
    describe_validation_error,
)

logger = logging.getLogger(__name__)

views = Blueprint('views', __name__)

RECIPE_FORM_FIELDS = (
    'name', 'meal_type', 'cuisine', 'dish_type', 'protein_type', 'cooking_method',
    'cook_time', 'serving_size', 'instructions', 'image_url',
)


def _selected_week(value=None):
    """
    Week identifier from the query string or form.

    Any valid date snaps to the Monday of its week; anything else falls
    back to the current week.
    """
    if value is None:
        value = request.values.get('week', '')
    try:
        return week_start_for(date.fromisoformat(value)).isoformat()
    except (TypeError, ValueError):
        return current_week_id()


def parse_ingredient_lines(text):
    """
    Parse the editor's ingredient box: one "name | quantity" per line.

    Blank lines are skipped; a line without "|" is a name with no quantity.
    """
    lines = []
    for raw in (text or '').splitlines():
        if not raw.strip():
            continue
        name, _, quantity = raw.partition('|')
        lines.append({'ingredient_name': name.strip(), 'quantity': quantity.strip() or None})
    return lines


def format_ingredient_lines(recipe):
    if recipe is None:
        return ''
    return '\n'.join(
        f"{ri.ingredient_name} | {ri.quantity}" if ri.quantity else ri.ingredient_name
        for ri in recipe.ingredients
    )


def _recipe_form_data():
    data = {field: request.form.get(field, '') for field in RECIPE_FORM_FIELDS}
    data['ingredients'] = parse_ingredient_lines(request.form.get('ingredients', ''))
    return data


def _get_recipe_or_404(recipe_id):
    try:
        return services.get_recipe(db.session, recipe_id)
    except NotFoundError:
        abort(404)


# ============================================
# ROUTES - HOME
# ============================================

@views.route('/')
def index():
    return redirect(url_for('views.recipes_list'))


# ============================================
# ROUTES - RECIPES
# ============================================

@views.route('/recipes')
def recipes_list():
    try:
        filters = RecipeFilters.model_validate(request.args.to_dict())
    except InputValidationError as e:
        flash(describe_validation_error(e), 'warning')
        filters = RecipeFilters()

    recipes = services.list_recipes(db.session, **filters.model_dump(exclude_none=True))
    return render_template(
        'recipes.html',
        recipes=recipes,
        filters=filters,
        options=services.list_filter_options(db.session),
        meal_types=RECIPE_MEAL_TYPES,
    )


@views.route('/recipes/<int:recipe_id>')
def recipe_view(recipe_id):
    recipe = _get_recipe_or_404(recipe_id)
    return render_template('recipe_view.html', recipe=recipe)


@views.route('/recipes/new', methods=['GET', 'POST'])
def recipe_add():
    if request.method == 'POST':
        form_data = _recipe_form_data()
        try:
            data = RecipeCreate.model_validate(form_data)
        except InputValidationError as e:
            flash(describe_validation_error(e), 'danger')
            return render_template('recipe_form.html', recipe=None, form=request.form,
                                   meal_types=RECIPE_MEAL_TYPES), 400

        recipe = services.create_recipe(db.session, data)
        flash(f'Recipe "{recipe.name}" created!', 'success')
        return redirect(url_for('views.recipe_view', recipe_id=recipe.id))

    return render_template('recipe_form.html', recipe=None, form=None, meal_types=RECIPE_MEAL_TYPES)


@views.route('/recipes/<int:recipe_id>/edit', methods=['GET', 'POST'])
def recipe_edit(recipe_id):
    recipe = _get_recipe_or_404(recipe_id)

    if request.method == 'POST':
        try:
            data = RecipeUpdate.model_validate(_recipe_form_data())
        except InputValidationError as e:
            flash(describe_validation_error(e), 'danger')
            return render_template('recipe_form.html', recipe=recipe, form=request.form,
                                   meal_types=RECIPE_MEAL_TYPES), 400

        services.update_recipe(db.session, recipe_id, data)
        flash(f'Recipe "{recipe.name}" updated!', 'success')
        return redirect(url_for('views.recipe_view', recipe_id=recipe_id))

    form = {field: getattr(recipe, field) or '' for field in RECIPE_FORM_FIELDS}
    form['ingredients'] = format_ingredient_lines(recipe)
    return render_template('recipe_form.html', recipe=recipe, form=form, meal_types=RECIPE_MEAL_TYPES)


@views.route('/recipes/<int:recipe_id>/delete', methods=['POST'])
def recipe_delete(recipe_id):
    recipe = _get_recipe_or_404(recipe_id)
    name = recipe.name
    services.delete_recipe(db.session, recipe_id, upload_folder=current_app.config['UPLOAD_FOLDER'])
    flash(f'Recipe "{name}" deleted!', 'success')
    return redirect(url_for('views.recipes_list'))


@views.route('/recipes/<int:recipe_id>/image', methods=['POST'])
def recipe_upload_image(recipe_id):
    try:
        services.set_recipe_image(db.session, recipe_id, request.files.get('image'),
                                  current_app.config['UPLOAD_FOLDER'])
        flash('Image uploaded!', 'success')
    except NotFoundError:
        abort(404)
    except ValidationError as e:
        flash(e.message, 'danger')
    return redirect(url_for('views.recipe_edit', recipe_id=recipe_id))


@views.route('/uploads/<path:filename>')
def uploaded_image(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


# ============================================
# ROUTES - MEAL PLANNER
# ============================================

@views.route('/planner')
def meal_plan():
    week = _selected_week()
    entries = services.list_meal_plan(db.session, week)

    recipes_by_meal = {
        meal_type: services.list_recipes(db.session, meal_type=meal_type)
        for meal_type in PLAN_MEAL_TYPES
    }

    return render_template(
        'mealplan.html',
        week=week,
        prev_week=shift_week(week, -1),
        next_week=shift_week(week, 1),
        days=week_days(week),
        meal_types=PLAN_MEAL_TYPES,
        grid=services.build_week_grid(entries),
        recipes_by_meal=recipes_by_meal,
        meal_count=len(entries),
    )


@views.route('/planner/assign', methods=['POST'])
def meal_plan_assign():
    week = _selected_week(request.form.get('week_start_date', ''))
    try:
        data = MealPlanInput.model_validate(request.form.to_dict())
        entry, created = services.assign_meal(db.session, data)
        flash('Meal added to plan' if created else 'Meal plan updated', 'success')
    except InputValidationError as e:
        flash(describe_validation_error(e), 'danger')
    except NotFoundError as e:
        flash(e.message, 'danger')
    return redirect(url_for('views.meal_plan', week=week))


@views.route('/planner/<int:entry_id>/remove', methods=['POST'])
def meal_plan_remove(entry_id):
    week = _selected_week()
    try:
        services.remove_meal(db.session, entry_id)
        flash('Meal removed from plan', 'success')
    except NotFoundError as e:
        flash(e.message, 'warning')
    return redirect(url_for('views.meal_plan', week=week))


@views.route('/planner/month')
def meal_plan_month():
    today = date.today()
    year = request.args.get('year', today.year, type=int)
    month = request.args.get('month', today.month, type=int)
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        year, month = today.year, today.month

    prev_year, prev_month = (year - 1, 12) if month == 1 else (year, month - 1)
    next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
    # No navigation off either end of the calendar
    if prev_year < 1:
        prev_year = prev_month = None
    if next_year > 9999:
        next_year = next_month = None

    return render_template(
        'mealplan_month.html',
        year=year,
        month=month,
        month_name=date(year, month, 1).strftime('%B'),
        weeks=services.get_month_overview(db.session, year, month),
        prev_year=prev_year, prev_month=prev_month,
        next_year=next_year, next_month=next_month,
        current_week=current_week_id(),
    )


# ============================================
# ROUTES - GROCERY LIST
# ============================================

@views.route('/grocery')
def grocery_list():
    week = _selected_week()
    items = services.list_grocery_items(db.session, week)
    return render_template(
        'grocery.html',
        week=week,
        prev_week=shift_week(week, -1),
        next_week=shift_week(week, 1),
        items=items,
        checked_count=sum(1 for item in items if item.is_checked),
    )


@views.route('/grocery/generate', methods=['POST'])
def grocery_generate():
    week = _selected_week()
    items = services.generate_grocery_list(db.session, week)
    if items:
        flash(f"Generated {len(items)} items from the meal plan", 'success')
    else:
        flash('No planned meals with ingredients this week', 'warning')
    return redirect(url_for('views.grocery_list', week=week))


@views.route('/grocery/add', methods=['POST'])
def grocery_add():
    week = _selected_week()
    try:
        data = GroceryItemCreate.model_validate({
            'item_name': request.form.get('item_name', ''),
            'quantity': request.form.get('quantity', ''),
            'week_start_date': week,
        })
        services.add_grocery_item(db.session, data)
    except InputValidationError as e:
        flash(describe_validation_error(e), 'danger')
    return redirect(url_for('views.grocery_list', week=week))


@views.route('/grocery/<int:item_id>/toggle', methods=['POST'])
def grocery_toggle(item_id):
    week = _selected_week()
    try:
        services.toggle_grocery_item(db.session, item_id)
    except NotFoundError as e:
        flash(e.message, 'warning')
    return redirect(url_for('views.grocery_list', week=week))


@views.route('/grocery/<int:item_id>/delete', methods=['POST'])
def grocery_delete(item_id):
    week = _selected_week()
    try:
        services.delete_grocery_item(db.session, item_id)
    except NotFoundError as e:
        flash(e.message, 'warning')
    return redirect(url_for('views.grocery_list', week=week))


@views.route('/grocery/clear-checked', methods=['POST'])
def grocery_clear_checked():
    week = _selected_week()
    removed = services.clear_checked_items(db.session, week)
    flash(f"Removed {removed} checked items", 'success')
    return redirect(url_for('views.grocery_list', week=week))
