"""
Services Package

Business logic for recipes, meal plans and grocery lists. Every function
takes the SQLAlchemy session as its first argument.
"""

from .errors import (
    MealPlannerError,
    NotFoundError,
    ValidationError,
)

from .recipes import (
    list_recipes,
    list_filter_options,
    get_recipe,
    create_recipe,
    update_recipe,
    delete_recipe,
    set_recipe_image,
)

from .mealplan import (
    list_meal_plan,
    assign_meal,
    remove_meal,
    build_week_grid,
    get_month_overview,
)

from .grocery import (
    merge_ingredient_lines,
    generate_grocery_list,
    list_grocery_items,
    get_grocery_item,
    add_grocery_item,
    update_grocery_item,
    toggle_grocery_item,
    delete_grocery_item,
    clear_checked_items,
)

from .seed import seed_sample_data

__all__ = [
    # Errors
    'MealPlannerError',
    'NotFoundError',
    'ValidationError',
    # Recipes
    'list_recipes',
    'list_filter_options',
    'get_recipe',
    'create_recipe',
    'update_recipe',
    'delete_recipe',
    'set_recipe_image',
    # Meal plan
    'list_meal_plan',
    'assign_meal',
    'remove_meal',
    'build_week_grid',
    'get_month_overview',
    # Grocery list
    'merge_ingredient_lines',
    'generate_grocery_list',
    'list_grocery_items',
    'get_grocery_item',
    'add_grocery_item',
    'update_grocery_item',
    'toggle_grocery_item',
    'delete_grocery_item',
    'clear_checked_items',
    # Sample data
    'seed_sample_data',
]
