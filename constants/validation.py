"""
Validation Constants

Contains whitelist values for validating user input before it
reaches the database.
"""

# Meal types a recipe can be tagged with
RECIPE_MEAL_TYPES = ('breakfast', 'lunch', 'dinner', 'snack')

# Meal types that have a slot in the weekly planner (no snack slot)
PLAN_MEAL_TYPES = ('breakfast', 'lunch', 'dinner')

# Days of the week, Monday first; the order is the planner display order
DAYS_OF_WEEK = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')

# Maximum field lengths
MAX_LENGTHS = {
    'recipe_name': 200,
    'ingredient_name': 200,
    'quantity': 100,
    'tag': 50,
    'instructions': 50000,
    'image_url': 500,
    'item_name': 200,
}

# Allowed image extensions
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
