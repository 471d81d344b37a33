"""
Grocery List Service

Generates a week's grocery list from its meal plan and manages the
resulting items.
"""

import logging

from models import GroceryItem, MealPlan, RecipeIngredient
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

QUANTITY_SEPARATOR = ' + '


def merge_ingredient_lines(lines):
    """
    Merge ingredient lines that share a name, ignoring letter case.

    Names are compared lower-cased but not trimmed. The first casing seen
    is kept for display, and quantities are joined in encounter order.
    A missing quantity contributes an empty segment.

    Args:
        lines: iterable of (ingredient_name, quantity) pairs

    Returns:
        List of (name, quantity_text) pairs in first-encounter order
    """
    merged = {}
    for name, quantity in lines:
        key = name.lower()
        if key not in merged:
            merged[key] = {'name': name, 'quantities': []}
        merged[key]['quantities'].append(quantity or '')

    return [
        (entry['name'], QUANTITY_SEPARATOR.join(entry['quantities']))
        for entry in merged.values()
    ]


def _week_ingredient_lines(session, week_start):
    """Ingredient lines of every planned meal, once per meal-plan entry."""
    return (
        session.query(RecipeIngredient.ingredient_name, RecipeIngredient.quantity)
        .join(MealPlan, MealPlan.recipe_id == RecipeIngredient.recipe_id)
        .filter(MealPlan.week_start_date == week_start)
        .order_by(MealPlan.id, RecipeIngredient.id)
        .all()
    )


def generate_grocery_list(session, week_start):
    """
    Replace the week's grocery list with one built from its meal plan.

    Every existing item for the week is discarded, manual ones included.
    Returns the new GroceryItem rows (empty when nothing is planned).
    """
    lines = _week_ingredient_lines(session, week_start)

    removed = session.query(GroceryItem).filter_by(week_start_date=week_start).delete()

    items = [
        GroceryItem(item_name=name, quantity=quantity, is_checked=False, week_start_date=week_start)
        for name, quantity in merge_ingredient_lines(lines)
    ]
    session.add_all(items)
    session.commit()

    logger.info(
        "Generated grocery list for week %s: %d lines -> %d items (%d old items removed)",
        week_start, len(lines), len(items), removed,
    )
    return items


def list_grocery_items(session, week_start):
    """Items for the week, unchecked first, then by name."""
    return (
        session.query(GroceryItem)
        .filter_by(week_start_date=week_start)
        .order_by(GroceryItem.is_checked, GroceryItem.item_name)
        .all()
    )


def get_grocery_item(session, item_id):
    item = session.get(GroceryItem, item_id)
    if item is None:
        raise NotFoundError('Item not found')
    return item


def add_grocery_item(session, data):
    """Add a manual item (GroceryItemCreate); it starts unchecked."""
    item = GroceryItem(
        item_name=data.item_name,
        quantity=data.quantity or '',
        is_checked=False,
        week_start_date=data.week_start_date,
    )
    session.add(item)
    session.commit()
    logger.info("Added grocery item %s for week %s", item.id, item.week_start_date)
    return item


def update_grocery_item(session, item_id, data):
    """Apply the fields present in a GroceryItemUpdate."""
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError('No fields to update')

    item = get_grocery_item(session, item_id)
    for field, value in changes.items():
        setattr(item, field, value)
    session.commit()
    return item


def toggle_grocery_item(session, item_id):
    item = get_grocery_item(session, item_id)
    item.is_checked = not item.is_checked
    session.commit()
    return item


def delete_grocery_item(session, item_id):
    item = get_grocery_item(session, item_id)
    session.delete(item)
    session.commit()


def clear_checked_items(session, week_start):
    """Delete the week's checked items. Returns how many were removed."""
    removed = (
        session.query(GroceryItem)
        .filter_by(week_start_date=week_start, is_checked=True)
        .delete()
    )
    session.commit()
    logger.info("Cleared %d checked grocery items for week %s", removed, week_start)
    return removed
