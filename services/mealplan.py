"""
Meal Plan Service

Assigns recipes to (day, meal type) slots of a week and reads plans back
in calendar order.
"""

import logging
from datetime import timedelta

from sqlalchemy import case, func

from constants.validation import DAYS_OF_WEEK, PLAN_MEAL_TYPES
from models import MealPlan, Recipe
from utils.dates import weeks_in_month
from .errors import NotFoundError

logger = logging.getLogger(__name__)

_DAY_ORDER = case(
    {day: position for position, day in enumerate(DAYS_OF_WEEK, start=1)},
    value=MealPlan.day_of_week,
)
_MEAL_ORDER = case(
    {meal: position for position, meal in enumerate(PLAN_MEAL_TYPES, start=1)},
    value=MealPlan.meal_type,
)


def list_meal_plan(session, week_start):
    """Entries for the week, Monday to Sunday, breakfast to dinner."""
    return (
        session.query(MealPlan)
        .join(Recipe, MealPlan.recipe_id == Recipe.id)
        .filter(MealPlan.week_start_date == week_start)
        .order_by(_DAY_ORDER, _MEAL_ORDER)
        .all()
    )


def assign_meal(session, data):
    """
    Put a recipe in a slot (MealPlanInput).

    An occupied slot keeps its entry and gets the new recipe, so a week
    never holds two entries for the same slot.

    Returns:
        (entry, created) where created is False when an existing entry was overwritten
    """
    if session.get(Recipe, data.recipe_id) is None:
        raise NotFoundError('Recipe not found')

    existing = (
        session.query(MealPlan)
        .filter_by(day_of_week=data.day_of_week, meal_type=data.meal_type,
                   week_start_date=data.week_start_date)
        .first()
    )

    if existing:
        existing.recipe_id = data.recipe_id
        session.commit()
        logger.info("Meal plan %s %s %s now recipe %s (entry %s)",
                    data.week_start_date, data.day_of_week, data.meal_type, data.recipe_id, existing.id)
        return existing, False

    entry = MealPlan(
        recipe_id=data.recipe_id,
        day_of_week=data.day_of_week,
        meal_type=data.meal_type,
        week_start_date=data.week_start_date,
    )
    session.add(entry)
    session.commit()
    logger.info("Meal plan %s %s %s set to recipe %s (entry %s)",
                data.week_start_date, data.day_of_week, data.meal_type, data.recipe_id, entry.id)
    return entry, True


def remove_meal(session, entry_id):
    entry = session.get(MealPlan, entry_id)
    if entry is None:
        raise NotFoundError('Meal plan entry not found')
    session.delete(entry)
    session.commit()
    logger.info("Removed meal plan entry %s", entry_id)


def build_week_grid(entries):
    """Map (day_of_week, meal_type) -> entry for rendering the planner."""
    return {(entry.day_of_week, entry.meal_type): entry for entry in entries}


def get_month_overview(session, year, month):
    """
    Planned meal counts for every week overlapping a month.

    Returns:
        List of dicts: { week_start, week_end, meal_count }
    """
    weeks = weeks_in_month(year, month)
    week_ids = [monday.isoformat() for monday in weeks]

    counts = dict(
        session.query(MealPlan.week_start_date, func.count(MealPlan.id))
        .filter(MealPlan.week_start_date.in_(week_ids))
        .group_by(MealPlan.week_start_date)
        .all()
    )

    return [
        {
            'week_start': monday.isoformat(),
            'week_end': (monday + timedelta(days=6)).isoformat(),
            'meal_count': counts.get(monday.isoformat(), 0),
        }
        for monday in weeks
    ]
