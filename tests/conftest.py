import pytest

from app import create_app
from models import db as _db
import services
from utils.validators import MealPlanInput, RecipeCreate

WEEK = '2026-10-19'
NEXT_WEEK = '2026-10-26'


@pytest.fixture
def app(tmp_path):
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return _db.session


@pytest.fixture
def make_recipe(session):
    """Create a recipe from (name, quantity) ingredient pairs."""
    def _make(name, ingredients=(), **fields):
        data = RecipeCreate.model_validate({
            'name': name,
            'ingredients': [{'ingredient_name': n, 'quantity': q} for n, q in ingredients],
            **fields,
        })
        return services.create_recipe(session, data)
    return _make


@pytest.fixture
def plan_meal(session):
    """Assign a recipe to a slot."""
    def _plan(recipe_id, day='Monday', meal_type='dinner', week=WEEK):
        entry, _ = services.assign_meal(session, MealPlanInput(
            recipe_id=recipe_id, day_of_week=day, meal_type=meal_type, week_start_date=week,
        ))
        return entry
    return _plan
