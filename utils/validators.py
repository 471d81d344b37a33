"""
Input validation schemas using Pydantic.

Every request body or query string is parsed into one of these models
before the service layer touches the database.
"""
from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, field_validator

from constants.validation import MAX_LENGTHS
from utils.dates import parse_week_start
from utils.sanitizer import clean_text, sanitize_url

RecipeMealType = Literal['breakfast', 'lunch', 'dinner', 'snack']
PlanMealType = Literal['breakfast', 'lunch', 'dinner']
DayOfWeek = Literal['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']


def _check_week_start(value: str) -> str:
    parse_week_start(value)
    return value


WeekStart = Annotated[str, AfterValidator(_check_week_start)]


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class IngredientLineInput(BaseModel):
    """One ingredient line. The name is stored untrimmed."""
    model_config = ConfigDict(extra='ignore')

    ingredient_name: str = Field(..., max_length=MAX_LENGTHS['ingredient_name'])
    quantity: Optional[str] = Field(None, max_length=MAX_LENGTHS['quantity'])

    @field_validator('ingredient_name')
    @classmethod
    def name_not_blank(cls, v):
        v = clean_text(v, MAX_LENGTHS['ingredient_name'])
        if not v.strip():
            raise ValueError('ingredient_name must not be blank')
        return v

    @field_validator('quantity')
    @classmethod
    def clean_quantity(cls, v):
        return clean_text(v, MAX_LENGTHS['quantity'])


class _RecipeFields(BaseModel):
    model_config = ConfigDict(extra='ignore')

    meal_type: Optional[RecipeMealType] = None
    cuisine: Optional[str] = Field(None, max_length=MAX_LENGTHS['tag'])
    dish_type: Optional[str] = Field(None, max_length=MAX_LENGTHS['tag'])
    protein_type: Optional[str] = Field(None, max_length=MAX_LENGTHS['tag'])
    cooking_method: Optional[str] = Field(None, max_length=MAX_LENGTHS['tag'])
    cook_time: Optional[int] = Field(None, ge=0)
    serving_size: Optional[int] = Field(None, ge=1)
    instructions: Optional[str] = Field(None, max_length=MAX_LENGTHS['instructions'])
    image_url: Optional[str] = Field(None, max_length=MAX_LENGTHS['image_url'])
    ingredients: Optional[List[IngredientLineInput]] = None

    @field_validator('meal_type', 'cuisine', 'dish_type', 'protein_type', 'cooking_method',
                     'cook_time', 'serving_size', 'image_url', mode='before')
    @classmethod
    def blank_is_none(cls, v):
        return _blank_to_none(v)

    @field_validator('cuisine', 'dish_type', 'protein_type', 'cooking_method')
    @classmethod
    def clean_tag(cls, v):
        if v is None:
            return v
        return clean_text(v, MAX_LENGTHS['tag']).strip() or None

    @field_validator('instructions')
    @classmethod
    def clean_instructions(cls, v):
        return clean_text(v, MAX_LENGTHS['instructions'], keep_newlines=True)

    @field_validator('image_url')
    @classmethod
    def safe_image_url(cls, v):
        if v is None:
            return v
        safe = sanitize_url(v)
        if not safe:
            raise ValueError('image_url must be an http(s) URL or a relative path')
        return safe


def _clean_recipe_name(v):
    if v is None:
        raise ValueError('Recipe name is required')
    v = clean_text(v, MAX_LENGTHS['recipe_name']).strip()
    if not v:
        raise ValueError('Recipe name is required')
    return v


class RecipeCreate(_RecipeFields):
    """Body of POST /api/recipes."""
    name: str

    @field_validator('name', mode='before')
    @classmethod
    def name_required(cls, v):
        return _clean_recipe_name(v)


class RecipeUpdate(_RecipeFields):
    """Body of PUT /api/recipes/<id>. Only fields present in the body are applied."""
    name: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def name_not_null(cls, v):
        return _clean_recipe_name(v)


class RecipeFilters(BaseModel):
    """Query string of GET /api/recipes."""
    model_config = ConfigDict(extra='ignore')

    meal_type: Optional[RecipeMealType] = None
    cuisine: Optional[str] = None
    dish_type: Optional[str] = None
    protein_type: Optional[str] = None
    cooking_method: Optional[str] = None
    search: Optional[str] = Field(None, max_length=MAX_LENGTHS['recipe_name'])

    @field_validator('*', mode='before')
    @classmethod
    def blank_is_none(cls, v):
        return _blank_to_none(v)


class WeekQuery(BaseModel):
    """Query string or body naming a week."""
    model_config = ConfigDict(extra='ignore')

    week_start: WeekStart


class MealPlanInput(BaseModel):
    """Body of POST /api/meal-plan."""
    model_config = ConfigDict(extra='ignore')

    recipe_id: int = Field(..., ge=1)
    day_of_week: DayOfWeek
    meal_type: PlanMealType
    week_start_date: WeekStart


class GroceryItemCreate(BaseModel):
    """Body of POST /api/grocery-list."""
    model_config = ConfigDict(extra='ignore')

    item_name: str = Field(..., max_length=MAX_LENGTHS['item_name'])
    quantity: Optional[str] = Field('', max_length=MAX_LENGTHS['quantity'])
    week_start_date: WeekStart

    @field_validator('item_name')
    @classmethod
    def name_not_blank(cls, v):
        v = clean_text(v, MAX_LENGTHS['item_name']).strip()
        if not v:
            raise ValueError('item_name must not be blank')
        return v

    @field_validator('quantity')
    @classmethod
    def quantity_default(cls, v):
        return clean_text(v, MAX_LENGTHS['quantity']) or ''


class GroceryItemUpdate(BaseModel):
    """Body of PUT /api/grocery-list/<id>."""
    model_config = ConfigDict(extra='ignore')

    item_name: Optional[str] = Field(None, max_length=MAX_LENGTHS['item_name'])
    quantity: Optional[str] = Field(None, max_length=MAX_LENGTHS['quantity'])
    is_checked: Optional[bool] = None

    @field_validator('item_name', mode='before')
    @classmethod
    def name_not_blank(cls, v):
        if v is None or not str(v).strip():
            raise ValueError('item_name must not be blank')
        return clean_text(v, MAX_LENGTHS['item_name']).strip()

    @field_validator('quantity')
    @classmethod
    def quantity_default(cls, v):
        return clean_text(v, MAX_LENGTHS['quantity']) or ''

    @field_validator('is_checked', mode='before')
    @classmethod
    def checked_not_null(cls, v):
        if v is None:
            raise ValueError('is_checked must be true or false')
        return v


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable message."""
    messages = []
    for err in exc.errors():
        field = '.'.join(str(part) for part in err['loc'])
        if err['type'] == 'missing':
            messages.append(f"{field} is required")
        else:
            msg = err['msg']
            if msg.startswith('Value error, '):
                msg = msg[len('Value error, '):]
            messages.append(f"{field}: {msg}" if field else msg)
    return '; '.join(messages)
