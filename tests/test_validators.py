from datetime import date

import pytest
from pydantic import ValidationError

from utils.dates import parse_week_start, shift_week, week_days, week_start_for, weeks_in_month
from utils.sanitizer import clean_text, sanitize_url
from utils.validators import (
    GroceryItemUpdate,
    IngredientLineInput,
    RecipeCreate,
    RecipeUpdate,
    WeekQuery,
    describe_validation_error,
)


class TestWeekHelpers:
    def test_parse_monday(self):
        assert parse_week_start('2026-10-19') == date(2026, 10, 19)

    @pytest.mark.parametrize('value', ['2026-10-20', '2026-10-25'])
    def test_other_weekdays_rejected(self, value):
        with pytest.raises(ValueError, match='Monday'):
            parse_week_start(value)

    @pytest.mark.parametrize('value', ['', '2026-1-5', '2026-02-30', '19/10/2026', None])
    def test_malformed_dates_rejected(self, value):
        with pytest.raises(ValueError, match='YYYY-MM-DD'):
            parse_week_start(value)

    def test_week_start_for(self):
        assert week_start_for(date(2026, 10, 25)) == date(2026, 10, 19)
        assert week_start_for(date(2026, 10, 19)) == date(2026, 10, 19)

    def test_shift_week_crosses_year(self):
        assert shift_week('2026-12-28', 1) == '2027-01-04'
        assert shift_week('2026-10-19', -1) == '2026-10-12'

    def test_week_days(self):
        days = week_days('2026-10-19')
        assert days[0] == ('Monday', date(2026, 10, 19))
        assert days[-1] == ('Sunday', date(2026, 10, 25))

    def test_weeks_in_month_includes_partial_weeks(self):
        weeks = weeks_in_month(2026, 10)
        assert weeks[0] == date(2026, 9, 28)
        assert weeks[-1] == date(2026, 10, 26)
        assert len(weeks) == 5

    def test_shift_week_off_the_calendar_is_none(self):
        assert shift_week('0001-01-01', -1) is None
        assert shift_week('9999-12-27', 1) is None
        assert shift_week('9999-12-20', 1) == '9999-12-27'

    def test_weeks_in_last_supported_month(self):
        weeks = weeks_in_month(9999, 12)
        assert weeks[0] == date(9999, 11, 29)
        assert weeks[-1] == date(9999, 12, 27)


class TestSanitizer:
    def test_control_characters_removed(self):
        assert clean_text('milk\x00\x07') == 'milk'

    def test_whitespace_preserved(self):
        assert clean_text(' onion ') == ' onion '

    def test_newlines_collapsed_unless_kept(self):
        assert clean_text('a\nb') == 'a b'
        assert clean_text('a\r\nb', keep_newlines=True) == 'a\nb'

    def test_truncates(self):
        assert clean_text('abcdef', max_length=3) == 'abc'

    def test_none_passes_through(self):
        assert clean_text(None) is None

    @pytest.mark.parametrize('url', ['javascript:alert(1)', 'data:text/html,hi', ''])
    def test_unsafe_urls_rejected(self, url):
        assert sanitize_url(url) == ''

    @pytest.mark.parametrize('url', ['https://example.com/tacos.jpg', '/uploads/recipe_1.jpg'])
    def test_safe_urls_kept(self, url):
        assert sanitize_url(url) == url


class TestSchemas:
    def test_recipe_name_is_stripped(self):
        assert RecipeCreate(name='  Beef Tacos ').name == 'Beef Tacos'

    def test_blank_optional_fields_become_none(self):
        recipe = RecipeCreate(name='Soup', cuisine='', cook_time='', meal_type='')
        assert recipe.cuisine is None
        assert recipe.cook_time is None
        assert recipe.meal_type is None

    def test_numeric_strings_are_coerced(self):
        assert RecipeCreate(name='Soup', cook_time='45').cook_time == 45

    def test_negative_cook_time_rejected(self):
        with pytest.raises(ValidationError):
            RecipeCreate(name='Soup', cook_time=-5)

    def test_long_cook_times_and_large_batches_accepted(self):
        recipe = RecipeCreate(name='Cured Salmon', cook_time=3 * 24 * 60, serving_size=250)
        assert recipe.cook_time == 4320
        assert recipe.serving_size == 250

    def test_extra_fields_ignored(self):
        recipe = RecipeCreate.model_validate({'name': 'Soup', 'id': 7, 'created_at': 'now'})
        assert not hasattr(recipe, 'created_at')

    def test_ingredient_name_keeps_whitespace(self):
        assert IngredientLineInput(ingredient_name='Onion ').ingredient_name == 'Onion '

    def test_blank_ingredient_name_rejected(self):
        with pytest.raises(ValidationError):
            IngredientLineInput(ingredient_name='   ')

    def test_update_tracks_only_given_fields(self):
        update = RecipeUpdate.model_validate({'cook_time': 10})
        assert update.model_fields_set == {'cook_time'}

    def test_grocery_update_rejects_null_checked(self):
        with pytest.raises(ValidationError):
            GroceryItemUpdate.model_validate({'is_checked': None})

    def test_describe_missing_and_invalid(self):
        with pytest.raises(ValidationError) as excinfo:
            WeekQuery.model_validate({})
        assert describe_validation_error(excinfo.value) == 'week_start is required'

        with pytest.raises(ValidationError) as excinfo:
            WeekQuery.model_validate({'week_start': '2026-10-21'})
        assert describe_validation_error(excinfo.value) == 'week_start: must be the date of a Monday'
