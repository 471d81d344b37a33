import io
import os

import pytest
from PIL import Image

from models import MealPlan, RecipeIngredient

from conftest import WEEK

TACOS = {
    'name': 'Beef Tacos',
    'meal_type': 'dinner',
    'cuisine': 'Mexican',
    'dish_type': 'tacos',
    'protein_type': 'beef',
    'cooking_method': 'stovetop',
    'cook_time': 25,
    'serving_size': 4,
    'instructions': '1. Brown beef.\n2. Fill shells.',
    'ingredients': [
        {'ingredient_name': 'ground beef', 'quantity': '1 lb'},
        {'ingredient_name': 'taco shells', 'quantity': '8 shells'},
    ],
}


def _create(client, **overrides):
    resp = client.post('/api/recipes', json={**TACOS, **overrides})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['id']


class TestCreateRecipe:
    def test_create_returns_id(self, client):
        resp = client.post('/api/recipes', json=TACOS)
        assert resp.status_code == 201
        body = resp.get_json()
        assert body['message'] == 'Recipe created successfully'
        assert isinstance(body['id'], int)

    def test_created_recipe_has_ingredients(self, client):
        recipe_id = _create(client)
        body = client.get(f'/api/recipes/{recipe_id}').get_json()
        assert body['name'] == 'Beef Tacos'
        assert body['cook_time'] == 25
        assert [(i['ingredient_name'], i['quantity']) for i in body['ingredients']] == [
            ('ground beef', '1 lb'),
            ('taco shells', '8 shells'),
        ]

    def test_name_is_required(self, client):
        resp = client.post('/api/recipes', json={'cuisine': 'Thai'})
        assert resp.status_code == 400
        assert 'name' in resp.get_json()['error']

    def test_blank_name_rejected(self, client):
        resp = client.post('/api/recipes', json={'name': '   '})
        assert resp.status_code == 400
        assert 'Recipe name is required' in resp.get_json()['error']

    def test_unknown_meal_type_rejected(self, client):
        resp = client.post('/api/recipes', json={'name': 'Cake', 'meal_type': 'dessert'})
        assert resp.status_code == 400
        assert 'meal_type' in resp.get_json()['error']

    def test_non_json_body_rejected(self, client):
        resp = client.post('/api/recipes', data='name=Soup', content_type='text/plain')
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'Request body must be a JSON object'

    def test_javascript_image_url_rejected(self, client):
        resp = client.post('/api/recipes', json={'name': 'Soup', 'image_url': 'javascript:alert(1)'})
        assert resp.status_code == 400


class TestListRecipes:
    @pytest.fixture(autouse=True)
    def recipes(self, client):
        _create(client)
        _create(client, name='Chicken Stir Fry', cuisine='Asian', dish_type='stir-fry',
                protein_type='chicken', ingredients=[])
        _create(client, name='Classic Pancakes', meal_type='breakfast', cuisine='American',
                dish_type='pancakes', protein_type='vegetarian', ingredients=[])

    def test_list_all_sorted_by_name_without_ingredients(self, client):
        body = client.get('/api/recipes').get_json()
        assert [r['name'] for r in body] == ['Beef Tacos', 'Chicken Stir Fry', 'Classic Pancakes']
        assert all('ingredients' not in r for r in body)

    def test_exact_match_filters(self, client):
        body = client.get('/api/recipes?meal_type=dinner&cuisine=Asian').get_json()
        assert [r['name'] for r in body] == ['Chicken Stir Fry']

    def test_filter_is_exact_not_substring(self, client):
        assert client.get('/api/recipes?cuisine=Asia').get_json() == []

    def test_search_is_case_insensitive_substring(self, client):
        body = client.get('/api/recipes?search=PAN').get_json()
        assert [r['name'] for r in body] == ['Classic Pancakes']

    def test_empty_filter_values_are_ignored(self, client):
        body = client.get('/api/recipes?meal_type=&cuisine=&search=').get_json()
        assert len(body) == 3

    def test_invalid_meal_type_filter_rejected(self, client):
        assert client.get('/api/recipes?meal_type=brunch').status_code == 400

    def test_filter_options(self, client):
        body = client.get('/api/recipes/filters').get_json()
        assert body['cuisine'] == ['American', 'Asian', 'Mexican']
        assert body['protein_type'] == ['beef', 'chicken', 'vegetarian']


class TestUpdateRecipe:
    def test_partial_update_changes_only_given_fields(self, client):
        recipe_id = _create(client)
        resp = client.put(f'/api/recipes/{recipe_id}', json={'cook_time': 40})
        assert resp.status_code == 200
        assert resp.get_json()['message'] == 'Recipe updated successfully'

        body = client.get(f'/api/recipes/{recipe_id}').get_json()
        assert body['cook_time'] == 40
        assert body['name'] == 'Beef Tacos'
        assert len(body['ingredients']) == 2

    def test_ingredients_are_replaced(self, client):
        recipe_id = _create(client)
        client.put(f'/api/recipes/{recipe_id}', json={
            'ingredients': [{'ingredient_name': 'ground turkey', 'quantity': '1 lb'}],
        })
        body = client.get(f'/api/recipes/{recipe_id}').get_json()
        assert [i['ingredient_name'] for i in body['ingredients']] == ['ground turkey']

    def test_empty_ingredients_list_clears_lines(self, client, session):
        recipe_id = _create(client)
        client.put(f'/api/recipes/{recipe_id}', json={'ingredients': []})
        assert session.query(RecipeIngredient).filter_by(recipe_id=recipe_id).count() == 0

    def test_null_name_rejected(self, client):
        recipe_id = _create(client)
        assert client.put(f'/api/recipes/{recipe_id}', json={'name': None}).status_code == 400

    def test_unknown_recipe_is_404(self, client):
        resp = client.put('/api/recipes/999', json={'name': 'Ghost'})
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'Recipe not found'


class TestDeleteRecipe:
    def test_get_unknown_recipe_is_404(self, client):
        resp = client.get('/api/recipes/12345')
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'Recipe not found'

    def test_delete_cascades_to_ingredients_and_meal_plan(self, client, session):
        recipe_id = _create(client)
        client.post('/api/meal-plan', json={
            'recipe_id': recipe_id, 'day_of_week': 'Monday', 'meal_type': 'dinner', 'week_start_date': WEEK,
        })

        resp = client.delete(f'/api/recipes/{recipe_id}')
        assert resp.status_code == 200
        assert resp.get_json()['message'] == 'Recipe deleted successfully'

        assert client.get(f'/api/recipes/{recipe_id}').status_code == 404
        assert session.query(RecipeIngredient).filter_by(recipe_id=recipe_id).count() == 0
        assert session.query(MealPlan).filter_by(recipe_id=recipe_id).count() == 0

    def test_delete_unknown_recipe_is_404(self, client):
        assert client.delete('/api/recipes/999').status_code == 404


class TestRecipeImage:
    def _png(self):
        buf = io.BytesIO()
        Image.new('RGBA', (40, 30), (200, 100, 50, 255)).save(buf, 'PNG')
        buf.seek(0)
        return buf

    def test_upload_sets_image_url(self, client, app):
        recipe_id = _create(client)
        resp = client.post(f'/api/recipes/{recipe_id}/image',
                           data={'image': (self._png(), 'tacos.png')},
                           content_type='multipart/form-data')
        assert resp.status_code == 200
        assert resp.get_json()['image_url'] == f'/uploads/recipe_{recipe_id}.jpg'

        served = client.get(f'/uploads/recipe_{recipe_id}.jpg')
        assert served.status_code == 200
        assert served.mimetype == 'image/jpeg'

    def test_upload_rejects_non_image(self, client):
        recipe_id = _create(client)
        resp = client.post(f'/api/recipes/{recipe_id}/image',
                           data={'image': (io.BytesIO(b'not an image'), 'notes.png')},
                           content_type='multipart/form-data')
        assert resp.status_code == 400
        assert resp.get_json()['error'].startswith('Invalid image')

    def test_upload_rejects_wrong_extension(self, client):
        recipe_id = _create(client)
        resp = client.post(f'/api/recipes/{recipe_id}/image',
                           data={'image': (self._png(), 'tacos.exe')},
                           content_type='multipart/form-data')
        assert resp.status_code == 400

    def test_upload_without_file(self, client):
        recipe_id = _create(client)
        resp = client.post(f'/api/recipes/{recipe_id}/image', data={}, content_type='multipart/form-data')
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'No image selected'

    def _upload(self, client, recipe_id):
        resp = client.post(f'/api/recipes/{recipe_id}/image',
                           data={'image': (self._png(), 'tacos.png')},
                           content_type='multipart/form-data')
        assert resp.status_code == 200

    def test_delete_removes_own_upload(self, client, app):
        recipe_id = _create(client)
        self._upload(client, recipe_id)
        path = os.path.join(app.config['UPLOAD_FOLDER'], f'recipe_{recipe_id}.jpg')
        assert os.path.exists(path)

        client.delete(f'/api/recipes/{recipe_id}')
        assert not os.path.exists(path)

    def test_delete_keeps_upload_owned_by_another_recipe(self, client, app):
        owner_id = _create(client)
        self._upload(client, owner_id)
        borrower_id = _create(client, name='Copycat Tacos', image_url=f'/uploads/recipe_{owner_id}.jpg')

        assert client.delete(f'/api/recipes/{borrower_id}').status_code == 200
        assert os.path.exists(os.path.join(app.config['UPLOAD_FOLDER'], f'recipe_{owner_id}.jpg'))
        assert client.get(f'/uploads/recipe_{owner_id}.jpg').status_code == 200
