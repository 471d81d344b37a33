"""
Sample Recipes

Starter recipes seeded into an empty database.
"""

SAMPLE_RECIPES = [
    {
        'name': 'Spaghetti Carbonara',
        'meal_type': 'dinner',
        'cuisine': 'Italian',
        'dish_type': 'pasta',
        'protein_type': 'pork',
        'cooking_method': 'stovetop',
        'cook_time': 30,
        'serving_size': 4,
        'instructions': (
            '1. Cook spaghetti according to package directions.\n'
            '2. Fry pancetta until crispy.\n'
            '3. Whisk eggs with parmesan cheese.\n'
            '4. Toss hot pasta with pancetta, then quickly mix in egg mixture.\n'
            '5. Season with black pepper and serve immediately.'
        ),
        'ingredients': [
            ('spaghetti', '1 lb'),
            ('pancetta', '8 oz'),
            ('eggs', '4 large'),
            ('parmesan cheese', '1 cup grated'),
            ('black pepper', '1 tsp'),
            ('salt', 'to taste'),
        ],
    },
    {
        'name': 'Chicken Stir Fry',
        'meal_type': 'dinner',
        'cuisine': 'Asian',
        'dish_type': 'stir-fry',
        'protein_type': 'chicken',
        'cooking_method': 'stovetop',
        'cook_time': 25,
        'serving_size': 4,
        'instructions': (
            '1. Cut chicken into bite-sized pieces.\n'
            '2. Heat oil in wok over high heat.\n'
            '3. Stir fry chicken until cooked, set aside.\n'
            '4. Stir fry vegetables until crisp-tender.\n'
            '5. Return chicken, add sauce, and toss to coat.\n'
            '6. Serve over rice.'
        ),
        'ingredients': [
            ('chicken breast', '1 lb'),
            ('broccoli', '2 cups'),
            ('bell pepper', '1 large'),
            ('soy sauce', '3 tbsp'),
            ('garlic', '3 cloves'),
            ('vegetable oil', '2 tbsp'),
            ('rice', '2 cups'),
        ],
    },
    {
        'name': 'Classic Pancakes',
        'meal_type': 'breakfast',
        'cuisine': 'American',
        'dish_type': 'pancakes',
        'protein_type': 'vegetarian',
        'cooking_method': 'stovetop',
        'cook_time': 20,
        'serving_size': 4,
        'instructions': (
            '1. Mix flour, sugar, baking powder, and salt.\n'
            '2. Whisk milk, egg, and melted butter.\n'
            '3. Combine wet and dry ingredients until just mixed.\n'
            '4. Pour batter onto hot griddle.\n'
            '5. Flip when bubbles form, cook until golden.\n'
            '6. Serve with maple syrup and butter.'
        ),
        'ingredients': [
            ('all-purpose flour', '1.5 cups'),
            ('milk', '1.25 cups'),
            ('egg', '1 large'),
            ('butter', '3 tbsp melted'),
            ('sugar', '2 tbsp'),
            ('baking powder', '2 tsp'),
            ('salt', '0.5 tsp'),
        ],
    },
    {
        'name': 'Beef Tacos',
        'meal_type': 'dinner',
        'cuisine': 'Mexican',
        'dish_type': 'tacos',
        'protein_type': 'beef',
        'cooking_method': 'stovetop',
        'cook_time': 25,
        'serving_size': 4,
        'instructions': (
            '1. Brown ground beef in a skillet.\n'
            '2. Add taco seasoning and water, simmer.\n'
            '3. Warm taco shells in oven.\n'
            '4. Fill shells with beef.\n'
            '5. Top with lettuce, cheese, tomatoes, and sour cream.'
        ),
        'ingredients': [
            ('ground beef', '1 lb'),
            ('taco seasoning', '1 packet'),
            ('taco shells', '8 shells'),
            ('shredded lettuce', '2 cups'),
            ('cheddar cheese', '1 cup shredded'),
            ('tomatoes', '2 diced'),
            ('sour cream', '0.5 cup'),
        ],
    },
    {
        'name': 'Caesar Salad',
        'meal_type': 'lunch',
        'cuisine': 'American',
        'dish_type': 'salad',
        'protein_type': 'vegetarian',
        'cooking_method': 'none',
        'cook_time': 15,
        'serving_size': 2,
        'instructions': (
            '1. Tear romaine lettuce into pieces.\n'
            '2. Make dressing: whisk garlic, anchovy paste, lemon juice, mustard, and olive oil.\n'
            '3. Toss lettuce with dressing.\n'
            '4. Add croutons and shaved parmesan.\n'
            '5. Season with black pepper.'
        ),
        'ingredients': [
            ('romaine lettuce', '2 heads'),
            ('parmesan cheese', '0.5 cup shaved'),
            ('croutons', '1 cup'),
            ('olive oil', '0.25 cup'),
            ('lemon juice', '2 tbsp'),
            ('garlic', '1 clove'),
            ('dijon mustard', '1 tsp'),
        ],
    },
    {
        'name': 'Air Fryer Salmon',
        'meal_type': 'dinner',
        'cuisine': 'American',
        'dish_type': 'fish',
        'protein_type': 'fish',
        'cooking_method': 'air-fryer',
        'cook_time': 12,
        'serving_size': 2,
        'instructions': (
            '1. Pat salmon fillets dry.\n'
            '2. Season with salt, pepper, and garlic powder.\n'
            '3. Brush with olive oil.\n'
            '4. Air fry at 400°F for 8-10 minutes.\n'
            '5. Squeeze fresh lemon juice on top before serving.'
        ),
        'ingredients': [
            ('salmon fillets', '2 (6 oz each)'),
            ('olive oil', '1 tbsp'),
            ('garlic powder', '0.5 tsp'),
            ('salt', '0.5 tsp'),
            ('black pepper', '0.25 tsp'),
            ('lemon', '1'),
        ],
    },
]
