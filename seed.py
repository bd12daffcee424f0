"""
Seed script to populate the configured store with reference recipes.
Run from the project root: python seed.py
"""
from healthlog import create_app
from healthlog.storage import get_store

RECIPES = [
    {
        'id': 'r1', 'name': 'Low-salt ginger pork', 'category': 'main',
        'cook_time_min': 15, 'servings': 2,
        'calories': 320, 'salt_g': 1.2, 'carbs_g': 12, 'protein_g': 22, 'fiber_g': 1.5,
        'ingredients': [
            {'name': 'Pork loin, thinly sliced', 'amount': '200g'},
            {'name': 'Grated ginger', 'amount': '1 tbsp'},
            {'name': 'Low-sodium soy sauce', 'amount': '1 tbsp'},
            {'name': 'Cabbage', 'amount': '1/8 head'},
        ],
        'steps': [
            'Mix ginger and soy sauce.',
            'Sear the pork, add the sauce and toss until glazed.',
            'Serve over shredded cabbage.',
        ],
        'salt_tips': ['Extra ginger makes up for less soy sauce.'],
        'sugar_tips': [],
    },
    {
        'id': 'r2', 'name': 'Miso soup with extra vegetables', 'category': 'soup',
        'cook_time_min': 10, 'servings': 2,
        'calories': 60, 'salt_g': 1.0, 'carbs_g': 6, 'protein_g': 4, 'fiber_g': 2.5,
        'ingredients': [
            {'name': 'Dashi', 'amount': '300ml'},
            {'name': 'Reduced-salt miso', 'amount': '1 tbsp'},
            {'name': 'Spinach', 'amount': '1/2 bunch'},
            {'name': 'Tofu', 'amount': '1/4 block'},
        ],
        'steps': [
            'Simmer vegetables and tofu in dashi.',
            'Turn off the heat and dissolve the miso.',
        ],
        'salt_tips': ['More vegetables means less broth per bowl.'],
        'sugar_tips': [],
    },
    {
        'id': 'r3', 'name': 'Spinach with sesame', 'category': 'side',
        'cook_time_min': 5, 'servings': 2,
        'calories': 45, 'salt_g': 0.4, 'carbs_g': 3, 'protein_g': 2.5, 'fiber_g': 2.0,
        'ingredients': [
            {'name': 'Spinach', 'amount': '1 bunch'},
            {'name': 'Ground sesame', 'amount': '1 tbsp'},
            {'name': 'Low-sodium soy sauce', 'amount': '1 tsp'},
        ],
        'steps': ['Blanch spinach, squeeze dry, dress with sesame and soy sauce.'],
        'salt_tips': ['Sesame adds richness so less soy sauce is needed.'],
        'sugar_tips': [],
    },
    {
        'id': 'r4', 'name': 'Oatmeal with yogurt and berries', 'category': 'breakfast',
        'cook_time_min': 5, 'servings': 1,
        'calories': 250, 'salt_g': 0.1, 'carbs_g': 35, 'protein_g': 10, 'fiber_g': 5.0,
        'ingredients': [
            {'name': 'Rolled oats', 'amount': '30g'},
            {'name': 'Plain yogurt', 'amount': '100g'},
            {'name': 'Frozen berries', 'amount': '50g'},
        ],
        'steps': ['Microwave oats with water for one minute, top with yogurt and berries.'],
        'salt_tips': [],
        'sugar_tips': ['Skip honey; the berries are sweet enough.'],
    },
]


def seed():
    app = create_app()
    with app.app_context():
        store = get_store()
        for recipe in RECIPES:
            existing = store.get('recipe', recipe['id'])
            if existing:
                print(f"  Recipe '{recipe['name']}' (id={recipe['id']}) already exists, skipping.")
                continue
            store.insert('recipe', {**recipe, 'is_favorite': False})
            print(f"  Added recipe '{recipe['name']}' (id={recipe['id']})")
        print(f"Recipes seeded: {store.count('recipe')} total.\n")

        print("\nDone.")


if __name__ == "__main__":
    seed()
