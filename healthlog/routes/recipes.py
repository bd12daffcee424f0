"""Recipe and eating-out routes."""
from flask import request, jsonify
from healthlog.catalog import EATING_OUT_PRESETS
from healthlog.constants import NUTRIENT_FIELDS
from healthlog.errors import NotFoundError, ValidationError
from healthlog.storage import get_store
from healthlog.utils.audit_logger import audit_log
from healthlog.utils.validators import validate_flags, validate_recipe
from . import api_bp, json_body


@api_bp.route('/recipes', methods=['GET'])
def list_recipes():
    """Recipes filtered by ?category=, ?favorite=true and ?search= (name substring)."""
    filters = {}
    category = request.args.get('category')
    if category:
        filters['category'] = category
    if request.args.get('favorite') == 'true':
        filters['is_favorite'] = True

    recipes = get_store().list('recipe', filters=filters)

    search = (request.args.get('search') or '').strip().lower()
    if search:
        recipes = [r for r in recipes if search in r['name'].lower()]

    recipes.sort(key=lambda r: (r.get('category') or '', r.get('name') or ''))
    return jsonify({'recipes': recipes}), 200


@api_bp.route('/recipes/<recipe_id>', methods=['GET'])
def get_recipe(recipe_id):
    recipe = get_store().get('recipe', recipe_id)
    if recipe is None:
        raise NotFoundError('Recipe not found')
    return jsonify({'recipe': recipe}), 200


@api_bp.route('/recipes/<recipe_id>', methods=['PATCH'])
def update_recipe(recipe_id):
    """Only the favorite flag is editable. Without is_favorite the flag is toggled."""
    data = request.get_json(silent=True) or {}
    errors = validate_flags(data, ('is_favorite',))
    if errors:
        raise ValidationError(errors)
    store = get_store()
    recipe = store.get('recipe', recipe_id)
    if recipe is None:
        raise NotFoundError('Recipe not found')

    if data.get('is_favorite') is not None:
        is_favorite = data['is_favorite']
    else:
        is_favorite = not recipe.get('is_favorite')

    recipe = store.update('recipe', recipe_id, {'is_favorite': is_favorite})
    audit_log('UPDATE', 'recipe', resource_id=str(recipe_id),
              details={'is_favorite': is_favorite})
    return jsonify({'recipe': recipe}), 200


@api_bp.route('/recipes', methods=['POST'])
def create_recipe():
    data = json_body()
    errors = validate_recipe(data)
    if errors:
        raise ValidationError(errors)

    record = {
        'name': data['name'].strip(),
        'category': data['category'].strip(),
        'cook_time_min': data.get('cook_time_min'),
        'servings': int(data.get('servings') or 1),
        'potassium_mg': data.get('potassium_mg'),
        'ingredients': data.get('ingredients') or [],
        'steps': data.get('steps') or [],
        'salt_tips': data.get('salt_tips') or [],
        'sugar_tips': data.get('sugar_tips') or [],
        'is_favorite': bool(data.get('is_favorite', False)),
    }
    for field in NUTRIENT_FIELDS:
        value = data.get(field)
        record[field] = float(value) if value not in (None, '') else None

    recipe = get_store().insert('recipe', record)
    audit_log('CREATE', 'recipe', resource_id=str(recipe['id']))
    return jsonify({'recipe': recipe}), 201


@api_bp.route('/eating-out', methods=['GET'])
def list_eating_out():
    presets = sorted(EATING_OUT_PRESETS, key=lambda p: p['name'])
    return jsonify({'presets': presets}), 200
