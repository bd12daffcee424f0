"""
Daily nutrition aggregation over food log entries.
"""
from healthlog.constants import MEAL_ORDER, NUTRIENT_FIELDS, NUTRITION_TARGETS


def sort_by_meal(entries):
    """Order entries breakfast -> lunch -> dinner -> snack, keeping insertion order within a meal."""
    return sorted(entries, key=lambda e: MEAL_ORDER.get(e.get('meal_type'), len(MEAL_ORDER)))


def nutrient_value(entry, recipe, field):
    """Value of ``field`` for one portion: the entry's own value, else the recipe's, else 0."""
    value = entry.get(field)
    if value is None and recipe:
        value = recipe.get(field)
    return value or 0


def summarize_day(day, entries, recipes=None):
    """
    Sum nutrition over ``entries`` for ``day``.

    ``recipes`` maps recipe id -> recipe dict for entries that reference one.
    Each field is ``(entry.field ?? recipe.field ?? 0) * entry.portion``.
    """
    recipes = recipes or {}
    summary = {'date': str(day)}
    for field in NUTRIENT_FIELDS:
        summary[field] = 0.0

    for entry in entries:
        recipe = recipes.get(str(entry['recipe_id'])) if entry.get('recipe_id') else None
        portion = entry.get('portion')
        if portion is None:
            portion = 1.0
        for field in NUTRIENT_FIELDS:
            summary[field] += nutrient_value(entry, recipe, field) * portion

    for field in NUTRIENT_FIELDS:
        summary[field] = round(summary[field], 2)
    return summary


def compare_to_targets(summary, targets=None):
    """Per-field progress against the daily targets."""
    targets = targets or NUTRITION_TARGETS
    comparison = {}
    for field, target in targets.items():
        value = summary.get(field, 0)
        comparison[field] = {
            'value': value,
            'target': target,
            'ratio': round(value / target, 3) if target else None,
            'over': value > target,
        }
    return comparison


def daily_nutrition(store, day):
    """Load a day's food log from ``store`` and aggregate it.

    Returns ``(entries, summary)``; entries are meal-ordered and each one
    carries the linked recipe's name when it has one.
    """
    entries = sort_by_meal(store.list('food_log', filters={'logged_date': day}))

    recipes = {}
    for recipe_id in {str(e['recipe_id']) for e in entries if e.get('recipe_id')}:
        recipe = store.get('recipe', recipe_id)
        if recipe:
            recipes[recipe_id] = recipe

    for entry in entries:
        recipe = recipes.get(str(entry.get('recipe_id')))
        entry['recipe_name'] = recipe['name'] if recipe else None

    return entries, summarize_day(day, entries, recipes)
