"""
Fixed targets, thresholds and enumerations shared by the services.
"""

# Daily nutrition targets
NUTRITION_TARGETS = {
    'salt_g': 6,
    'carbs_g': 120,
    'calories': 1800,
    'protein_g': 60,
    'fiber_g': 20,
}

NUTRIENT_FIELDS = ('calories', 'salt_g', 'carbs_g', 'protein_g', 'fiber_g')

MEAL_TYPES = ('breakfast', 'lunch', 'dinner', 'snack')
MEAL_ORDER = {meal: rank for rank, meal in enumerate(MEAL_TYPES)}

BP_TIMINGS = ('morning', 'evening')

# (systolic, diastolic) lower bounds per tier, checked from the top down
BP_THRESHOLDS = {
    'stage2': (160, 100),
    'stage1': (140, 90),
    'elevated': (130, 85),
}

BMI_THRESHOLDS = {
    'severe': 35,
    'obesity2': 30,
    'obesity1': 25,
}

STREAK_TYPES = ('mission', 'bp_record', 'food_log', 'cpap')

PRIORITY_RANK = {'high': 0, 'medium': 1, 'low': 2}

DEFAULT_LIST_LIMIT = 30
MAX_LIST_LIMIT = 365
