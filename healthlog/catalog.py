"""
Static reference data: seated exercises, eating-out presets and mission templates.
"""

EXERCISES = [
    {'id': 'e1', 'name': 'Neck stretch', 'category': 'stretch', 'duration_min': 3,
     'difficulty': 1, 'calories_burned': 5},
    {'id': 'e2', 'name': 'Shoulder rolls', 'category': 'stretch', 'duration_min': 2,
     'difficulty': 1, 'calories_burned': 3},
    {'id': 'e3', 'name': 'Seated back stretch', 'category': 'stretch', 'duration_min': 3,
     'difficulty': 1, 'calories_burned': 5},
    {'id': 'e4', 'name': 'Ankle circles', 'category': 'stretch', 'duration_min': 2,
     'difficulty': 1, 'calories_burned': 3},
    {'id': 'e5', 'name': 'Chair squats', 'category': 'strength', 'duration_min': 5,
     'difficulty': 2, 'calories_burned': 20},
    {'id': 'e6', 'name': 'Seated heel raises', 'category': 'strength', 'duration_min': 3,
     'difficulty': 1, 'calories_burned': 10},
    {'id': 'e7', 'name': 'Seated crunches', 'category': 'strength', 'duration_min': 5,
     'difficulty': 2, 'calories_burned': 15},
    {'id': 'e8', 'name': 'Hand open-close', 'category': 'strength', 'duration_min': 2,
     'difficulty': 1, 'calories_burned': 5},
    {'id': 'e9', 'name': 'Seated marching', 'category': 'cardio', 'duration_min': 5,
     'difficulty': 2, 'calories_burned': 25},
    {'id': 'e10', 'name': 'Arm swings', 'category': 'cardio', 'duration_min': 3,
     'difficulty': 1, 'calories_burned': 15},
    {'id': 'e11', 'name': 'Deep breathing', 'category': 'relaxation', 'duration_min': 5,
     'difficulty': 1, 'calories_burned': 3},
    {'id': 'e12', 'name': 'Mini meditation', 'category': 'relaxation', 'duration_min': 5,
     'difficulty': 1, 'calories_burned': 3},
]

EXERCISES_BY_ID = {e['id']: e for e in EXERCISES}

EATING_OUT_PRESETS = [
    {'id': 'o1', 'name': 'Beef bowl (regular)', 'category': 'chain', 'calories': 650,
     'salt_g': 2.7, 'carbs_g': 104, 'protein_g': 20,
     'warning': 'Skip the extra sauce to cut salt'},
    {'id': 'o2', 'name': 'Ramen (soy sauce)', 'category': 'noodles', 'calories': 480,
     'salt_g': 6.2, 'carbs_g': 70, 'protein_g': 20,
     'warning': 'Leave the soup to save about 3g of salt'},
    {'id': 'o3', 'name': 'Grilled fish set meal', 'category': 'set meal', 'calories': 600,
     'salt_g': 3.5, 'carbs_g': 90, 'protein_g': 30, 'warning': None},
    {'id': 'o4', 'name': 'Convenience store onigiri (salmon)', 'category': 'convenience',
     'calories': 180, 'salt_g': 1.1, 'carbs_g': 38, 'protein_g': 5, 'warning': None},
    {'id': 'o5', 'name': 'Soba (cold, zaru)', 'category': 'noodles', 'calories': 300,
     'salt_g': 2.4, 'carbs_g': 55, 'protein_g': 11,
     'warning': 'Dip lightly; the broth carries most of the salt'},
    {'id': 'o6', 'name': 'Salad chicken', 'category': 'convenience', 'calories': 110,
     'salt_g': 1.2, 'carbs_g': 0, 'protein_g': 24, 'warning': None},
]

MISSION_TEMPLATES = [
    'Measure your blood pressure within an hour of waking up',
    'Use vinegar or citrus instead of soy sauce at one meal',
    'Leave the soup when you eat noodles today',
    'Do five minutes of seated exercises',
    'Eat vegetables first at dinner',
    'Swap one sweet snack for nuts or yogurt',
    'Take ten slow, deep breaths before bed',
    'Drink a glass of water instead of a sugary drink',
    'Use your CPAP all night',
    'Write down how you feel today',
]
