from .blood_pressure import BloodPressureReading
from .weight import WeightEntry
from .food_log import FoodLogEntry
from .condition import ConditionLog
from .recipe import Recipe
from .medical_visit import MedicalVisit
from .exercise_log import ExerciseLog
from .mission import DailyMission
from .streak import Streak

# Record kind -> model, as addressed by the record store
MODELS = {
    'blood_pressure': BloodPressureReading,
    'weight': WeightEntry,
    'food_log': FoodLogEntry,
    'condition': ConditionLog,
    'recipe': Recipe,
    'medical_visit': MedicalVisit,
    'exercise_log': ExerciseLog,
    'daily_mission': DailyMission,
    'streak': Streak,
}
