from .audit_logger import audit_log, audit_access
from .validators import (
    validate_blood_pressure,
    validate_weight,
    validate_food_log,
    validate_condition,
    validate_medical_visit,
    validate_recipe,
    validate_exercise_log,
)
