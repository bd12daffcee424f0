from .nutrition import daily_nutrition, summarize_day, compare_to_targets, sort_by_meal
from .streaks import StreakState, advance_streak, record_event, list_streaks, consecutive_days
from .risk import classify_blood_pressure, classify_bmi, calculate_bmi, assess_risk
from .advisor import Advice, AdviceSnapshot, generate_advice, build_snapshot
from .exercise import summarize_exercise, daily_exercise
from .missions import get_or_assign_mission, set_mission_completed
from .stats import blood_pressure_stats, weight_stats
