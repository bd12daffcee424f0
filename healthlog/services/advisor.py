"""
Rule-based daily advice.

Each rule looks at one part of an ``AdviceSnapshot`` and returns at most one
``Advice``. Rules are independent: every rule runs, and the results are then
stably sorted by priority so equal priorities keep rule order.
"""
from dataclasses import asdict, dataclass
from typing import Optional

from healthlog.constants import NUTRITION_TARGETS, PRIORITY_RANK
from .exercise import daily_exercise
from .nutrition import daily_nutrition
from .streaks import consecutive_days

RELAXATION_HOUR = 20
LOGGING_STREAK_MIN = 3


@dataclass(frozen=True)
class Advice:
    code: str
    category: str
    title: str
    message: str
    priority: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class AdviceSnapshot:
    """Everything the rules read, gathered up front."""
    latest_bp: Optional[dict]
    nutrition: dict
    exercise: dict
    condition: Optional[dict]
    visit_count: int
    logging_streak: int
    hour: int
    profile_bp: tuple = (168, 83)
    salt_target: float = NUTRITION_TARGETS['salt_g']


def blood_pressure_advice(snapshot):
    bp = snapshot.latest_bp
    if not bp:
        return Advice(
            'bp_missing', 'blood_pressure', 'Record your blood pressure',
            'Daily readings are the basis of managing hypertension. Measure twice a day: '
            'within an hour of waking and before going to bed.',
            'high')

    systolic, diastolic = bp['systolic'], bp['diastolic']
    if systolic >= 160 or diastolic >= 100:
        return Advice(
            'bp_stage2', 'blood_pressure', 'Your blood pressure is high',
            f'Your latest reading is {systolic}/{diastolic}. Go easy on salt and take a few '
            'slow breaths to relax. See a doctor if it does not come down.',
            'high')
    if systolic >= 140 or diastolic >= 90:
        return Advice(
            'bp_stage1', 'blood_pressure', 'Keeping an eye on your blood pressure',
            f'Your latest reading is {systolic}/{diastolic}. Keep cutting salt and moving a '
            'little every day; a slow downward trend is a good sign.',
            'medium')
    # Elevated readings get the same message as normal ones
    return Advice(
        'bp_good', 'blood_pressure', 'Your blood pressure looks good',
        f'Your latest reading is {systolic}/{diastolic}. Great work, keep it up.',
        'low')


def salt_advice(snapshot):
    salt = snapshot.nutrition.get('salt_g') or 0
    target = snapshot.salt_target
    if salt > target:
        return Advice(
            'salt_over', 'diet', "Today's salt is over target",
            f'You have had {salt:.1f}g of salt today (target: {target:g}g). Keep the next meal '
            'lightly seasoned; vinegar, citrus and herbs add flavour without salt.',
            'high')
    if salt > target * 0.8:
        return Advice(
            'salt_near', 'diet', 'Salt is within target, but close',
            f'You have had {salt:.1f}g of salt today. There is a little room left; '
            'pick a low-salt recipe for dinner.',
            'medium')
    if salt == 0:
        return Advice(
            'food_missing', 'diet', 'Log your meals',
            'Logging meals shows you how much salt you are really eating. '
            'Start with what you have eaten today.',
            'medium')
    return None


def exercise_advice(snapshot):
    summary = snapshot.exercise
    if not summary.get('completed_count'):
        if snapshot.hour >= RELAXATION_HOUR:
            return Advice(
                'exercise_relax', 'exercise', 'Relaxation before bed',
                'On a tiring evening, seated deep breathing or a neck stretch is enough. '
                'Even five minutes helps.',
                'medium')
        return Advice(
            'exercise_prompt', 'exercise', 'Move a little today',
            'The seated exercises are ready for you. Even a neck and shoulder stretch '
            'improves circulation when you are tired.',
            'medium')
    return Advice(
        'exercise_done', 'exercise',
        f"{summary['completed_count']} exercise(s) done today",
        f"{summary.get('total_duration', 0)} minutes in total, about "
        f"{summary.get('total_calories', 0)} kcal burned. Well done!",
        'low')


def condition_advice(snapshot):
    condition = snapshot.condition
    if not condition:
        return Advice(
            'condition_missing', 'condition', "Log how you feel today",
            'A daily condition log helps you spot patterns. Note palpitations '
            'and swelling too.',
            'medium')
    if condition.get('palpitation'):
        carbs = snapshot.nutrition.get('carbs_g') or 0
        return Advice(
            'palpitation', 'condition', 'You noted palpitations',
            f'Rest and take it easy. You have had {carbs:.0f}g of carbohydrates today; '
            'if palpitations follow carb-heavy meals, try cutting back. '
            'See a doctor if they continue.',
            'high')
    return None


def medical_visit_advice(snapshot):
    if snapshot.visit_count == 0:
        systolic, diastolic = snapshot.profile_bp
        return Advice(
            'visit_specialist', 'medical', 'We recommend seeing a cardiologist',
            f'Your blood pressure has been around {systolic}/{diastolic}. '
            'A specialist can help you get the right treatment.',
            'high')
    return None


def streak_advice(snapshot):
    days = snapshot.logging_streak
    if days >= LOGGING_STREAK_MIN:
        return Advice(
            'logging_streak', 'streak', f'{days} days logged in a row!',
            'Small daily steps add up. Keep going!',
            'low')
    return None


RULES = (
    blood_pressure_advice,
    salt_advice,
    exercise_advice,
    condition_advice,
    medical_visit_advice,
    streak_advice,
)


def generate_advice(snapshot, rules=RULES):
    """Run every rule and return the triggered advice, high priority first."""
    advice = []
    for rule in rules:
        item = rule(snapshot)
        if item is not None:
            advice.append(item)
    return sorted(advice, key=lambda a: PRIORITY_RANK[a.priority])


def build_snapshot(store, clock, profile_bp=(168, 83)):
    """Gather today's data from ``store`` as seen by ``clock``."""
    today = clock.today()

    latest = store.list('blood_pressure', order_by='measured_at', descending=True, limit=1)
    _, nutrition = daily_nutrition(store, today)
    _, exercise = daily_exercise(store, today)
    condition = store.first('condition', {'logged_date': today})
    condition_dates = [c['logged_date'] for c in store.list('condition')]

    return AdviceSnapshot(
        latest_bp=latest[0] if latest else None,
        nutrition=nutrition,
        exercise=exercise,
        condition=condition,
        visit_count=store.count('medical_visit'),
        logging_streak=consecutive_days(condition_dates, today),
        hour=clock.hour(),
        profile_bp=tuple(profile_bp),
    )
