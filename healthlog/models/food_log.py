"""
Food log model.
"""
from datetime import datetime
from healthlog import db


class FoodLogEntry(db.Model):
    """
    One eaten item for a meal. Either references a recipe (nutrition is read
    from it unless overridden here) or carries a free-text name with values
    entered directly. Created and deleted, never edited.
    """
    __tablename__ = 'food_log'

    id = db.Column(db.Integer, primary_key=True)
    logged_date = db.Column(db.Date, nullable=False, index=True)

    # breakfast | lunch | dinner | snack
    meal_type = db.Column(db.String(20), nullable=False)

    recipe_id = db.Column(db.String(64), db.ForeignKey('recipes.id'), nullable=True)
    custom_name = db.Column(db.String(255), nullable=True)
    portion = db.Column(db.Float, nullable=False, default=1.0)

    # Per-portion overrides; NULL falls back to the linked recipe
    calories = db.Column(db.Float, nullable=True)
    salt_g = db.Column(db.Float, nullable=True)
    carbs_g = db.Column(db.Float, nullable=True)
    protein_g = db.Column(db.Float, nullable=True)
    fiber_g = db.Column(db.Float, nullable=True)

    note = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'logged_date': self.logged_date.isoformat() if self.logged_date else None,
            'meal_type': self.meal_type,
            'recipe_id': self.recipe_id,
            'custom_name': self.custom_name,
            'portion': self.portion,
            'calories': self.calories,
            'salt_g': self.salt_g,
            'carbs_g': self.carbs_g,
            'protein_g': self.protein_g,
            'fiber_g': self.fiber_g,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<FoodLogEntry {self.id}: {self.logged_date} {self.meal_type}>'
