"""
Recipe model. Seeded reference recipes and user-added ones share this shape.
"""
import uuid
from datetime import datetime
from healthlog import db


def _new_recipe_id():
    return uuid.uuid4().hex[:12]


class Recipe(db.Model):
    __tablename__ = 'recipes'

    id = db.Column(db.String(64), primary_key=True, default=_new_recipe_id)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(50), nullable=False, index=True)
    cook_time_min = db.Column(db.Integer, nullable=True)
    servings = db.Column(db.Integer, nullable=False, default=1)

    # Nutrition per serving
    calories = db.Column(db.Float, nullable=True)
    salt_g = db.Column(db.Float, nullable=True)
    carbs_g = db.Column(db.Float, nullable=True)
    protein_g = db.Column(db.Float, nullable=True)
    fiber_g = db.Column(db.Float, nullable=True)
    potassium_mg = db.Column(db.Float, nullable=True)

    # Ordered lists: [{name, amount}], [str]
    ingredients = db.Column(db.JSON, nullable=False, default=list)
    steps = db.Column(db.JSON, nullable=False, default=list)
    salt_tips = db.Column(db.JSON, nullable=True)
    sugar_tips = db.Column(db.JSON, nullable=True)

    is_favorite = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'cook_time_min': self.cook_time_min,
            'servings': self.servings,
            'calories': self.calories,
            'salt_g': self.salt_g,
            'carbs_g': self.carbs_g,
            'protein_g': self.protein_g,
            'fiber_g': self.fiber_g,
            'potassium_mg': self.potassium_mg,
            'ingredients': self.ingredients or [],
            'steps': self.steps or [],
            'salt_tips': self.salt_tips or [],
            'sugar_tips': self.sugar_tips or [],
            'is_favorite': bool(self.is_favorite),
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Recipe {self.id}: {self.name}>'
