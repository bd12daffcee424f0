"""
Exercise log model.
"""
from datetime import datetime
from healthlog import db


class ExerciseLog(db.Model):
    """A planned or completed exercise from the catalog for a given day."""
    __tablename__ = 'exercise_log'

    id = db.Column(db.Integer, primary_key=True)
    logged_date = db.Column(db.Date, nullable=False, index=True)
    exercise_id = db.Column(db.String(20), nullable=False)
    exercise_name = db.Column(db.String(255), nullable=False)
    duration_min = db.Column(db.Integer, nullable=False, default=0)
    calories_burned = db.Column(db.Integer, nullable=False, default=0)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    note = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'logged_date': self.logged_date.isoformat() if self.logged_date else None,
            'exercise_id': self.exercise_id,
            'exercise_name': self.exercise_name,
            'duration_min': self.duration_min,
            'calories_burned': self.calories_burned,
            'completed': bool(self.completed),
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<ExerciseLog {self.id}: {self.exercise_name} done={self.completed}>'
