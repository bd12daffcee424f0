"""
Streak counter model.
"""
from healthlog import db


class Streak(db.Model):
    """Consecutive-day counter, one row per streak type."""
    __tablename__ = 'streaks'

    id = db.Column(db.Integer, primary_key=True)
    # mission | bp_record | food_log | cpap
    streak_type = db.Column(db.String(20), nullable=False, unique=True)
    current_count = db.Column(db.Integer, nullable=False, default=0)
    best_count = db.Column(db.Integer, nullable=False, default=0)
    last_date = db.Column(db.Date, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'streak_type': self.streak_type,
            'current_count': self.current_count,
            'best_count': self.best_count,
            'last_date': self.last_date.isoformat() if self.last_date else None
        }

    def __repr__(self):
        return f'<Streak {self.streak_type}: {self.current_count} (best {self.best_count})>'
