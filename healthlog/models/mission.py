"""
Mission-of-the-day model.
"""
from datetime import datetime
from healthlog import db


class DailyMission(db.Model):
    """One mission picked from the template catalog per calendar day."""
    __tablename__ = 'daily_missions'

    id = db.Column(db.Integer, primary_key=True)
    mission_date = db.Column(db.Date, nullable=False, unique=True)
    mission_text = db.Column(db.Text, nullable=False)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'mission_date': self.mission_date.isoformat() if self.mission_date else None,
            'mission_text': self.mission_text,
            'completed': bool(self.completed),
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<DailyMission {self.mission_date} done={self.completed}>'
