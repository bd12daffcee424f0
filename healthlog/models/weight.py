"""
Body weight model. One entry per calendar day.
"""
from datetime import datetime
from healthlog import db


class WeightEntry(db.Model):
    __tablename__ = 'weight_log'

    id = db.Column(db.Integer, primary_key=True)
    measured_at = db.Column(db.Date, nullable=False, unique=True)
    weight_kg = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'measured_at': self.measured_at.isoformat() if self.measured_at else None,
            'weight_kg': self.weight_kg,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<WeightEntry {self.measured_at}: {self.weight_kg}kg>'
