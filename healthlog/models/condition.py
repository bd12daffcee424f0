"""
Daily condition / symptom log model.
"""
from datetime import datetime
from healthlog import db


class ConditionLog(db.Model):
    """Self-reported condition for a day. Saving the same day again overwrites it."""
    __tablename__ = 'condition_log'

    id = db.Column(db.Integer, primary_key=True)
    logged_date = db.Column(db.Date, nullable=False, unique=True)

    # 1 (bad) .. 5 (good)
    overall_score = db.Column(db.Integer, nullable=False, default=3)
    palpitation = db.Column(db.Boolean, nullable=False, default=False)
    edema = db.Column(db.Boolean, nullable=False, default=False)
    # 1 (none) .. 5 (exhausted)
    fatigue_level = db.Column(db.Integer, nullable=False, default=3)
    cpap_used = db.Column(db.Boolean, nullable=False, default=True)

    note = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'logged_date': self.logged_date.isoformat() if self.logged_date else None,
            'overall_score': self.overall_score,
            'palpitation': self.palpitation,
            'edema': self.edema,
            'fatigue_level': self.fatigue_level,
            'cpap_used': self.cpap_used,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<ConditionLog {self.logged_date}: {self.overall_score}>'
