"""
Blood pressure reading model.
"""
from datetime import datetime
from healthlog import db


class BloodPressureReading(db.Model):
    """
    A single cuff measurement. Readings are never edited after creation,
    only deleted by id.
    """
    __tablename__ = 'blood_pressure'

    id = db.Column(db.Integer, primary_key=True)

    # Blood pressure values
    systolic = db.Column(db.Integer, nullable=False)
    diastolic = db.Column(db.Integer, nullable=False)
    pulse = db.Column(db.Integer, nullable=True)

    # morning | evening
    timing = db.Column(db.String(10), nullable=True)
    note = db.Column(db.Text, nullable=True)

    # Timestamps
    measured_at = db.Column(db.DateTime, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'measured_at': self.measured_at.isoformat() if self.measured_at else None,
            'systolic': self.systolic,
            'diastolic': self.diastolic,
            'pulse': self.pulse,
            'timing': self.timing,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<BloodPressureReading {self.id}: {self.systolic}/{self.diastolic}>'
