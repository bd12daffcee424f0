"""
Medical visit model.
"""
from datetime import datetime
from healthlog import db


class MedicalVisit(db.Model):
    __tablename__ = 'medical_visits'

    id = db.Column(db.Integer, primary_key=True)
    visit_date = db.Column(db.Date, nullable=False, index=True)
    department = db.Column(db.String(100), nullable=True)
    doctor_name = db.Column(db.String(100), nullable=True)
    diagnosis = db.Column(db.Text, nullable=True)
    prescription = db.Column(db.Text, nullable=True)
    next_visit = db.Column(db.Date, nullable=True)
    note = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'visit_date': self.visit_date.isoformat() if self.visit_date else None,
            'department': self.department,
            'doctor_name': self.doctor_name,
            'diagnosis': self.diagnosis,
            'prescription': self.prescription,
            'next_visit': self.next_visit.isoformat() if self.next_visit else None,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<MedicalVisit {self.id}: {self.visit_date} {self.department}>'
