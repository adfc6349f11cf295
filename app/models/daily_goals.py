from app.extensions import db
from app.utils.dates import utcnow

class DailyGoals(db.Model):
    __tablename__ = "daily_goals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    daily_calories = db.Column(db.Numeric(8,2), nullable=False)
    daily_protein = db.Column(db.Numeric(8,2), nullable=False, default=0)
    daily_carbs = db.Column(db.Numeric(8,2), nullable=False, default=0)
    daily_fats = db.Column(db.Numeric(8,2), nullable=False, default=0)
    daily_fluid = db.Column(db.Numeric(8,2), nullable=False, default=0)  # ml
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    # "current" goals are picked by this column, so it is set in Python for sub-second ordering
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
