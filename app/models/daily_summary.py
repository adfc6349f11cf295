from app.extensions import db
from app.utils.dates import utcnow

class DailySummary(db.Model):
    __tablename__ = "daily_summaries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    summary_date = db.Column(db.Date, nullable=False)
    total_calories = db.Column(db.Numeric(10,2), nullable=False, default=0)
    total_protein = db.Column(db.Numeric(10,2), nullable=False, default=0)
    total_carbs = db.Column(db.Numeric(10,2), nullable=False, default=0)
    total_fats = db.Column(db.Numeric(10,2), nullable=False, default=0)
    total_fluid = db.Column(db.Numeric(10,2), nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("user_id", "summary_date", name="uq_daily_summaries_user_date"),
    )
