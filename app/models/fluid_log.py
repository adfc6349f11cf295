from app.extensions import db
from app.utils.dates import utcnow

class FluidLog(db.Model):
    __tablename__ = "fluid_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    fluid_type = db.Column(db.String(100), nullable=False)
    volume = db.Column(db.Numeric(8,2), nullable=False)  # ml
    consumed_at = db.Column(db.DateTime, nullable=False)  # naive UTC
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        db.Index("ix_fluid_logs_user_consumed", "user_id", "consumed_at"),
    )
