from app.extensions import db
from app.utils.dates import utcnow

class FoodLog(db.Model):
    __tablename__ = "food_logs"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    food_item_id = db.Column(db.Integer, db.ForeignKey("food_items.id"), nullable=False)
    portion_size = db.Column(db.Numeric(8,2), nullable=False)  # grams
    consumed_at = db.Column(db.DateTime, nullable=False)  # naive UTC
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    food_item = db.relationship("FoodItem", lazy="joined")

    __table_args__ = (
        db.Index("ix_food_logs_user_consumed", "user_id", "consumed_at"),
    )
