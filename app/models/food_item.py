from app.extensions import db
from app.utils.dates import utcnow

class FoodItem(db.Model):
    __tablename__ = "food_items"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False, index=True)
    calories_per_100g = db.Column(db.Numeric(8,2), nullable=False, default=0)
    protein_per_100g = db.Column(db.Numeric(8,2), nullable=False, default=0)
    carbs_per_100g = db.Column(db.Numeric(8,2), nullable=False, default=0)
    fats_per_100g = db.Column(db.Numeric(8,2), nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
