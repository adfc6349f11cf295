from datetime import timedelta
from decimal import Decimal

from app import create_app
from app.extensions import db
from app.models.user import User
from app.models.food_item import FoodItem
from app.services.food_log_service import log_food
from app.services.fluid_log_service import log_fluid
from app.services.goals_service import create_daily_goals
from app.utils.dates import utcnow

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    user = User.query.filter_by(email="user@example.com").first()
    if not user:
        user = User(name="User Demo", email="user@example.com")
        db.session.add(user)
        db.session.commit()
        create_daily_goals(user.id, 2000, 150, 250, 65, 2500)

    def add_item(name, cal, p, c, f):
        item = FoodItem.query.filter_by(name=name).first()
        if not item:
            item = FoodItem(
                name=name,
                calories_per_100g=Decimal(str(cal)),
                protein_per_100g=Decimal(str(p)),
                carbs_per_100g=Decimal(str(c)),
                fats_per_100g=Decimal(str(f)),
            )
            db.session.add(item)
        return item

    apple = add_item("Apple", 52, 0.3, 14.0, 0.2)
    add_item("Banana", 89, 1.1, 22.8, 0.3)
    oats = add_item("Oats", 389, 16.9, 66.3, 6.9)
    add_item("Chicken breast", 165, 31.0, 0.0, 3.6)
    add_item("White rice", 130, 2.7, 28.0, 0.3)
    add_item("Egg", 155, 13.0, 1.1, 11.0)
    db.session.commit()

    # A morning's worth of demo logs, only on a fresh database
    if not db.session.execute(db.text("SELECT 1 FROM food_logs LIMIT 1")).first():
        morning = utcnow().replace(hour=8, minute=0, second=0, microsecond=0)
        log_food(user.id, oats.id, 60, morning)
        log_food(user.id, apple.id, 150, morning + timedelta(hours=2))
        log_fluid(user.id, "Water", 500, morning)
        log_fluid(user.id, "Coffee", 250, morning + timedelta(minutes=30))

    print("Seed completed")
