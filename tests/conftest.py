import os
import sys
import pytest

# Make the root config module importable without installing the project
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from app import create_app
from app.extensions import db
from app.services.food_item_service import create_food_item
from app.services.goals_service import create_daily_goals
from app.services.user_service import create_user


@pytest.fixture(scope="session")
def app():
    app = create_app(overrides={
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "SECRET_KEY": "test-secret",
    })
    with app.app_context():
        db.create_all()
    yield app


@pytest.fixture(autouse=True)
def app_ctx(app):
    with app.app_context():
        yield
        db.session.rollback()
        # every test starts from empty tables
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        db.session.remove()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def user():
    return create_user("User Demo", "user@example.com")


@pytest.fixture()
def other_user():
    return create_user("Someone Else", "other@example.com")


@pytest.fixture()
def apple():
    # calories 52, protein 0.3, carbs 14, fats 0.2 per 100g
    return create_food_item("Apple", 52, 0.3, 14, 0.2)


@pytest.fixture()
def chicken():
    return create_food_item("Chicken breast", 165, 31, 0, 3.6)


@pytest.fixture()
def goals(user):
    return create_daily_goals(user["id"], 2000, 150, 250, 65, 2000)
