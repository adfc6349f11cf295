from .home_routes import home_bp
from .user_routes import user_bp
from .goals_routes import goals_bp
from .food_routes import food_bp
from .fluid_routes import fluid_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(goals_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(fluid_bp)
