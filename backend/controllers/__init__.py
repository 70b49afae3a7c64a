from .exercises_controller import exercises_bp
from .users_controller import users_bp


def register_controllers(app):
    app.register_blueprint(users_bp)
    app.register_blueprint(exercises_bp)
