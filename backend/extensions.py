from flask_sqlalchemy import SQLAlchemy  # type: ignore[import]

db = SQLAlchemy()
