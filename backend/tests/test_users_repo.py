from extensions import db
from models import User, is_object_id
from repositories import users_repo
from sqlalchemy import func, select


def test_users_repo_create_and_lookup(app):
    with app.app_context():
        row = users_repo.create_user("alice")
        assert is_object_id(row["id"])
        assert row["username"] == "alice"

        assert users_repo.username_exists("alice") is True
        assert users_repo.username_exists("bob") is False

        fetched = users_repo.get_user_by_id(row["id"])
        assert fetched == {"id": row["id"], "username": "alice"}
        assert users_repo.get_user_by_id("0" * 24) is None

        total = db.session.execute(select(func.count()).select_from(User)).scalar()
        assert total == 1


def test_list_all_users_in_insertion_order(app):
    with app.app_context():
        names = ["carol", "alice", "bob"]
        for name in names:
            users_repo.create_user(name)

        rows = users_repo.list_all_users()
        assert [row["username"] for row in rows] == names
