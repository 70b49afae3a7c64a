"""Repository handling user persistence and lookup."""

from typing import Dict, List, Optional

from db_utils import read_connection, transactional_connection
from extensions import db
from models import new_object_id


def create_user(username: str) -> Dict[str, str]:
    """Insert a new user row and return it."""
    user_id = new_object_id()
    with transactional_connection(db.engine) as conn:
        conn.execute(
            "INSERT INTO users (id, username) VALUES (?, ?)",
            (user_id, username),
        )
    return {"id": user_id, "username": username}


def username_exists(username: str) -> bool:
    with read_connection(db.engine) as conn:
        found = conn.fetch_scalar(
            "SELECT id FROM users WHERE username = ? LIMIT 1",
            (username,),
        )
    return found is not None


def get_user_by_id(user_id: str) -> Optional[dict]:
    """Fetch a user row by id, returning None when absent."""
    with read_connection(db.engine) as conn:
        return conn.fetch_one(
            "SELECT id, username FROM users WHERE id = ?",
            (user_id,),
        )


def list_all_users() -> List[dict]:
    """List all users in insertion order."""
    with read_connection(db.engine) as conn:
        return conn.fetch_all("SELECT id, username FROM users ORDER BY id")
