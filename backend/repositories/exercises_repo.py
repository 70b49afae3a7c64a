"""Repository handling exercise persistence and log queries."""

from typing import Any, Dict, List, Tuple

from db_utils import read_connection, transactional_connection
from extensions import db
from models import new_object_id
from services.log_query import LogQuery


def insert_exercise(user_id: str, description: str, duration: int, date: str) -> Dict[str, Any]:
    """Insert an exercise row and return it."""
    exercise_id = new_object_id()
    with transactional_connection(db.engine) as conn:
        conn.execute(
            """
            INSERT INTO exercises (id, user_id, description, duration, date)
            VALUES (?, ?, ?, ?, ?)
            """,
            (exercise_id, user_id, description, duration, date),
        )
    return {
        "id": exercise_id,
        "user_id": user_id,
        "description": description,
        "duration": duration,
        "date": date,
    }


def _where_clause(query: LogQuery) -> Tuple[str, List[Any]]:
    clauses = ["user_id = ?"]
    params: List[Any] = [query.user_id]
    if query.date_from is not None:
        clauses.append("date >= ?")
        params.append(query.date_from.isoformat())
    if query.date_to is not None:
        clauses.append("date <= ?")
        params.append(query.date_to.isoformat())
    return "WHERE " + " AND ".join(clauses), params


def count_exercises(query: LogQuery) -> int:
    """Count exercises matching the query, ignoring its limit."""
    where_sql, params = _where_clause(query)
    with read_connection(db.engine) as conn:
        total = conn.fetch_scalar(f"SELECT COUNT(*) FROM exercises {where_sql}", params)
    return int(total or 0)


def find_exercises(query: LogQuery) -> List[Dict[str, Any]]:
    """Return exercises matching the query in insertion order, up to its limit."""
    where_sql, params = _where_clause(query)
    sql = f"""
        SELECT id, user_id, description, duration, date
        FROM exercises
        {where_sql}
        ORDER BY id
    """
    if query.limit is not None:
        sql += " LIMIT ?"
        params.append(query.limit)
    with read_connection(db.engine) as conn:
        return conn.fetch_all(sql, params)
