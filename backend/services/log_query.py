"""
Log query validation and construction.

Turns the raw ``from``/``to``/``limit`` query parameters of the logs
endpoint into a ``LogQuery`` the exercises repository can execute.
Validation and construction are separate layers: ``build_log_query``
silently drops bounds it cannot parse, whether or not
``validate_log_parameters`` ran first.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from errors import InvalidDate, InvalidLimit, InvalidRange

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_LIMIT_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class LogQuery:
    user_id: str
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    limit: Optional[int] = None


def _is_provided(value: Any) -> bool:
    return value is not None and value != ""


def parse_date(value: Any) -> Optional[date]:
    """Parse ``value`` as a calendar date, returning None when it is not one."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def validate_date_format(value: Any) -> bool:
    """True only for a literal ``YYYY-MM-DD`` string naming a real calendar date."""
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        return False
    return parse_date(value) is not None


def parse_limit(value: Any) -> Optional[int]:
    """Return ``value`` as a non-negative int, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not _LIMIT_PATTERN.fullmatch(candidate):
        return None
    return int(candidate)


def validate_log_parameters(from_date: Any, to_date: Any, limit: Any) -> None:
    """Reject malformed log query parameters, raising on the first failure.

    The ``from``/``to`` ordering is only checked when ``limit`` is also
    given; an inverted range without a limit is accepted as-is.
    """
    if _is_provided(from_date) and not validate_date_format(from_date):
        raise InvalidDate(f"Invalid 'from' date: {from_date}")
    if _is_provided(to_date) and not validate_date_format(to_date):
        raise InvalidDate(f"Invalid 'to' date: {to_date}")
    if _is_provided(limit):
        if parse_limit(limit) is None:
            raise InvalidLimit(f"Invalid 'limit': {limit}")
        if _is_provided(from_date) and _is_provided(to_date) and from_date > to_date:
            raise InvalidRange('"from" date must be before "to" date')


def build_log_query(
    user_id: str,
    from_date: Any,
    to_date: Any,
    limit: Any = None,
) -> LogQuery:
    return LogQuery(
        user_id=user_id,
        date_from=parse_date(from_date),
        date_to=parse_date(to_date),
        limit=parse_limit(limit) if _is_provided(limit) else None,
    )
