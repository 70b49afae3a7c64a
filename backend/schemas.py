from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class UserCreatePayload(BaseModel):
    username: str

    model_config = ConfigDict(extra="ignore")

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, value) -> str:
        if not isinstance(value, str):
            raise ValueError("username must be a string")
        username = value.strip()
        if not username:
            raise ValueError("username must not be empty")
        return username


class ExerciseCreatePayload(BaseModel):
    description: str
    duration: int
    date: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value) -> str:
        if not isinstance(value, str):
            raise ValueError("description must be a string")
        description = value.strip()
        if not description:
            raise ValueError("description must not be empty")
        return description

    @field_validator("duration", mode="before")
    @classmethod
    def validate_duration(cls, value) -> int:
        # Form posts deliver numbers as strings.
        if isinstance(value, bool):
            raise ValueError("duration must be a positive integer")
        if isinstance(value, str):
            value = value.strip()
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError("duration must be a positive integer")
        if not number.is_integer() or number <= 0:
            raise ValueError("duration must be a positive integer")
        return int(number)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("date must be in YYYY-MM-DD format")
        value = value.strip()
        if not value:
            return None
        try:
            parsed = datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            raise ValueError("date must be in YYYY-MM-DD format")
        # isoformat always pads the year to four digits.
        return parsed.date().isoformat()
