"""Validation of raw birth records into typed :class:`BirthData`."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .chinese.constants import Gender
from .chinese.four_pillars import DEFAULT_BIRTH_TIME
from .errors import InvalidInputError

DEFAULT_MIN_YEAR = 1900
NAME_MAX_LENGTH = 50
BIRTH_PLACE_MAX_LENGTH = 100

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^\d{2}:\d{2}$")

_GENDER_ALIASES: Mapping[str, Gender] = {
    "male": Gender.MALE,
    "男": Gender.MALE,
    "男性": Gender.MALE,
    "female": Gender.FEMALE,
    "女": Gender.FEMALE,
    "女性": Gender.FEMALE,
}


class BirthData(BaseModel):
    """A validated birth record.

    Bounds that depend on the caller (earliest year, today's date) are read
    from the validation context; see :func:`parse_birth_data`.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    birth_date: date
    birth_time: Optional[time] = None
    gender: Gender
    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    birth_place: Optional[str] = Field(default=None, max_length=BIRTH_PLACE_MAX_LENGTH)

    @field_validator("birth_date", mode="before")
    @classmethod
    def _parse_birth_date(cls, value: Any) -> date:
        if isinstance(value, datetime):
            raise ValueError("birth_date must be a date, not a datetime")
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not _DATE_PATTERN.match(value.strip()):
            raise ValueError("birth_date must use the YYYY-MM-DD format")
        return date.fromisoformat(value.strip())

    @field_validator("birth_date")
    @classmethod
    def _check_birth_date_range(cls, value: date, info: ValidationInfo) -> date:
        context = info.context or {}
        min_year = int(context.get("min_year", DEFAULT_MIN_YEAR))
        today = context.get("today") or date.today()
        if value < date(min_year, 1, 1):
            raise ValueError(f"birth_date must be on or after {min_year}-01-01")
        if value > today:
            raise ValueError("birth_date cannot be in the future")
        return value

    @field_validator("birth_time", mode="before")
    @classmethod
    def _parse_birth_time(cls, value: Any) -> Optional[time]:
        if value is None or value == "":
            return None
        if isinstance(value, time):
            return value
        if not isinstance(value, str) or not _TIME_PATTERN.match(value.strip()):
            raise ValueError("birth_time must use the HH:MM format")
        hours, minutes = (int(part) for part in value.strip().split(":"))
        if hours > 23 or minutes > 59:
            raise ValueError("birth_time must be between 00:00 and 23:59")
        return time(hours, minutes)

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Gender:
        if isinstance(value, Gender):
            return value
        gender = _GENDER_ALIASES.get(str(value).strip().lower()) if value is not None else None
        if gender is None:
            raise ValueError("gender must be male or female")
        return gender

    @field_validator("name", "birth_place", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def effective_time(self) -> time:
        return self.birth_time or DEFAULT_BIRTH_TIME


def _first_error(exc: ValidationError) -> tuple[str | None, str]:
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    message = error.get("msg", "invalid value")
    return field, message


def parse_birth_data(
    payload: Mapping[str, Any] | BirthData,
    *,
    today: date | None = None,
    min_year: int = DEFAULT_MIN_YEAR,
) -> BirthData:
    """Validate ``payload`` and return a :class:`BirthData`.

    Raises :class:`InvalidInputError` naming the first offending field.
    """

    if isinstance(payload, BirthData):
        payload = payload.model_dump()
    if not isinstance(payload, Mapping):
        raise InvalidInputError("birth record must be a mapping")
    try:
        return BirthData.model_validate(
            dict(payload), context={"today": today, "min_year": min_year}
        )
    except ValidationError as exc:
        field, message = _first_error(exc)
        raise InvalidInputError(f"{field or 'birth record'}: {message}", field=field) from exc


__all__ = [
    "BirthData",
    "Gender",
    "parse_birth_data",
]
