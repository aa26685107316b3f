from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


logger = logging.getLogger(__name__)

MEDIA_TYPES = ("Book", "Movie")


class Record(BaseModel):
    """Base for externally supplied data records.

    Unknown keys are ignored, numbers are accepted where text is expected, and
    null values fall back to the field default.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Project(Record):
    title: str = ""
    description: str = ""
    date: str = Field(default="", description="ISO date, e.g. 2024-01-31")
    link: str | None = None


class Skill(Record):
    name: str = ""
    category: str = ""
    level: str | None = None


class Photo(Record):
    title: str = ""
    description: str = ""
    image: str = ""


class MediaEntry(Record):
    type: str = Field(default="", description="Book or Movie; other values are not rendered")
    title: str = ""
    author: str | None = None
    director: str | None = None
    year: int | str | None = None
    description: str | None = None

    @field_validator("year", mode="before")
    @classmethod
    def normalize_year(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


RecordT = TypeVar("RecordT", bound=Record)


def parse_records(model: type[RecordT], payload: Any) -> list[RecordT]:
    """Validate a decoded JSON array; entries that are not objects or cannot be coerced are skipped."""
    if not isinstance(payload, list):
        return []
    records: list[RecordT] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            continue
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping %s entry %d: %s", model.__name__, index, exc.errors()[0]["msg"])
    return records
