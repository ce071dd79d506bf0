from datetime import date, datetime
import re
from pydantic import BaseModel, model_validator
from typing import Any, ClassVar, List, Tuple, Union, get_args, get_origin

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively convert blank strings to None and strip invisible chars."""

    if isinstance(value, BaseModel):
        return type(value)(**deep_clean(value.model_dump()))

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    return value


def _is_date_annotation(annotation) -> bool:
    origin = get_origin(annotation)
    args = get_args(annotation)
    return (
        annotation in (date, datetime)
        or (origin is Union and any(a in (date, datetime) for a in args))
    )


def safe_parse_date(value: Any):
    """Convert ISO date strings to date, return None if invalid."""
    if value is None or value == "":
        return None

    if isinstance(value, (date, datetime)):
        return value

    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


class EmptyStringModel(BaseModel):
    """
    Base for query/filter models coming from the frontend.

    Blank inputs become "not set", unparseable dates are dropped, and after
    validation unset string/list fields are normalised to "" / [] so the
    JSON sent back never carries nulls for them.
    """
    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    # Free text matched literally: only invisible chars are removed
    UNSTRIPPED_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            raw = {name: values.get(name) for name in cls.UNSTRIPPED_FIELDS}
            values = deep_clean(values)
            for name, value in raw.items():
                if isinstance(value, str) and values.get(name) is not None:
                    values[name] = INVISIBLE_CHARS_PATTERN.sub("", value)
            for field_name, field in cls.model_fields.items():
                if field_name in values and _is_date_annotation(field.annotation):
                    values[field_name] = safe_parse_date(values[field_name])
        return values

    @model_validator(mode="after")
    def finalize_nulls(self):
        for field_name, field in type(self).model_fields.items():
            if getattr(self, field_name) is not None:
                continue

            annotation = field.annotation
            origin = get_origin(annotation)
            args = get_args(annotation)

            if origin in (list, List) or annotation in (list, List) or any(
                    get_origin(a) in (list, List) for a in args):
                object.__setattr__(self, field_name, [])
            elif annotation == str or (origin is Union and args == (str, type(None))):
                object.__setattr__(self, field_name, "")

        return self
