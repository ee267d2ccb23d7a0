"""Typed payload contracts for ServiceResult.data.

Services build these models and dump them to plain dicts, so every
``data`` payload is validated against a schema before it leaves the
service layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a JSON-ready dict."""
    return model_cls.model_validate(data).model_dump(mode="json")


class EmailData(BaseModel):
    """Payload for ``check_email``."""

    model_config = {"frozen": True}

    value: str
    local_part: str
    domain_part: str


class EmailPartsData(BaseModel):
    """Payload for ``email_parts``. ``domain_part`` is None without ``@``."""

    model_config = {"frozen": True}

    text: str
    local_part: str
    domain_part: str | None
    valid: bool


class DayItem(BaseModel):
    model_config = {"frozen": True}

    index: int = Field(ge=0, le=6)
    name: str


class DayListData(BaseModel):
    """Payload for ``list_days``."""

    model_config = {"frozen": True}

    items: list[DayItem]
    count: int


class RationalData(BaseModel):
    """Payload for ``rational_add`` / ``rational_sub`` / ``rational_mul``."""

    model_config = {"frozen": True}

    left: str
    right: str
    result: str
    numerator: int
    denominator: int
