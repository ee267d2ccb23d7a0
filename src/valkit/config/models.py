"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from valkit.domain.days import DayOfWeek

# --- valkit.toml sections ---


class EmailConfig(BaseModel):
    """[email] section."""

    model_config = {"frozen": True}

    # RFC 5321 path limit; longer addresses pass the format check with a warning.
    warn_length: int = Field(default=254, ge=1)


class DaysConfig(BaseModel):
    """[days] section."""

    model_config = {"frozen": True}

    first_day: DayOfWeek = DayOfWeek.SUNDAY


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
