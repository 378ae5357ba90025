"""Shared base for models built from the job platform's camelCase JSON."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class PlatformModel(BaseModel):
    """Loose read-only snapshot: unknown keys ignored, nulls fall back to defaults."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
        "coerce_numbers_to_str": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data
