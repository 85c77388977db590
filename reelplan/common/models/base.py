"""Base model classes shared by plan and timeline models."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PlanModel(BaseModel):
    """Base class for upstream plan input.

    Plans arrive from the director as loosely-shaped JSON, so unknown keys
    are ignored rather than rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def summary(self) -> dict[str, Any]:
        """Return a summary dict for logging."""
        return {"type": self.__class__.__name__}


class RenderModel(BaseModel):
    """Base class for renderer-facing output.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the renderer's JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize to a JSON string; identical models give identical bytes."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
