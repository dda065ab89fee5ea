"""
Pydantic DTOs for audience-management calls.

Purpose
-------
Validate the shape of inbound audience requests before they reach a
destination. Pydantic only checks types here; whether a required setting is
blank is a destination decision reported through the error taxonomy.

Failure modes
-------------
``CreateAudienceRequest.parse`` converts a ``pydantic.ValidationError`` into
``PayloadValidationError`` so callers see a single error contract.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import PayloadValidationError


class CreateAudienceRequest(BaseModel):
    """Input to ``create_audience``.

    Attributes:
        settings: Destination-level settings (account identifiers etc.).
        audience_name: Display name chosen by the user; may be empty.
        audience_settings: Per-audience settings (ids, keys).
    """

    model_config = ConfigDict(populate_by_name=True)

    settings: Dict[str, Any] = Field(default_factory=dict)
    audience_name: str = Field(default="", alias="audienceName")
    audience_settings: Dict[str, Any] = Field(default_factory=dict, alias="audienceSettings")

    @classmethod
    def parse(cls, data: "CreateAudienceRequest | Mapping[str, Any]") -> "CreateAudienceRequest":
        """Validate ``data`` or raise :class:`PayloadValidationError`."""
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise PayloadValidationError(f"Invalid create audience input: {fields}") from e


class CreateAudienceResult(BaseModel):
    """Result of a successful ``create_audience`` call."""

    model_config = ConfigDict(populate_by_name=True)

    external_id: str = Field(alias="externalId")


__all__ = ["CreateAudienceRequest", "CreateAudienceResult"]
