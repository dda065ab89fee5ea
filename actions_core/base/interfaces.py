"""AudienceDestination Protocol.

Defines the minimal audience-management contract for destination plugins.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable

from .dto import CreateAudienceRequest, CreateAudienceResult


@runtime_checkable
class AudienceDestination(Protocol):
    """Destination able to create audiences in an external system.

    Failures are raised as taxonomy errors (``IntegrationError`` and its
    variants); implementations never return partial results.
    """

    @property
    def destination_name(self) -> str:
        """Canonical destination identifier, e.g. ``"yahoo_audiences"``."""
        ...

    def create_audience(
        self, request: Union[CreateAudienceRequest, Mapping[str, Any]]
    ) -> CreateAudienceResult:
        """Create the audience and return its external identifier."""
        ...


__all__ = ["AudienceDestination"]
