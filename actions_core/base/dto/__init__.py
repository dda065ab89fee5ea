"""DTO validation package for destinations."""

from .audience import CreateAudienceRequest, CreateAudienceResult

__all__ = ["CreateAudienceRequest", "CreateAudienceResult"]
