"""Yahoo Audiences destination package."""

from .client import YahooAudiencesDestination
from .helpers import DESTINATION_NAME, MISSING_REQUIRED_FIELD

__all__ = ["YahooAudiencesDestination", "DESTINATION_NAME", "MISSING_REQUIRED_FIELD"]
