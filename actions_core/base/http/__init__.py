"""HTTP utilities package for destinations.

Exposes pooled httpx clients and response-to-taxonomy translation.
"""

from .client import get_httpx_client, register_client, close_all_clients
from .responses import raise_for_integration_status

__all__ = [
    "get_httpx_client",
    "register_client",
    "close_all_clients",
    "raise_for_integration_status",
]
