"""actions_core.config.defaults
============================

Small, stable default values for destinations. They can be overridden via
environment variables or an external config file (see
``actions_core.config``). Only plain constants live here, so this module can
be imported anywhere without circular dependencies.
"""

from __future__ import annotations

# ---- Yahoo Audiences ----

# Taxonomy API used to register audience segments.
YAHOO_AUDIENCES_TAXONOMY_BASE_URL = "https://datax.yahooapis.com"
# Taxonomy path; formatted with the customer's engage space id.
YAHOO_AUDIENCES_TAXONOMY_APPEND_PATH = "/v1/taxonomy/append/{engage_space_id}"
# Node type of the engage space folder holding created audiences.
YAHOO_AUDIENCES_DEFAULT_PARENT_NODE = "SEGMENT"

__all__ = [
    "YAHOO_AUDIENCES_TAXONOMY_BASE_URL",
    "YAHOO_AUDIENCES_TAXONOMY_APPEND_PATH",
    "YAHOO_AUDIENCES_DEFAULT_PARENT_NODE",
]
