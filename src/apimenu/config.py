"""Local configuration for apimenu."""

from __future__ import annotations

import os


DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "apimenu/0.1 (+https://github.com/apimenu/apimenu)"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_HEADING_LEVEL = 2

APIMENU_FETCH_TIMEOUT_S = float(os.getenv("APIMENU_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
APIMENU_FETCH_MAX_RETRIES = int(os.getenv("APIMENU_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
APIMENU_FETCH_BACKOFF_S = float(os.getenv("APIMENU_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
APIMENU_USER_AGENT = os.getenv("APIMENU_USER_AGENT", DEFAULT_USER_AGENT)
APIMENU_LOG_LEVEL = os.getenv("APIMENU_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# Deepest markdown heading level that becomes a navigable section.
APIMENU_MAX_HEADING_LEVEL = int(os.getenv("APIMENU_MAX_HEADING_LEVEL", str(DEFAULT_MAX_HEADING_LEVEL)))
