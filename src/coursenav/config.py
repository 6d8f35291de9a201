"""Local configuration for coursenav."""

from __future__ import annotations

import os


DEFAULT_API_BASE_URL = "http://localhost:3000/api"
DEFAULT_QUERY_TIMEOUT_S = 5.0
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "coursenav/0.1"

# Content API serving exams, subjects, units, chapters, topics and subtopics.
COURSENAV_API_BASE_URL = os.getenv("COURSENAV_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
# Upper bound for a single catalog query issued by the resolver.
COURSENAV_QUERY_TIMEOUT_S = float(os.getenv("COURSENAV_QUERY_TIMEOUT_S", str(DEFAULT_QUERY_TIMEOUT_S)))
COURSENAV_FETCH_TIMEOUT_S = float(os.getenv("COURSENAV_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
COURSENAV_FETCH_MAX_RETRIES = int(os.getenv("COURSENAV_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
COURSENAV_FETCH_BACKOFF_S = float(os.getenv("COURSENAV_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
COURSENAV_USER_AGENT = os.getenv("COURSENAV_USER_AGENT", DEFAULT_USER_AGENT)
