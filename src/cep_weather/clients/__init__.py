"""
cep_weather.clients

HTTP client package.

Responsibilities:
- Provide client interfaces for the location provider, the weather provider and
  the resolver service.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on these classes, never on raw httpx calls; every client raises
# `UpstreamError` for any downstream fault.
