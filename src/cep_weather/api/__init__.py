"""
cep_weather.api

API package for the gateway and resolver services.

Responsibilities:
- FastAPI app factories and router modules.
- API-layer dependency wiring and response helpers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + delegation to services.
