"""
cep_weather.services

Service layer.

Responsibilities:
- Resolver pipeline (validate -> location -> weather -> convert).
- Gateway forwarding to the resolver.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services return tagged `Success | Failure` results; they never build HTTP responses.
