"""
cep_weather.domain

Domain package shared by the gateway and the resolver.

Responsibilities:
- Postal code validation and temperature conversion.
- Request/response models and the tagged pipeline result types.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package performs I/O; HTTP lives in `clients` and `api`.
