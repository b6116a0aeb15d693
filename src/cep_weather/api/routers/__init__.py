"""
cep_weather.api.routers

Router package.

Responsibilities:
- Gateway (`cep`), resolver (`weather`) and shared `health` routers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers are mounted by the app factories in `cep_weather.api.app`; nothing is
# re-exported here.
