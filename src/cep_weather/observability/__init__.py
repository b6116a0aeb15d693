"""
cep_weather.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- OpenTelemetry tracing setup and trace-context propagation.
- Request middleware binding both for every inbound request.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Pipeline code only asks for a tracer; the exporter/backend is chosen in `tracing`.
