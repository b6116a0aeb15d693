"""
cep_weather.api.__main__

Entrypoint for running either service via `python -m cep_weather.api {gateway|resolver}`.

Responsibilities:
- Load settings.
- Create the app and install the process-wide tracer provider.
- Start uvicorn with structlog-compatible logging config.
- Flush pending spans on exit.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import uvicorn
from fastapi import FastAPI

from cep_weather.api.app import create_gateway_app, create_resolver_app
from cep_weather.observability.tracing import configure_tracing
from cep_weather.settings import ServiceSettings, get_gateway_settings, get_resolver_settings


def _serve(app: FastAPI, settings: ServiceSettings) -> None:
    provider = configure_tracing(settings)
    try:
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_config=None,  # structlog
        )
    finally:
        # Drains the batch processor; bounded by the exporter's own timeout.
        provider.shutdown()


def run_gateway() -> None:
    settings = get_gateway_settings()
    _serve(create_gateway_app(settings=settings), settings)


def run_resolver() -> None:
    settings = get_resolver_settings()
    _serve(create_resolver_app(settings=settings), settings)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="python -m cep_weather.api")
    parser.add_argument("service", choices=("gateway", "resolver"))
    args = parser.parse_args(argv)

    if args.service == "gateway":
        run_gateway()
    else:
        run_resolver()


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# For production, each service is commonly invoked behind a process manager
# (systemd/k8s) with its own OTEL_SERVICE_NAME.
