#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app is built so that failures
while wiring the container are reported too.
"""

import sys

import logfire
import uvicorn

from prompthub.config import Settings
from prompthub.util.logging import setup_logging
from prompthub.util.observability import configure_logfire

APP_FACTORY = "prompthub.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting PromptHub API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            proxy_headers=True,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("PromptHub API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
