"""Run the server in the foreground."""

import os
from pathlib import Path

import cyclopts
import logfire
import uvicorn

from hof.cli.console import get_console
from hof.config import Config

app = cyclopts.App(name="serve", help="Run the Hall of Fame server")

APP_FACTORY = "hof.application.api.rest.app:create_app"


@app.default
def serve(
    *,
    config: Path | None = None,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Start the HTTP server.

    Args:
        config: YAML config file (sets HOF_CONFIG_FILE for the app factory).
        host: Bind address; defaults to server.host from config.
        port: Bind port; defaults to server.port from config.
    """
    console = get_console()

    if config is not None:
        if not config.exists():
            console.error(f"Config file not found: {config}")
            raise SystemExit(1)
        os.environ["HOF_CONFIG_FILE"] = str(config.resolve())

    settings = Config()
    bind_host = host or settings.server.host
    bind_port = port or settings.server.port

    # Must happen before the app factory instruments FastAPI
    logfire.configure(send_to_logfire="if-token-present", service_name="hall-of-fame")

    if not settings.admin.enabled:
        console.info("Admin interface is disabled (admin.enabled = false)")
    console.success(f"Serving {settings.server.project_name} on http://{bind_host}:{bind_port}")

    # log_config=None keeps the handlers installed by configure_logging
    uvicorn.run(APP_FACTORY, factory=True, host=bind_host, port=bind_port, log_config=None)
