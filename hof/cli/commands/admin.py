"""Admin commands - a thin HTTP client for the /admin API."""

import os
import sys
from typing import Any

import cyclopts
import httpx

from hof.cli.console import get_console

app = cyclopts.App(name="admin", help="Manage reports on a running server")

REPORT_COLUMNS = [
    ("id", "ID"),
    ("reference_id", "Ref"),
    ("date", "Date"),
    ("affected_service", "Service"),
    ("reporter", "Reporter"),
    ("reporter_handle", "Handle"),
    ("summary", "Summary"),
]


def get_server_url() -> str:
    """Get server URL from environment."""
    return os.environ.get("HOF_SERVER", "http://127.0.0.1:8080")


def _request(method: str, path: str, key: str | None) -> Any:
    console = get_console()
    admin_key = key or os.environ.get("HOF_ADMIN_KEY")
    if not admin_key:
        console.error("No admin key given", hint="Pass --key or set HOF_ADMIN_KEY")
        sys.exit(1)

    server_url = get_server_url()
    try:
        response = httpx.request(
            method,
            f"{server_url}{path}",
            headers={"Authorization": admin_key, "Content-Type": "application/json"},
        )
    except httpx.ConnectError:
        console.error(
            f"Could not connect to server at {server_url}",
            hint="Is the server running? Start it with: hof serve",
        )
        sys.exit(1)

    if response.status_code == 404 and path.startswith("/admin/list"):
        console.error("Admin interface is not enabled on this server")
        sys.exit(1)
    if response.is_error:
        try:
            message = response.json().get("message", response.text)
        except ValueError:
            message = response.text
        console.error(f"Server error: {response.status_code} - {message}")
        sys.exit(1)
    return response.json()


@app.command(name="list")
def list_reports(*, key: str | None = None) -> None:
    """List every report, including reference ids.

    Args:
        key: Admin key (defaults to HOF_ADMIN_KEY).
    """
    reports = _request("GET", "/admin/list", key)
    console = get_console()
    if not reports:
        console.info("No reports stored")
        return
    console.table(reports, REPORT_COLUMNS, title=f"{len(reports)} report(s)")


@app.command
def remove(report_id: int, /, *, key: str | None = None) -> None:
    """Delete a report by id.

    Args:
        report_id: Id shown by ``hof admin list``.
        key: Admin key (defaults to HOF_ADMIN_KEY).
    """
    result = _request("DELETE", f"/admin/remove/{report_id}", key)
    get_console().success(result["message"])
