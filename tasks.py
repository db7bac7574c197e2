"""Invoke tasks for WineList development."""

import sys

from invoke import task
from invoke.context import Context


@task
def start(ctx: Context, host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the WineList API server.

    Args:
        ctx: Invoke context
        host: Host to bind to (default: 127.0.0.1)
        port: Port to bind to (default: 8000)
        reload: Enable auto-reload for development
    """
    cmd = f"uv run winelist serve --host {host} --port {port}"
    if reload:
        cmd += " --reload"

    try:
        ctx.run(cmd, pty=True)
    except KeyboardInterrupt:
        print("\nServer stopped")
        sys.exit(0)


@task
def test(ctx: Context, verbose: bool = False, coverage: bool = False) -> None:
    """Run the test suite.

    Args:
        ctx: Invoke context
        verbose: Enable verbose output
        coverage: Run with coverage report
    """
    cmd = "uv run pytest"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += " --cov=winelist --cov-report=term-missing"
    ctx.run(cmd, pty=True)


@task
def clean(ctx: Context) -> None:
    """Clean up caches and build artifacts."""
    for pattern in ["__pycache__", "*.pyc", "*.pyo", ".pytest_cache"]:
        ctx.run(f"find . -name '{pattern}' -exec rm -rf {{}} + 2>/dev/null || true", warn=True)

    for path in ["build", "dist", "*.egg-info", ".eggs"]:
        ctx.run(f"rm -rf {path} 2>/dev/null || true", warn=True)

    print("Cleanup complete")
