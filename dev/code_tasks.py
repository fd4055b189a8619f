"""Code quality tasks (linting, formatting, testing)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoke.tasks import task

if TYPE_CHECKING:
    from invoke.context import Context

from dev.utils import logging_utils


@task(name="lint")
@logging_utils.with_banner()
def lint(ctx: Context) -> None:
    """Run linting (no fixes) - for CI."""
    logging_utils.print_info("Running ruff check...")
    ctx.run("uv run ruff check")

    logging_utils.print_info("Running ruff format check...")
    ctx.run("uv run ruff format --check")

    logging_utils.print_success("All checks passed")


@task(name="format")
def format_and_check(c: Context) -> None:
    """Format code using ruff - for local dev."""
    c.run("uv run ruff check src dev tests --fix")
    c.run("uv run ruff format src dev tests")


@task(name="test", help={"keyword": "Only run tests matching this pytest -k expression."})
@logging_utils.with_banner()
def run_tests(ctx: Context, keyword: str | None = None) -> None:
    """Run tests."""
    logging_utils.print_info("Running tests...")
    keyword_arg = f" -k '{keyword}'" if keyword else ""
    ctx.run(f"uv run pytest{keyword_arg}")

    logging_utils.print_success("All tests passed")
