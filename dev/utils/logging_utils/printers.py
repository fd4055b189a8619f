"""Basic print utilities using Rich."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from .console import Panel, Table, Text, console

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def print_banner(title: str, data: dict[str, Any] | None = None) -> None:
    """Print a task banner with title and optional key-value pairs.

    Args:
        title: Main title text (e.g., "SHOW").
        data: Optional dict of key-value pairs to display below the title.
    """
    content = Text()
    if data:
        for i, (key, value) in enumerate(data.items()):
            if i > 0:
                content.append("\n")
            content.append(f"{key}: ", style="dim")
            content.append(str(value), style="cyan")
    console.print()
    console.print(Panel(content, style="blue", title=f"[bold]{title}[/]", title_align="center"))
    console.print()


def print_table(data: dict[str, Any]) -> None:
    """Print key-value data as an aligned table.

    Example:
        >>> print_table({"TCP": 43127, "UDP": 51820})
          TCP  43127
          UDP  51820
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="cyan")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)
    console.print()


def print_success(message: str = "SUCCESS") -> None:
    """Print success message."""
    console.print()
    console.print(f"[bold green]✓ {message}[/]")


def print_failure(message: str = "FAILED", error: str | None = None) -> None:
    """Print failure message with optional error details.

    Example:
        >>> print_failure("UDP probe failed", error="Cannot bind UDP ephemeral port: [Errno 24] Too many open files")

        ✗ UDP probe failed
          Cannot bind UDP ephemeral port: [Errno 24] Too many open files
    """
    console.print()
    console.print(f"[bold red]✗ {message}[/]")
    if error:
        console.print(f"  [dim]{error}[/]")


def print_info(message: str) -> None:
    console.print(f"  {message}")


def with_banner(
    exclude: set[str] | None = None,
    include_false: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that prints a banner with the task name and its arguments before execution.

    Args:
        exclude: Additional parameter names to exclude from banner. "self" and "ctx"
            are always excluded.
        include_false: If True, include parameters with False/None values (default: False).
    """
    effective_exclude = {"self", "ctx"} | (exclude or set())

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound = inspect.signature(func).bind(*args, **kwargs)
            bound.apply_defaults()

            title = func.__name__.replace("_", " ").upper()  # type: ignore[attr-defined]

            data = {}
            for name, value in bound.arguments.items():
                if name in effective_exclude:
                    continue
                if not include_false and (value is None or value is False):
                    continue
                data[name.replace("_", " ").title()] = value

            print_banner(title, data if data else None)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "print_banner",
    "print_failure",
    "print_info",
    "print_success",
    "print_table",
    "with_banner",
]
