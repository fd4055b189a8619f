"""CLI output formatting using Rich.

Requirements:
    Rich library (dev dependency): uv pip install -e ".[dev]"

Usage:
    from dev.utils.logging_utils import print_banner, print_success

    print_banner("SHOW", data={"Protocol": "tcp"})
    print_table({"TCP": 43127})
    print_success("Done")
"""

from .console import console
from .printers import (
    print_banner,
    print_failure,
    print_info,
    print_success,
    print_table,
    with_banner,
)

__all__ = [
    "console",
    "print_banner",
    "print_failure",
    "print_info",
    "print_success",
    "print_table",
    "with_banner",
]
