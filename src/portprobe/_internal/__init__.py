"""Internal utilities for the portprobe package."""

from __future__ import annotations

from .config import PortProbeSettings, get_settings
from .logging import configure_logging

__all__ = ["PortProbeSettings", "configure_logging", "get_settings"]
