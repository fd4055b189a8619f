"""portprobe - discover ephemeral TCP/UDP ports that are currently unused.

Example usage:
    # CLI
    portprobe tcp
    portprobe -v dual

    # Python API
    from portprobe import probe_tcp_port
    port = probe_tcp_port()
"""

from __future__ import annotations

from .core import (
    PortUnavailableError,
    probe_dual_port,
    probe_dual_port_str,
    probe_port,
    probe_port_str,
    probe_tcp_port,
    probe_tcp_port_str,
    probe_udp_port,
    probe_udp_port_str,
)
from .types import PortProtocol, ProbeResult

__version__ = "0.1.0"

__all__ = [
    "PortProtocol",
    "PortUnavailableError",
    "ProbeResult",
    "probe_dual_port",
    "probe_dual_port_str",
    "probe_port",
    "probe_port_str",
    "probe_tcp_port",
    "probe_tcp_port_str",
    "probe_udp_port",
    "probe_udp_port_str",
]
