"""Core port probing for portprobe."""

from .errors import PortUnavailableError
from .probe import (
    probe_dual_port,
    probe_dual_port_str,
    probe_port,
    probe_port_str,
    probe_tcp_port,
    probe_tcp_port_str,
    probe_udp_port,
    probe_udp_port_str,
)

__all__ = [
    "PortUnavailableError",
    "probe_dual_port",
    "probe_dual_port_str",
    "probe_port",
    "probe_port_str",
    "probe_tcp_port",
    "probe_tcp_port_str",
    "probe_udp_port",
    "probe_udp_port_str",
]
