"""Ephemeral port discovery.

Each probe opens a transient socket on the wildcard address, reads back the
port the OS assigned, and closes the socket before returning. Nothing is
reserved: another process may take the port between the probe and its use.
"""

from __future__ import annotations

import logging
import socket

from portprobe.types.port import PortProtocol

from .errors import PortUnavailableError

logger = logging.getLogger(__name__)

# Wildcard address; binding port 0 lets the OS pick a free port.
WILDCARD_ADDRESS = ""
EPHEMERAL_PORT = 0


def _bind(protocol: PortProtocol, port: int) -> int:
    """Bind a transient socket and return its local port.

    Args:
        protocol: PortProtocol.TCP or PortProtocol.UDP.
        port: Port to bind, or EPHEMERAL_PORT to let the OS choose.

    Returns:
        The bound port number.

    Raises:
        PortUnavailableError: If the socket cannot be created or bound.
    """
    sock_type = socket.SOCK_STREAM if protocol is PortProtocol.TCP else socket.SOCK_DGRAM
    try:
        with socket.socket(socket.AF_INET, sock_type) as sock:
            sock.bind((WILDCARD_ADDRESS, port))
            if protocol is PortProtocol.TCP:
                sock.listen()
            return sock.getsockname()[1]
    except OSError as e:
        logger.debug("Failed to bind %s port %d: %s", protocol.value, port, e)
        raise PortUnavailableError(protocol, port, e) from e


def probe_tcp_port() -> int:
    """Find and return an available TCP port.

    Returns:
        A port number the OS assigned to a short-lived TCP listener.

    Raises:
        PortUnavailableError: If the OS cannot allocate a socket.
    """
    port = _bind(PortProtocol.TCP, EPHEMERAL_PORT)
    logger.debug("Probed TCP port %d", port)
    return port


def probe_udp_port() -> int:
    """Find and return an available UDP port.

    Returns:
        A port number the OS assigned to a short-lived UDP socket.

    Raises:
        PortUnavailableError: If the OS cannot allocate a socket.
    """
    port = _bind(PortProtocol.UDP, EPHEMERAL_PORT)
    logger.debug("Probed UDP port %d", port)
    return port


def probe_dual_port() -> int:
    """Find a port that is free for both TCP and UDP.

    Probes an ephemeral TCP port, then binds a UDP socket to that same number.
    Only one candidate is tried. The TCP probe is released before the UDP bind,
    so availability holds only at the moment of each check.

    Returns:
        A port number usable for both TCP and UDP at probe time.

    Raises:
        PortUnavailableError: If the TCP probe fails, or if the UDP bind on the
            candidate port fails (``protocol`` is then UDP).
    """
    port = probe_tcp_port()
    _bind(PortProtocol.UDP, port)
    logger.debug("Confirmed UDP on TCP port %d", port)
    return port


_PROBES = {
    PortProtocol.TCP: probe_tcp_port,
    PortProtocol.UDP: probe_udp_port,
    PortProtocol.DUAL: probe_dual_port,
}


def probe_port(protocol: PortProtocol | str) -> int:
    """Run the probe matching ``protocol``.

    Args:
        protocol: PortProtocol member or its value ("tcp", "udp", "dual").

    Returns:
        The probed port number.

    Raises:
        ValueError: If protocol is not a known PortProtocol value.
        PortUnavailableError: If the probe fails.
    """
    return _PROBES[PortProtocol(protocol)]()


def probe_tcp_port_str() -> str:
    """Same as probe_tcp_port, formatted as a decimal string."""
    return str(probe_tcp_port())


def probe_udp_port_str() -> str:
    """Same as probe_udp_port, formatted as a decimal string."""
    return str(probe_udp_port())


def probe_dual_port_str() -> str:
    """Same as probe_dual_port, formatted as a decimal string."""
    return str(probe_dual_port())


def probe_port_str(protocol: PortProtocol | str) -> str:
    """Same as probe_port, formatted as a decimal string."""
    return str(probe_port(protocol))


__all__ = [
    "probe_dual_port",
    "probe_dual_port_str",
    "probe_port",
    "probe_port_str",
    "probe_tcp_port",
    "probe_tcp_port_str",
    "probe_udp_port",
    "probe_udp_port_str",
]
