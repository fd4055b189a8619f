"""pytest fixtures that hand out free ports.

Registered through the ``pytest11`` entry point, so the fixtures are available
in any test session once portprobe is installed.
"""

from __future__ import annotations

import pytest

from .core import probe_dual_port, probe_tcp_port, probe_udp_port


@pytest.fixture
def free_tcp_port() -> int:
    """Find an available TCP port."""
    return probe_tcp_port()


@pytest.fixture
def free_udp_port() -> int:
    """Find an available UDP port."""
    return probe_udp_port()


@pytest.fixture
def free_dual_port() -> int:
    """Find a port available for both TCP and UDP."""
    return probe_dual_port()
