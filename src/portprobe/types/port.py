"""Port-related type definitions."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

MIN_PORT = 1
MAX_PORT = 65535


class PortProtocol(StrEnum):
    """Transport protocol a port is probed for."""

    TCP = "tcp"
    UDP = "udp"
    DUAL = "dual"  # Free for both TCP and UDP at probe time


class ProbeResult(BaseModel):
    """Outcome of a successful port probe.

    Attributes:
        protocol: Protocol the port was probed for.
        port: Port number assigned by the OS.
    """

    model_config = ConfigDict(frozen=True)

    protocol: PortProtocol = Field(description="Protocol the port was probed for")
    port: int = Field(ge=MIN_PORT, le=MAX_PORT, description="Port number assigned by the OS")

    @property
    def port_str(self) -> str:
        """Port as a base-10 string."""
        return str(self.port)

    def __str__(self) -> str:
        return self.port_str


__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "PortProtocol",
    "ProbeResult",
]
