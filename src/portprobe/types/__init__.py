from .port import MAX_PORT, MIN_PORT, PortProtocol, ProbeResult

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "PortProtocol",
    "ProbeResult",
]
