"""Errors raised by the port prober."""

from __future__ import annotations

from portprobe.types.port import PortProtocol


class PortUnavailableError(OSError):
    """The OS refused to allocate or bind a probe socket.

    ``errno`` and ``strerror`` are copied from the underlying OS error, which is
    also chained as ``__cause__``.

    Attributes:
        protocol: Protocol of the socket that failed (TCP or UDP).
        port: Port requested in the failing bind (0 for an ephemeral port).
    """

    def __init__(self, protocol: PortProtocol, port: int, cause: OSError) -> None:
        if cause.errno is None:
            super().__init__(*cause.args)
        else:
            super().__init__(cause.errno, cause.strerror)
        self.protocol = protocol
        self.port = port
        self.detail = str(cause)

    def __reduce__(self):
        return (self.__class__, (self.protocol, self.port, OSError(*self.args)))

    def __str__(self) -> str:
        target = "ephemeral port" if self.port == 0 else f"port {self.port}"
        return f"Cannot bind {self.protocol.value.upper()} {target}: {self.detail}"


__all__ = ["PortUnavailableError"]
