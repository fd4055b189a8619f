"""Tasks for probing free ports from the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoke.tasks import task

from dev.utils import logging_utils
from portprobe import PortProtocol, PortUnavailableError, probe_port

if TYPE_CHECKING:
    from invoke.context import Context


@task(
    help={"protocol": "Protocol to probe (tcp, udp, dual). Can be given multiple times; defaults to all."},
    iterable=["protocol"],
)
@logging_utils.with_banner()
def show(ctx: Context, protocol: list[str] | None = None) -> None:
    """Probe free ports and print them as a table."""
    protocols = [PortProtocol(p) for p in protocol] if protocol else list(PortProtocol)

    ports = {}
    for proto in protocols:
        try:
            ports[proto.value.upper()] = probe_port(proto)
        except PortUnavailableError as e:
            logging_utils.print_failure(f"{proto.value.upper()} probe failed", error=str(e))
            raise
    logging_utils.print_table(ports)
