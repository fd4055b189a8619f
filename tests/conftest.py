"""Pytest configuration for all tests."""

import logging
import socket
from collections.abc import Callable, Generator

import pytest

from portprobe._internal import logging as portprobe_logging
from portprobe._internal.config import get_settings


@pytest.fixture(autouse=True)
def reset_portprobe_logging(monkeypatch) -> Generator[None]:
    """Undo logger configuration done by a test (the CLI configures it globally)."""
    logger = logging.getLogger(portprobe_logging.LOGGER_NAME)
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    saved_propagate = logger.propagate
    monkeypatch.setattr(portprobe_logging, "_configured", False)
    get_settings.cache_clear()

    yield

    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
    get_settings.cache_clear()


@pytest.fixture
def bound_socket() -> Generator[Callable[[int, int], socket.socket]]:
    """Factory binding sockets on the wildcard address; all are closed at teardown."""
    sockets: list[socket.socket] = []

    def _bind(sock_type: int, port: int) -> socket.socket:
        sock = socket.socket(socket.AF_INET, sock_type)
        sockets.append(sock)
        sock.bind(("", port))
        if sock_type == socket.SOCK_STREAM:
            sock.listen()
        return sock

    yield _bind

    for sock in sockets:
        sock.close()
