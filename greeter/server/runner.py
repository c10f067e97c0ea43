"""
Server start-up.

Binds the listening socket, announces the address and hands the socket to
uvicorn. Binding happens before uvicorn starts so that the announcement is
only made once the address is actually held, and so that a bind failure
reaches the caller as the original OSError.
"""

import socket
from typing import Optional

import uvicorn
from fastapi import FastAPI

from greeter.config import ServerConfig
from greeter.server.app import app as default_app
from greeter.utils.logging_utils import default_log_file, get_logger, uvicorn_log_config

logger = get_logger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Create a socket bound to host and port.

    Args:
        host: Address to bind
        port: Port to bind (0 picks a free port)

    Returns:
        The bound, not yet listening, socket

    Raises:
        OSError: If the address cannot be bound
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family=family, type=socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def listening_url(sock: socket.socket) -> str:
    host, port = sock.getsockname()[:2]
    if ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}/"


def create_server(app: FastAPI, sock: socket.socket, log_level: str = "INFO") -> uvicorn.Server:
    """
    Build a uvicorn server for an already bound socket.

    Args:
        app: Application to serve
        sock: Bound socket the server will listen on
        log_level: Level for uvicorn's own logs

    Returns:
        The server, not yet running; start it with run(sockets=[sock])
    """
    host, port = sock.getsockname()[:2]
    return uvicorn.Server(
        uvicorn.Config(
            app,
            host=host,
            port=port,
            log_level=log_level.lower(),
            log_config=uvicorn_log_config(log_level, default_log_file("greeter")),
        )
    )


def serve(config: Optional[ServerConfig] = None, app: Optional[FastAPI] = None) -> None:
    """
    Run the server until it is shut down.

    Args:
        config: Listening address (defaults to 127.0.0.1:3000)
        app: Application to serve (defaults to the greeting app)

    Raises:
        OSError: If the listening socket cannot be bound
    """
    if config is None:
        config = ServerConfig()
    if app is None:
        app = default_app

    sock = bind_socket(config.host, config.port)
    try:
        logger.info(f"Server running at {listening_url(sock)}")
        server = create_server(app, sock, config.log_level)
        server.run(sockets=[sock])
    finally:
        sock.close()
