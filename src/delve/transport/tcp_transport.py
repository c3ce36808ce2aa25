"""Plain TCP transport for the Gopher protocol."""

import logging
import socket

from ..core.selector import Selector
from ..errors import GopherConnectionError, ResolutionError, TransferError
from ..interfaces import Transport

logger = logging.getLogger(__name__)


class TcpTransport(Transport):
    """Fetches Gopher resources over a single TCP connection per request."""

    RECV_SIZE = 64 * 1024

    def __init__(self, timeout: float | None = None):
        """
        Initialize the transport.

        Args:
            timeout: Socket timeout in seconds. None blocks until the server
                    closes the connection.
        """
        self.timeout = timeout

    def fetch(self, selector: Selector, query: str | None = None) -> bytes:
        """
        Fetch the resource behind a selector.

        Args:
            selector: The resource to request.
            query: Search string for search selectors, or None.

        Returns:
            All bytes sent by the server.

        Raises:
            ResolutionError: If host/port cannot be resolved.
            GopherConnectionError: If no resolved address accepts a connection.
            TransferError: If sending or receiving fails.
        """
        if query is not None:
            request = f"{selector.path}\t{query}\r\n"
        else:
            request = f"{selector.path}\r\n"

        with self._connect(selector.host, selector.port) as sock:
            logger.debug(f"Sending request {request!r} to {selector.host}:{selector.port}")
            try:
                sock.sendall(request.encode("utf-8"))
                data = self._receive_all(sock)
            except OSError as e:
                raise TransferError(
                    f"transfer from `{selector.host}`:`{selector.port}` failed: {e.strerror or e}"
                ) from e

        logger.info(f"Received {len(data)} bytes from {selector.host}:{selector.port}")
        return data

    def _connect(self, host: str, port: str) -> socket.socket:
        """
        Resolve host/port and connect to the first address that accepts.

        Raises:
            ResolutionError: If resolution fails or yields nothing.
            GopherConnectionError: If every candidate refuses.
        """
        try:
            candidates = socket.getaddrinfo(
                host, port, socket.AF_UNSPEC, socket.SOCK_STREAM, socket.IPPROTO_TCP
            )
        except (socket.gaierror, ValueError) as e:
            logger.debug(f"Resolving {host}:{port} failed: {e}")
            raise ResolutionError(host, port) from e

        if not candidates:
            raise ResolutionError(host, port)

        for family, socktype, proto, _, address in candidates:
            try:
                sock = socket.socket(family, socktype, proto)
            except OSError as e:
                logger.debug(f"Cannot create socket for {address}: {e}")
                continue
            try:
                sock.settimeout(self.timeout)
                sock.connect(address)
            except OSError as e:
                logger.debug(f"Connecting to {address} failed: {e}")
                sock.close()
                continue
            return sock

        raise GopherConnectionError(host, port)

    def _receive_all(self, sock: socket.socket) -> bytes:
        """Read until the peer closes the connection."""
        chunks = []
        while True:
            data = sock.recv(self.RECV_SIZE)
            if not data:
                break
            chunks.append(data)
        return b"".join(chunks)
