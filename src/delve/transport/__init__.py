"""Transport implementations."""

from .tcp_transport import TcpTransport

__all__ = ["TcpTransport"]
