"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.selector import Selector


class Transport(ABC):
    """Abstract interface for retrieving the bytes behind a selector."""

    @abstractmethod
    def fetch(self, selector: "Selector", query: str | None = None) -> bytes:
        """Fetch a resource.

        Args:
            selector: The resource to request (host, port and path are used).
            query: Search string, sent after a tab for search selectors.

        Returns:
            The complete response, read until the server closes the connection.

        Raises:
            TransportError: If resolving, connecting or reading fails.
        """
        pass
