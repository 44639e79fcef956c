"""Abstract transport interface (port) for the REST backend."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Transport(ABC):
    """Port for issuing one HTTP request per logical call.

    Implementations return the decoded JSON body for 2xx responses and raise
    ``ApiError`` for everything else. No retries, no caching.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send ``method`` to ``path`` (relative to the API base URL)."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections, if any."""
        return None
