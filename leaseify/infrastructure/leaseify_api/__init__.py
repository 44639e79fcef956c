from .client import LeaseifyApiClient

__all__ = [
    "LeaseifyApiClient",
]
