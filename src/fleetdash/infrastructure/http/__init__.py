"""HTTP infrastructure components."""

from .auth import BearerTokenAuth
from .client import AuthenticatedHttpClient, HttpClient

__all__ = ["HttpClient", "AuthenticatedHttpClient", "BearerTokenAuth"]
