"""Bearer token authentication handler."""

from typing import Dict

from fleetdash.infrastructure.storage import TokenStore


class BearerTokenAuth:
    """Reads the token from the store on every call, so logins and
    session expiry take effect on the next request without rebuilding
    the HTTP client."""

    def __init__(self, token_store: TokenStore):
        self.token_store = token_store

    def get_auth_headers(self) -> Dict[str, str]:
        token = self.token_store.get_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}
