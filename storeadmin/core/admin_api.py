# storeadmin/core/admin_api.py
import requests
from typing import Optional, Dict, Any

from .config import Config
from .exceptions import AdminApiError
from .logging_service import LoggingService


class AdminApiClient:
    """Client for the Shopify Admin GraphQL API, bound to one shop"""

    def __init__(self, shop: str, access_token: str, api_version: str = None,
                 timeout: int = None, session: requests.Session = None):
        self.shop = shop
        self.access_token = access_token
        self.api_version = api_version or Config.SHOPIFY_API_VERSION
        self.timeout = timeout or Config.ADMIN_API_TIMEOUT
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}/graphql.json"

    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run a query or mutation and return the decoded response body.

        GraphQL-level ``errors`` are left in the returned payload for the
        caller to inspect. Transport failures and non-2xx responses raise
        AdminApiError carrying any error messages the server sent.
        """
        headers = {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.access_token,
        }
        payload = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self.session.post(self.endpoint, headers=headers, json=payload,
                                         timeout=self.timeout)
        except requests.RequestException as e:
            LoggingService.error('admin_api', f"Admin API request to {self.shop} failed",
                                 {'error': str(e)})
            raise AdminApiError(f"Admin API request failed: {e}") from e

        LoggingService.log_api_call('admin_api', self.endpoint, 'POST', response.status_code)

        if response.status_code not in (200, 201):
            errors = self._error_messages(response)
            detail = "; ".join(errors) or response.reason or "unknown error"
            raise AdminApiError(
                f"Admin API returned {response.status_code}: {detail}",
                status_code=response.status_code,
                errors=errors,
            )

        try:
            return response.json()
        except ValueError as e:
            raise AdminApiError("Admin API returned a non-JSON body",
                                status_code=response.status_code) from e

    @staticmethod
    def _error_messages(response: requests.Response) -> list:
        try:
            body = response.json()
        except ValueError:
            return []

        errors = body.get("errors") if isinstance(body, dict) else None
        if isinstance(errors, str):
            return [errors]
        if isinstance(errors, list):
            return [e.get("message", "") if isinstance(e, dict) else str(e) for e in errors]
        return []
