class StoreAdminError(Exception):
    """Base error for the StoreAdmin app"""


class AdminApiError(StoreAdminError):
    """The Admin API call failed at the transport or HTTP level"""

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class NotAuthenticatedError(StoreAdminError):
    """No shop session could be resolved for the request"""
