"""
StoreAdmin Core
===============

Core utilities and shared functionality for StoreAdmin modules.
"""

from .config import Config, get_config_value
from .database import db, Profile, QRCode, AppLog
from .logging_service import LoggingService, db_log
from .admin_api import AdminApiClient
from .auth import AdminContext, admin_required, authenticate_admin, session_authenticator
from .exceptions import StoreAdminError, AdminApiError, NotAuthenticatedError

__all__ = [
    'Config', 'get_config_value',
    'db', 'Profile', 'QRCode', 'AppLog',
    'LoggingService', 'db_log',
    'AdminApiClient',
    'AdminContext', 'admin_required', 'authenticate_admin', 'session_authenticator',
    'StoreAdminError', 'AdminApiError', 'NotAuthenticatedError',
]
