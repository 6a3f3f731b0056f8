"""
Centralized logging service for the StoreAdmin application.
Provides structured logging with database storage and easy integration.
"""

import json
import logging
import traceback
from datetime import datetime

from flask import request, has_request_context, g

from .database import db, AppLog

console = logging.getLogger(__name__)


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None, None

        try:
            ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
            if ip_address and ',' in ip_address:
                ip_address = ip_address.split(',')[0].strip()

            user_agent = request.headers.get('User-Agent', '')
            request_path = request.path

            admin = g.get('admin')
            shop = admin.shop if admin is not None else None

            return ip_address, user_agent, request_path, shop
        except Exception:
            return None, None, None, None

    @staticmethod
    def log(level, source, message, details=None, shop=None):
        """
        Log a message to the database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (orders, profile, qrcodes, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
            shop (str): Optional shop domain, defaults to the request's shop
        """
        level = level.upper()
        console.log(getattr(logging, level, logging.INFO), "[%s] %s", source, message)

        try:
            ip_address, user_agent, request_path, request_shop = LoggingService._get_request_context()

            if isinstance(details, dict):
                details = json.dumps(details, indent=2, default=str)

            # Write on its own connection so a pending request transaction is untouched
            with db.engine.begin() as conn:
                conn.execute(AppLog.__table__.insert().values(
                    timestamp=datetime.now().isoformat(),
                    level=level,
                    source=source,
                    message=message,
                    details=details,
                    ip_address=ip_address,
                    user_agent=user_agent,
                    request_path=request_path,
                    shop=shop or request_shop,
                ))

        except Exception as e:
            # Fallback to console logging if database fails
            if details:
                console.error("Details: %s", details)
            console.error("Logging service error: %s", e)

    @staticmethod
    def debug(source, message, details=None, shop=None):
        LoggingService.log('DEBUG', source, message, details, shop)

    @staticmethod
    def info(source, message, details=None, shop=None):
        LoggingService.log('INFO', source, message, details, shop)

    @staticmethod
    def warning(source, message, details=None, shop=None):
        LoggingService.log('WARNING', source, message, details, shop)

    @staticmethod
    def error(source, message, details=None, shop=None):
        LoggingService.log('ERROR', source, message, details, shop)

    @staticmethod
    def critical(source, message, details=None, shop=None):
        LoggingService.log('CRITICAL', source, message, details, shop)

    @staticmethod
    def log_api_call(source, endpoint, method='POST', status_code=200, details=None):
        """Log outbound API calls"""
        message = f"API {method} {endpoint} - Status: {status_code}"
        level = 'INFO' if 200 <= status_code < 400 else 'WARNING' if status_code < 500 else 'ERROR'
        LoggingService.log(level, source, message, details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': ''.join(traceback.format_exception(type(error), error, error.__traceback__)),
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)


def db_log(level, source, message, details=None):
    """Shortcut used by modules: persist a log row without importing the class"""
    LoggingService.log(level, source, message, details)


