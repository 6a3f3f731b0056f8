"""
Error boundary and embedded-app response headers.
"""

from flask import g, render_template, request
from werkzeug.exceptions import HTTPException

from .database import db
from .logging_service import LoggingService

SHOPIFY_ADMIN_ORIGIN = "https://admin.shopify.com"


def wants_json():
    """True when the client asked for JSON rather than a page"""
    if request.is_json:
        return True
    best = request.accept_mimetypes.best_match(['application/json', 'text/html'])
    return best == 'application/json' and request.accept_mimetypes[best] > request.accept_mimetypes['text/html']


def handle_error(error):
    """Render the fallback error page; HTTP errors pass through as-is"""
    if isinstance(error, HTTPException):
        return error

    db.session.rollback()
    LoggingService.log_error_with_traceback('boundary', error, {'path': request.path})
    return render_template('layout/error.html', error=error), 500


def add_embedded_headers(response):
    """Allow the admin to frame the app; other headers are left untouched"""
    if 'Content-Security-Policy' not in response.headers:
        ancestors = [SHOPIFY_ADMIN_ORIGIN]
        admin = g.get('admin')
        if admin is not None:
            ancestors.insert(0, f"https://{admin.shop}")
        response.headers['Content-Security-Policy'] = f"frame-ancestors {' '.join(ancestors)};"
    return response


def register_boundary(app):
    app.register_error_handler(Exception, handle_error)
    app.after_request(add_embedded_headers)
