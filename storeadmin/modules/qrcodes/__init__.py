"""
QR Codes Module
===============

Home page of the embedded app.

Provides:
- Listing of the shop's QR codes with live product details
- Sample product creation
"""

from flask import Blueprint

qrcodes_bp = Blueprint(
    'qrcodes',
    __name__,
    url_prefix='/app',
    template_folder='templates'
)

from . import routes

__all__ = ['qrcodes_bp']
