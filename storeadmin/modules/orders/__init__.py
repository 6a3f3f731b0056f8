"""
Orders Module
=============

Orders status overview page for the embedded admin.

Provides:
- Classification of recent orders by fulfillment status
- Delivered vs not delivered summary and per-status breakdown
- JSON summary endpoint for the admin frontend
"""

from flask import Blueprint

orders_bp = Blueprint(
    'orders',
    __name__,
    url_prefix='/app',
    template_folder='templates'
)

from . import routes

__all__ = ['orders_bp']
