"""
Ops Module
==========

Public /health endpoint for uptime monitors and the hosting platform's
readiness probe (no auth).
"""

from flask import Blueprint

ops_health_bp = Blueprint(
    'ops_health',
    __name__,
    url_prefix='/health'
)

from . import routes

__all__ = ['ops_health_bp']
