"""
Profile Module
==============

Simple profile records (name and age) kept in the app database.
"""

from flask import Blueprint

profile_bp = Blueprint(
    'profile',
    __name__,
    url_prefix='/app',
    template_folder='templates'
)

from . import routes

__all__ = ['profile_bp']
