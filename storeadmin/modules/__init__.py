"""
StoreAdmin Modules
==================

Flask blueprint modules for the embedded admin pages.
"""

__all__ = ['qrcodes', 'orders', 'profile', 'ops']
