"""
StoreAdmin - Embedded Shopify Admin App
=======================================

Server-rendered pages that run inside the Shopify admin:
- QR code listing and sample product creation
- Orders fulfillment status overview
- Profile records

Usage:
    from flask import Flask
    from storeadmin import StoreAdmin

    app = Flask(__name__)
    StoreAdmin(app)
"""

__version__ = '0.1.0'

import logging
import os

from jinja2 import ChoiceLoader, PackageLoader

from .core.config import Config
from .core.auth import session_authenticator
from .core.boundary import register_boundary
from .core.database import init_database
from .core.text import truncate, date_string, percent_text

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'brand_name': 'Hello App',
    'features': {
        'qrcodes': True,
        'orders': True,
        'profile': True,
        'ops': True,
    },
}


class StoreAdmin:
    """Flask extension that registers the StoreAdmin modules on an app"""

    def __init__(self, app=None, config=None, authenticator=None):
        self._config = self._merge_config(config or {})
        self._registered = []
        self.authenticator = authenticator or session_authenticator
        if app is not None:
            self.init_app(app)

    @staticmethod
    def _merge_config(config):
        merged = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in config.items() if k != 'features'})
        merged['features'] = {**DEFAULT_CONFIG['features'], **config.get('features', {})}
        return merged

    def init_app(self, app):
        self._apply_defaults(app)

        init_database(app)
        register_boundary(app)

        # Shared layout templates live in the package, module templates in blueprints
        loaders = [PackageLoader('storeadmin', 'templates')]
        if app.jinja_loader is not None:
            loaders.insert(0, app.jinja_loader)
        app.jinja_loader = ChoiceLoader(loaders)

        app.add_template_filter(truncate, 'truncate_text')
        app.add_template_filter(date_string, 'date_string')
        app.add_template_filter(percent_text, 'percent_text')

        self._register_modules(app)

        @app.context_processor
        def inject_storeadmin_config():
            return {
                'storeadmin_config': self._config,
                'brand_name': self._config['brand_name'],
                'shopify_api_key': app.config.get('SHOPIFY_API_KEY') or '',
            }

        app.extensions['storeadmin'] = self
        logger.info("StoreAdmin initialised with modules: %s", ', '.join(self._registered))

    def _apply_defaults(self, app):
        """Fill app.config from Config where the host app left a key unset"""
        for key in ('SECRET_KEY', 'DB_DIR', 'SHOPIFY_API_KEY', 'SHOPIFY_API_SECRET',
                    'SHOPIFY_API_VERSION', 'SHOPIFY_APP_URL', 'SHOPIFY_SHOP',
                    'SHOPIFY_ACCESS_TOKEN', 'ADMIN_API_TIMEOUT'):
            if not app.config.get(key):
                app.config[key] = getattr(Config, key, None)

        if not app.config.get('SQLALCHEMY_DATABASE_URI'):
            url = (self._config.get('DATABASE_URL')
                   or app.config.get('DATABASE_URL')
                   or os.getenv('DATABASE_URL'))
            if not url:
                url = 'sqlite:///' + os.path.join(app.config['DB_DIR'], 'storeadmin.db')
            app.config['SQLALCHEMY_DATABASE_URI'] = url

    def _register_modules(self, app):
        features = self._config['features']

        if features.get('qrcodes'):
            from .modules.qrcodes import qrcodes_bp
            app.register_blueprint(qrcodes_bp)
            self._registered.append('qrcodes')

        if features.get('orders'):
            from .modules.orders import orders_bp
            app.register_blueprint(orders_bp)
            self._registered.append('orders')

        if features.get('profile'):
            from .modules.profile import profile_bp
            app.register_blueprint(profile_bp)
            self._registered.append('profile')

        if features.get('ops'):
            from .modules.ops import ops_health_bp
            app.register_blueprint(ops_health_bp)
            self._registered.append('ops')

    def get_registered_modules(self):
        return list(self._registered)

    @property
    def config(self):
        return self._config


__all__ = ['StoreAdmin', '__version__']
