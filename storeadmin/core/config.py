import os
from dotenv import load_dotenv

load_dotenv(override=True)


class Config:
    """
    Base configuration for the StoreAdmin app.
    Deployments should provide credentials via environment variables.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))

    DATABASE_URL = os.getenv('DATABASE_URL') or 'sqlite:///' + os.path.join(DB_DIR, 'storeadmin.db')

    # Shopify app settings
    SHOPIFY_API_KEY = os.getenv('SHOPIFY_API_KEY')
    SHOPIFY_API_SECRET = os.getenv('SHOPIFY_API_SECRET')
    SHOPIFY_API_VERSION = os.getenv('SHOPIFY_API_VERSION', '2025-10')
    SHOPIFY_APP_URL = os.getenv('SHOPIFY_APP_URL', 'http://localhost:5000')

    # Offline token for single-store installs; embedded sessions override these
    SHOPIFY_SHOP = os.getenv('SHOPIFY_SHOP')
    SHOPIFY_ACCESS_TOKEN = os.getenv('SHOPIFY_ACCESS_TOKEN')

    # Seconds before an Admin API call is abandoned
    ADMIN_API_TIMEOUT = int(os.getenv('ADMIN_API_TIMEOUT', '30'))

    # Table names
    PROFILES_TABLE = "profiles"
    QR_CODES_TABLE = "qr_codes"
    LOGS_TABLE = "app_logs"

    # Port for local server (optional, projects can set this)
    port = int(os.getenv('PORT', '5000'))


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val:
        return val
    return os.getenv(key, default)
