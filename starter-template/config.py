import os
from dotenv import load_dotenv

load_dotenv()

DB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'databases')


class Config:
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    BRAND_NAME = os.getenv('BRAND_NAME', 'Hello App')
    PORT = int(os.getenv('PORT', '5000'))

    # Database
    DB_DIR = DB_DIR
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///' + os.path.join(DB_DIR, 'storeadmin.db'))

    # Shopify app
    SHOPIFY_API_KEY = os.getenv('SHOPIFY_API_KEY', '')
    SHOPIFY_API_SECRET = os.getenv('SHOPIFY_API_SECRET', '')
    SHOPIFY_API_VERSION = os.getenv('SHOPIFY_API_VERSION', '2025-10')

    # Single-store offline token
    SHOPIFY_SHOP = os.getenv('SHOPIFY_SHOP', '')
    SHOPIFY_ACCESS_TOKEN = os.getenv('SHOPIFY_ACCESS_TOKEN', '')
