"""
StoreAdmin Starter
==================

A ready-to-run Flask application with all StoreAdmin modules enabled.

Run with:
    python app.py

Visit (inside the Shopify admin, or directly with SHOPIFY_SHOP and
SHOPIFY_ACCESS_TOKEN set):
    http://localhost:5000/app/         - QR codes
    http://localhost:5000/app/orders   - Orders status overview
    http://localhost:5000/app/profile  - Profiles
"""

from flask import Flask, redirect, url_for
from storeadmin import StoreAdmin

from config import Config

# Create Flask app
app = Flask(__name__)
app.config.from_object(Config)

# Embedded in an iframe on admin.shopify.com
app.config['SESSION_COOKIE_SECURE'] = not app.debug
app.config['SESSION_COOKIE_SAMESITE'] = 'None' if not app.debug else 'Lax'
app.config['SESSION_COOKIE_HTTPONLY'] = True

# Initialize StoreAdmin - this registers all modules automatically
storeadmin = StoreAdmin(app, {'brand_name': Config.BRAND_NAME})


@app.route('/')
def index():
    """Shopify opens the app at its root URL"""
    return redirect(url_for('qrcodes.index'))


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print(Config.BRAND_NAME)
    print("=" * 60)
    print(f"QR codes:        http://localhost:{Config.PORT}/app/")
    print(f"Orders:          http://localhost:{Config.PORT}/app/orders")
    print(f"Profile:         http://localhost:{Config.PORT}/app/profile")
    print(f"Health:          http://localhost:{Config.PORT}/health")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.PORT, debug=True)
