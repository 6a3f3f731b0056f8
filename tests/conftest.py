"""
Shared fixtures for the StoreAdmin tests.

NOTE: pytest is listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile
from unittest.mock import MagicMock

import pytest
from flask import Flask

from storeadmin import StoreAdmin
from storeadmin.core import AdminApiClient, AdminContext, db

TEST_SHOP = "test-shop.myshopify.com"


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for test databases, cleaned up after."""
    d = tempfile.mkdtemp(prefix="storeadmin-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def graphql():
    """Stand-in for AdminApiClient.graphql; set return_value / side_effect per test."""
    return MagicMock(name="graphql")


@pytest.fixture
def admin_context(graphql):
    client = MagicMock(spec=AdminApiClient)
    client.graphql = graphql
    return AdminContext(shop=TEST_SHOP, access_token="shpat_test", admin=client)


def make_app(db_dir, authenticator=None):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["DB_DIR"] = db_dir
    app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + os.path.join(db_dir, "storeadmin.db")
    app.config["SHOPIFY_SHOP"] = ""
    app.config["SHOPIFY_ACCESS_TOKEN"] = ""
    StoreAdmin(app, authenticator=authenticator)
    return app


@pytest.fixture
def app(tmp_db_dir, admin_context):
    """Fully initialised Flask app whose requests authenticate as TEST_SHOP."""
    app = make_app(tmp_db_dir, authenticator=lambda request: admin_context)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
